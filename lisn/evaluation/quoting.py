from lisn import SExpression, NativeValue
from lisn.errors import LisnQuoteError


def is_primitive(expr: SExpression) -> bool:
    return expr is None or isinstance(expr, (str, bool, int, float))


def evaluate_quoted(expr: SExpression) -> NativeValue:
    """Evaluate in name position: only primitives are allowed, nested forms are rejected."""
    if is_primitive(expr):
        return expr
    raise LisnQuoteError(f"Expected a primitive, got a nested form: {expr}")
