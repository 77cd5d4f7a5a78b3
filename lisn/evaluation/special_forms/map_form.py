from lisn import EvaluatorFn
from lisn import SExpression, NativeValue
from lisn.errors import LisnArityError, LisnTypeError
from lisn.evaluation.quoting import evaluate_quoted
from lisn.types.cell import Cell


def map_form(
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> NativeValue:
    # A repeated name overwrites the value and keeps the first position.
    result: dict[str, NativeValue] = {}
    for pair in tail:
        if not isinstance(pair, Cell):
            raise LisnTypeError(f"map entries must be (name value) lists, got {pair!r}")
        entry = list(pair)
        if len(entry) != 2:
            raise LisnArityError(f"map entry requires exactly a name and a value: {pair}")
        name_expr, value_expr = entry
        name = evaluate_quoted(name_expr)
        if not isinstance(name, str):
            raise LisnTypeError(f"map entry name must be a string, got {name!r}")
        result[name] = evaluate_fn(value_expr)
    return result
