from lisn import EvaluatorFn
from lisn import SExpression, NativeValue
from lisn.errors import LisnArityError, LisnTypeError
from lisn.evaluation.quoting import evaluate_quoted

REF_KEY = "@ref"


def ref_form(
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> NativeValue:
    """(@ref id) -> {"@ref": id}. The id is left for the archiver to resolve."""
    if len(tail) != 1:
        raise LisnArityError("@ref expects exactly one argument: (@ref id)")
    target = evaluate_quoted(tail[0])
    if not isinstance(target, str):
        raise LisnTypeError(f"@ref target must be a string, got {target!r}")
    return {REF_KEY: target}
