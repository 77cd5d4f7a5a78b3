from lisn import EvaluatorFn
from lisn import SExpression, NativeValue


def list_form(
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> NativeValue:
    return [evaluate_fn(item) for item in tail]
