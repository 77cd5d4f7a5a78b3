# Core type aliases for the LISN data model.
# Parsed forms are either primitives or chains of Cell pairs; evaluated values use
# plain Python types (None, bool, int, float, str, list, dict).
#
# Naming guidance:
# - SExpression: Use in reader/evaluator code to denote parsed, unevaluated forms.
# - NativeValue: Use in evaluator/generator code to denote evaluated values.
# Cells never appear inside a NativeValue.

from typing import Any, Callable, Union

# Parsed form alias: a primitive or a Cell chain
SExpression = Any
# Evaluated value alias
NativeValue = Union[None, bool, int, float, str, list, dict]

# Evaluator function type: passed to special form handlers
EvaluatorFn = Callable[[SExpression], NativeValue]

__version__ = "1.0.0"

from lisn.errors import (  # noqa: E402
    LisnError,
    LisnParseError,
    LisnEvalError,
    LisnUnrecognizedForm,
    LisnArityError,
    LisnTypeError,
    LisnQuoteError,
    LisnGenerationError,
)
from lisn.types.cell import Cell  # noqa: E402
from lisn.reader.parser import parse  # noqa: E402
from lisn.evaluation.evaluator import evaluate, evaluate_quoted, evaluate_text  # noqa: E402
from lisn.printer.generator import (  # noqa: E402
    to_compact_text,
    to_pretty_text,
    value_to_text,
    display_length,
)


def loads(text: str, options: dict | None = None) -> NativeValue:
    """Parse and evaluate one expression."""
    return evaluate(parse(text, options))


def dumps(value: NativeValue, pretty: bool = False, options: dict | None = None) -> str:
    """Render a native value as compact or pretty text."""
    if pretty:
        return to_pretty_text(value, options)
    return to_compact_text(value)


__all__ = [
    "SExpression",
    "NativeValue",
    "EvaluatorFn",
    "Cell",
    "parse",
    "evaluate",
    "evaluate_quoted",
    "evaluate_text",
    "to_compact_text",
    "to_pretty_text",
    "value_to_text",
    "display_length",
    "loads",
    "dumps",
    "LisnError",
    "LisnParseError",
    "LisnEvalError",
    "LisnUnrecognizedForm",
    "LisnArityError",
    "LisnTypeError",
    "LisnQuoteError",
    "LisnGenerationError",
]
