"""Evaluator for LISN expressions.

Turns a parsed expression into native values. Primitives evaluate to
themselves; a list must be one of the special forms in SPECIAL_FORMS.
The reference forms are passed through as data for the archiver.
"""

from __future__ import annotations

import logging
from typing import TextIO

from lisn import SExpression, NativeValue
from lisn.errors import LisnEvalError, LisnTypeError, LisnUnrecognizedForm
from lisn.evaluation.quoting import evaluate_quoted, is_primitive
from lisn.evaluation.special_forms import SPECIAL_FORMS
from lisn.reader.parser import parse
from lisn.types.cell import Cell

logger = logging.getLogger(__name__)

__all__ = ["evaluate", "evaluate_quoted", "evaluate_text"]


def evaluate(expr: SExpression) -> NativeValue:
    try:
        return evaluate0(expr)
    except RecursionError as exc:
        raise LisnEvalError("Expression is nested too deeply") from exc


def evaluate0(expr: SExpression) -> NativeValue:
    """Single recursive step; special forms call back into it for their elements."""
    if is_primitive(expr):
        return expr
    if not isinstance(expr, Cell):
        raise LisnTypeError(f"Unrecognised type for evaluation: {expr!r}")

    match list(expr):
        case [str() as head, *tail_args] if head in SPECIAL_FORMS:
            logger.debug("evaluating %s form with %d elements", head, len(tail_args))
            return SPECIAL_FORMS[head](tail_args, evaluate0)
        case [head, *_]:
            raise LisnUnrecognizedForm(f"Unrecognised head of form for evaluation: {head!r}")


def evaluate_text(source: str | TextIO, options: dict | None = None) -> NativeValue:
    """Parse one expression and evaluate it."""
    return evaluate(parse(source, options))
