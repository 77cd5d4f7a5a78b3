"""
Generator: native values back to LISN text.

Two layouts share one set of atom rules:

- compact: (map(name value)(name value)) and (list a b c), no optional spaces
- pretty: a map or list stays on one line while indent + display_length < max_line_length,
  otherwise each child goes on its own line, indent_width deeper, and the closing
  bracket returns to the parent indent

Strings are written bare unless reading them back would give something else
(a number, a reserved word, several tokens, an escape). Those are wrapped in
double quotes, which the reader keeps verbatim. A string holding a double quote
cannot be quoted and is written as a bare symbol with backslash escapes instead.
"""

from __future__ import annotations

import logging
import math
from io import StringIO

from lisn import NativeValue
from lisn.config import merge_options
from lisn.errors import LisnGenerationError
from lisn.reader.chars import (
    ESCAPE,
    ESCAPES,
    HEX_DIGITS,
    LITERAL_QUOTE,
    NUMBER_START,
    RESERVED_SYMBOLS,
    is_delimiter,
)

logger = logging.getLogger(__name__)

# character -> escape letter, the reverse of the reader's table
SYMBOL_ESCAPES = {char: letter for letter, char in ESCAPES.items() if letter != "'"}


# ----------------- Atoms -----------------
def needs_literal(s: str) -> bool:
    """True when a bare s would not read back as the same string."""
    if not s or s in RESERVED_SYMBOLS:
        return True
    if s[0] in NUMBER_START:
        return True
    return any(is_delimiter(c) or c == ESCAPE for c in s)


def escape_symbol(s: str) -> str:
    out: list[str] = []
    after_hex_escape = False
    for i, c in enumerate(s):
        if c in SYMBOL_ESCAPES:
            out.append(ESCAPE + SYMBOL_ESCAPES[c])
            after_hex_escape = False
        elif (i == 0 and c in NUMBER_START) or is_delimiter(c) or (after_hex_escape and c in HEX_DIGITS):
            # \u reads every following hex digit, so a hex digit after it is escaped too
            out.append(f"{ESCAPE}u{ord(c):x}")
            after_hex_escape = True
        else:
            out.append(c)
            after_hex_escape = False
    return "".join(out)


def string_to_text(s: str) -> str:
    if LITERAL_QUOTE in s:
        return escape_symbol(s)
    if needs_literal(s):
        return LITERAL_QUOTE + s + LITERAL_QUOTE
    return s


def int_to_text(i: int) -> str:
    try:
        return str(i)
    except ValueError as exc:
        # interpreter limit on int-to-string digits
        raise LisnGenerationError(f"Integer too large to render: {exc}") from exc


def float_to_text(f: float) -> str:
    if not math.isfinite(f):
        raise LisnGenerationError(f"Unsupported value kind: non-finite float {f!r}")
    # the reader accepts 1e16 and 1e-05 but not 1e+16
    return repr(f).replace("e+", "e")


def value_to_text(value: NativeValue) -> str:
    """Text of null, booleans, numbers and strings."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int_to_text(value)
    if isinstance(value, float):
        return float_to_text(value)
    if isinstance(value, str):
        return string_to_text(value)
    raise LisnGenerationError(f"Unsupported value kind: {type(value).__name__}")


def key_to_text(key: object) -> str:
    if not isinstance(key, str):
        raise LisnGenerationError(f"Map keys must be strings, got {type(key).__name__}")
    return string_to_text(key)


# ----------------- Compact -----------------
def to_compact_text(value: NativeValue) -> str:
    with StringIO() as buffer:
        try:
            _write_compact(value, buffer)
        except RecursionError as exc:
            raise LisnGenerationError("Value is nested too deeply") from exc
        return buffer.getvalue()


def _write_compact(value: NativeValue, out: StringIO) -> None:
    if isinstance(value, dict):
        out.write("(map")
        for key, val in value.items():
            _write_pair(key, val, out)
        out.write(")")
    elif isinstance(value, (list, tuple)):
        if not value:
            out.write("()")
            return
        out.write("(list")
        for item in value:
            out.write(" ")
            _write_compact(item, out)
        out.write(")")
    else:
        out.write(value_to_text(value))


def _write_pair(key: object, val: NativeValue, out: StringIO) -> None:
    out.write("(")
    out.write(key_to_text(key))
    out.write(" ")
    _write_compact(val, out)
    out.write(")")


def pair_to_text(key: str, val: NativeValue) -> str:
    with StringIO() as buffer:
        _write_pair(key, val, buffer)
        return buffer.getvalue()


# ----------------- Width estimate -----------------
def display_length(value: NativeValue) -> int:
    """Approximate columns needed to show value on one line.

    Used only to decide whether to wrap: list form names and the quotes
    around string values are not counted.
    """
    if value is None:
        return 4
    if isinstance(value, bool):
        return 4 if value else 5
    if isinstance(value, str):
        return len(value)
    if isinstance(value, (int, float)):
        return len(value_to_text(value))
    if isinstance(value, (list, tuple)):
        if not value:
            return 2
        return sum(display_length(item) for item in value) + len(value) - 1 + 2
    if isinstance(value, dict):
        return 4 + sum(
            len(key_to_text(key)) + 1 + len(to_compact_text(val))
            for key, val in value.items()
        )
    raise LisnGenerationError(f"Unsupported value kind: {type(value).__name__}")


# ----------------- Pretty -----------------
def to_pretty_text(value: NativeValue, options: dict | None = None) -> str:
    opts = merge_options(options)
    try:
        return pprint_value(value, 0, opts["max_line_length"], opts["indent_width"])
    except RecursionError as exc:
        raise LisnGenerationError("Value is nested too deeply") from exc


def pprint_value(value: NativeValue, indent: int, width: int, step: int) -> str:
    if isinstance(value, dict):
        return _pprint_map(value, indent, width, step)
    if isinstance(value, (list, tuple)):
        return _pprint_list(value, indent, width, step)
    return value_to_text(value)


def _pprint_list(items: list | tuple, indent: int, width: int, step: int) -> str:
    if not items:
        return "()"
    if indent + display_length(items) < width:
        return to_compact_text(items)

    logger.debug("wrapping list of %d items at indent %d", len(items), indent)
    pad = " " * (indent + step)
    lines = ["(list"]
    for item in items:
        lines.append(pad + pprint_value(item, indent + step, width, step))
    lines.append(" " * indent + ")")
    return "\n".join(lines)


def _pprint_map(m: dict, indent: int, width: int, step: int) -> str:
    if not m:
        return "(map)"
    if indent + display_length(m) < width:
        return "(map " + "".join(pair_to_text(key, val) for key, val in m.items()) + ")"

    logger.debug("wrapping map of %d entries at indent %d", len(m), indent)
    pad = " " * (indent + step)
    lines = ["(map"]
    for key, val in m.items():
        lines.append(pad + _pprint_pair(key, val, indent + step, width, step))
    lines.append(" " * indent + ")")
    return "\n".join(lines)


def _pprint_pair(key: str, val: NativeValue, indent: int, width: int, step: int) -> str:
    name = key_to_text(key)
    compact = to_compact_text(val)
    if indent + len(name) + len(compact) + 3 < width:
        return "(" + name + " " + compact + ")"
    return (
        "(" + name + "\n"
        + " " * (indent + step) + pprint_value(val, indent + step, width, step) + "\n"
        + " " * indent + ")"
    )
