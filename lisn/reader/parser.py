"""
  LISN Reader

- Recursive descent over single characters with pushback
- Reads exactly one expression per call; anything after it is left unread
- Emits Python primitives and Cell chains:

    - null / true / false -> None / True / False
    - bare symbols -> str (backslash escapes applied)
    - "quoted literals" -> str (verbatim, no escapes)
    - numbers -> int, or float when '.' or 'e' appears
    - (a b c) -> Cell('a', Cell('b', Cell('c')))
    - () -> None
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import TextIO

from lisn import SExpression
from lisn.config import merge_options
from lisn.errors import LisnParseError
from lisn.types.cell import Cell
from lisn.reader.chars import (
    ESCAPE,
    ESCAPES,
    FLOAT_MARKERS,
    HEX_DIGITS,
    LIST_CLOSE,
    LIST_OPEN,
    LITERAL_QUOTE,
    NUMBER_CHARS,
    NUMBER_START,
    RESERVED_SYMBOLS,
    is_delimiter,
)

logger = logging.getLogger(__name__)

MAX_CODE_POINT = 0x10FFFF


class CharStream:
    """Character source with pushback. read() returns '' at end of input."""

    def __init__(self, source: str | TextIO):
        self.source: TextIO = StringIO(source) if isinstance(source, str) else source
        self.buffer: list[str] = []

    def read(self) -> str:
        if self.buffer:
            return self.buffer.pop()
        try:
            c = self.source.read(1)
        except OSError as exc:
            raise LisnParseError(f"Failed to read input: {exc}") from exc
        if not isinstance(c, str):
            raise LisnParseError(f"Expected a text stream, read {type(c).__name__}")
        return c

    def unread(self, c: str) -> None:
        if c:
            self.buffer.append(c)


class Reader:
    def __init__(self, source: str | TextIO, options: dict | None = None):
        self.stream = CharStream(source)
        self.strict: bool = merge_options(options)["strict"]

    def read(self) -> SExpression:
        """Read one top-level expression."""
        c = self.skip_whitespace()
        if c == "":
            raise LisnParseError("Unexpected end of input, expected an expression")
        if c == LIST_CLOSE:
            raise LisnParseError("Unexpected ')' with no matching '('")
        return self.parse_expr()

    def skip_whitespace(self) -> str:
        """Consume whitespace and return the next character without consuming it."""
        c = self.stream.read()
        while c and c.isspace():
            c = self.stream.read()
        self.stream.unread(c)
        return c

    def parse_expr(self) -> SExpression:
        c = self.skip_whitespace()
        if c == LIST_OPEN:
            return self.read_list()
        if c == LITERAL_QUOTE:
            return self.read_literal()
        if c in NUMBER_START:
            return self.read_number()
        text = self.read_symbol()
        if text in RESERVED_SYMBOLS:
            return RESERVED_SYMBOLS[text]
        return text

    def read_list(self) -> Cell | None:
        self.stream.read()  # consume '('
        items: list[SExpression] = []
        while True:
            c = self.stream.read()
            if c == "":
                if self.strict:
                    raise LisnParseError("Unexpected end of input, expected ')'")
                logger.debug("closing unterminated list of %d items at end of input", len(items))
                break
            if c == LIST_CLOSE:
                break
            if c.isspace():
                continue
            self.stream.unread(c)
            items.append(self.parse_expr())
        return Cell.from_list(items)

    def read_literal(self) -> str:
        self.stream.read()  # consume the opening quote
        chars: list[str] = []
        while True:
            c = self.stream.read()
            if c == "":
                raise LisnParseError("Reached end of input when reading quoted string")
            if c == LITERAL_QUOTE:
                return "".join(chars)
            chars.append(c)

    def read_number(self) -> int | float | None:
        chars: list[str] = []
        is_float = False
        while True:
            c = self.stream.read()
            if c and c in NUMBER_CHARS:
                chars.append(c)
                is_float = is_float or c in FLOAT_MARKERS
            else:
                self.stream.unread(c)
                break
        text = "".join(chars)
        if not text:
            if self.strict:
                raise LisnParseError("Expected a number")
            logger.debug("empty numeric token read as null")
            return None
        try:
            return float(text) if is_float else int(text)
        except ValueError as exc:
            raise LisnParseError(f"Malformed number {text!r}") from exc

    def read_symbol(self) -> str:
        chars: list[str] = []
        while True:
            c = self.stream.read()
            if c == "":
                break
            if is_delimiter(c):
                self.stream.unread(c)
                break
            if c == ESCAPE:
                chars.append(self.read_escape())
            else:
                chars.append(c)
        return "".join(chars)

    def read_escape(self) -> str:
        c = self.stream.read()
        if c == "u":
            return self.read_hex_char()
        if c in ESCAPES:
            return ESCAPES[c]
        if c == "":
            raise LisnParseError("Unexpected end of input after '\\'")
        raise LisnParseError(f"Unknown escape sequence '\\{c}'")

    def read_hex_char(self) -> str:
        digits: list[str] = []
        while True:
            c = self.stream.read()
            if c and c in HEX_DIGITS:
                digits.append(c)
            else:
                self.stream.unread(c)
                break
        if not digits:
            return "\0"
        code = int("".join(digits), 16)
        if code > MAX_CODE_POINT:
            raise LisnParseError(f"Code point \\u{''.join(digits)} out of range")
        return chr(code)


def parse(source: str | TextIO, options: dict | None = None) -> SExpression:
    """Read one expression from text or a text stream."""
    try:
        return Reader(source, options).read()
    except RecursionError as exc:
        raise LisnParseError("Expression is nested too deeply") from exc
