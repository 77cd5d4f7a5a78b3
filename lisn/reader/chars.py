"""Character classes shared by the reader and the generator."""

# a token starting with one of these is read as a number
NUMBER_START = frozenset("-.0123456789")
# characters accepted inside a numeric token
NUMBER_CHARS = frozenset("-.e0123456789")
# presence of either marks the number as floating point
FLOAT_MARKERS = frozenset(".e")
HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")

LIST_OPEN = "("
LIST_CLOSE = ")"
LITERAL_QUOTE = '"'
ESCAPE = "\\"

# backslash escapes inside bare symbols; \u<hex> is handled separately
ESCAPES: dict[str, str] = {
    "\\": "\\",
    "'": "'",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "s": " ",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}

# symbols read as primitives rather than strings
RESERVED_SYMBOLS: dict[str, object] = {
    "true": True,
    "false": False,
    "null": None,
}


def is_delimiter(c: str) -> bool:
    """True when c ends a bare symbol."""
    return c.isspace() or c == LIST_OPEN or c == LIST_CLOSE
