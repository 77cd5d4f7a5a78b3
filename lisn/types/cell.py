"""Pair cell used to mirror source nesting between reading and evaluation."""

from __future__ import annotations

from typing import Iterable, Iterator

from lisn import SExpression
from lisn.errors import LisnTypeError


class Cell:
    """A (car, cdr) pair; a chain of cells terminated by None is a list."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: SExpression, cdr: Cell | None = None):
        self.car: SExpression = car
        self.cdr: Cell | None = cdr

    @classmethod
    def from_list(cls, items: Iterable[SExpression]) -> Cell | None:
        """Build a chain from a sequence; an empty sequence gives None."""
        head: Cell | None = None
        for item in reversed(list(items)):
            head = cls(item, head)
        return head

    def cadr(self) -> SExpression:
        if not isinstance(self.cdr, Cell):
            raise LisnTypeError(f"cadr of a list with no second element: {self}")
        return self.cdr.car

    def __iter__(self) -> Iterator[SExpression]:
        cell: Cell | None = self
        while cell is not None:
            if not isinstance(cell, Cell):
                raise LisnTypeError(f"Improper list tail: {cell!r}")
            yield cell.car
            cell = cell.cdr

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        a: Cell | None = self
        b: Cell | None = other
        while isinstance(a, Cell) and isinstance(b, Cell):
            if type(a.car) is not type(b.car) or a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a is None and b is None

    def __repr__(self) -> str:
        return f"Cell({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        return string_of(self)


def string_of(expr: SExpression) -> str:
    """Render a parsed expression as nested parentheses, for diagnostics."""
    if expr is None:
        return ""
    if isinstance(expr, bool):
        return "true" if expr else "false"
    if not isinstance(expr, Cell):
        return str(expr)
    return "(" + " ".join(string_of(item) for item in expr) + ")"
