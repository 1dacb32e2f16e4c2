"""List values: evaluable S-expressions and quoted Q-expressions."""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Any, Iterable


class ExprKind(Enum):
    SEXPR = "S-Expression"
    QEXPR = "Q-Expression"


_DELIMITERS = {
    ExprKind.SEXPR: ("(", ")"),
    ExprKind.QEXPR: ("{", "}"),
}


class Expr:
    """An ordered, exclusively owned list of values.

    `cells` is a plain Python list. Sexpr reduction replaces its elements in
    place; nothing else mutates a list after construction except builtins
    working on their own argument copies.
    """

    __slots__ = ("kind", "cells")

    def __init__(self, kind: ExprKind, cells: Iterable[Any] = ()):
        self.kind: ExprKind = kind
        self.cells: list[Any] = list(cells)

    @classmethod
    def sexpr(cls, cells: Iterable[Any] = ()) -> Expr:
        return cls(ExprKind.SEXPR, cells)

    @classmethod
    def qexpr(cls, cells: Iterable[Any] = ()) -> Expr:
        return cls(ExprKind.QEXPR, cells)

    @property
    def type_name(self) -> str:
        return self.kind.value

    @property
    def is_sexpr(self) -> bool:
        return self.kind is ExprKind.SEXPR

    @property
    def is_qexpr(self) -> bool:
        return self.kind is ExprKind.QEXPR

    def copy(self) -> Expr:
        return Expr(self.kind, [cell.copy() for cell in self.cells])

    def as_kind(self, kind: ExprKind) -> Expr:
        """Reinterpret this list under another tag, reusing its cells."""
        self.kind = kind
        return self

    def pop(self, index: int = 0) -> Any:
        return self.cells.pop(index)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index: int) -> Any:
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        if self.kind is not other.kind or len(self.cells) != len(other.cells):
            return False
        return all(a == b for a, b in zip(self.cells, other.cells))

    __hash__ = None

    def __str__(self) -> str:
        opening, closing = _DELIMITERS[self.kind]
        with StringIO() as buffer:
            buffer.write(opening)
            buffer.write(" ".join(str(cell) for cell in self.cells))
            buffer.write(closing)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Expr({self.kind.name}, {self.cells!r})"
