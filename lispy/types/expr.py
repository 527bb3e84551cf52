"""List values: S-Expressions are evaluated, Q-Expressions are inert data."""

from __future__ import annotations

from typing import Iterable, Iterator

from lispy import LispValue
from lispy.types.value import copy_value, is_equal


class Expr:
    """Ordered sequence of values exclusively owned by this container."""

    __slots__ = ("cells",)

    type_name = "Expression"
    open_char = "("
    close_char = ")"

    def __init__(self, cells: Iterable[LispValue] | None = None):
        self.cells: list[LispValue] = list(cells) if cells is not None else []

    def copy(self) -> Expr:
        """Deep copy: every element is copied, nothing is shared."""
        return type(self)(copy_value(c) for c in self.cells)

    def pop(self, index: int = 0) -> LispValue:
        return self.cells.pop(index)

    def append(self, value: LispValue) -> Expr:
        self.cells.append(value)
        return self

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        # SExpr and QExpr are distinct variants and never compare equal
        if type(self) is not type(other):
            return False
        if len(self.cells) != len(other.cells):
            return False
        return all(is_equal(a, b) for a, b in zip(self.cells, other.cells))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    __slots__ = ()

    type_name = "S-Expression"
    open_char = "("
    close_char = ")"


class QExpr(Expr):
    __slots__ = ()

    type_name = "Q-Expression"
    open_char = "{"
    close_char = "}"


def to_qexpr(expr: Expr) -> QExpr:
    """Retag a list as a Q-Expression; its elements move over untouched."""
    if isinstance(expr, QExpr):
        return expr
    return QExpr(expr.cells)


def to_sexpr(expr: Expr) -> SExpr:
    """Retag a list as an S-Expression so the evaluator will reduce it."""
    if isinstance(expr, SExpr):
        return expr
    return SExpr(expr.cells)
