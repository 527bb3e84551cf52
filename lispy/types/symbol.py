from __future__ import annotations
import sys


class Symbol:
    """A name resolved through the environment chain when evaluated."""

    __slots__ = ("id",)

    type_name = "Symbol"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def copy(self) -> Symbol:
        # Symbols are immutable
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Reserved formal-parameter marker for variadic capture
VARIADIC = Symbol("&")
