"""Descriptor for native operations.

A builtin is identified by its name (its tag), not by the identity of the
Python callable behind it; printing and equality both branch on the name.
"""

from __future__ import annotations

from lispy import BuiltinFn, LispValue


class Builtin:
    __slots__ = ("name", "op")

    type_name = "Function"

    def __init__(self, name: str, op: BuiltinFn):
        self.name = name
        self.op = op

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.op(env, args)

    def copy(self) -> Builtin:
        # The tag is copied by value: descriptors are immutable and shared
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.name == other.name

    __hash__ = None

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"
