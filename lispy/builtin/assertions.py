"""Argument checks shared by the builtins.

Each check returns an Error value describing the first violation, or None
when the arguments are acceptable, so builtins read as a series of guards:

    if (err := check_count("head", args, 1)) is not None:
        return err
"""

from __future__ import annotations

from typing import Optional

from lispy import LispValue
from lispy.types.error import EmptyContainer, Error, WrongArgumentCount, WrongArgumentType
from lispy.types.value import type_name


def check_count(name: str, args: list[LispValue], expected: int) -> Optional[Error]:
    if len(args) != expected:
        return WrongArgumentCount(name, len(args), expected)
    return None


def check_min_count(name: str, args: list[LispValue], minimum: int) -> Optional[Error]:
    if len(args) < minimum:
        return WrongArgumentCount(name, len(args), minimum)
    return None


def check_type(name: str, args: list[LispValue], index: int, *expected: str) -> Optional[Error]:
    """`expected` lists acceptable variant names, e.g. "Q-Expression"."""
    got = type_name(args[index])
    if got not in expected:
        return WrongArgumentType(name, index, got, " or ".join(expected))
    return None


def check_all(name: str, args: list[LispValue], *expected: str) -> Optional[Error]:
    for i in range(len(args)):
        if (err := check_type(name, args, i, *expected)) is not None:
            return err
    return None


def check_not_empty(name: str, args: list[LispValue], index: int) -> Optional[Error]:
    if len(args[index]) == 0:
        return EmptyContainer(name)
    return None
