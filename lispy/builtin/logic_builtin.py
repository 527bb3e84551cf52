"""Comparison and boolean builtins: == != > < >= <= ! || &&

Truth values are Numbers: 0 is false, anything else is true. Results are
always 1 or 0.
"""

from __future__ import annotations

import operator
from typing import Callable

from lispy import LispValue
from lispy.builtin.assertions import check_all, check_count
from lispy.types.environment import Environment
from lispy.types.value import is_equal

ORDERING: dict[str, Callable[[float, float], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}


def _truth(flag: bool) -> float:
    return 1.0 if flag else 0.0


def equals(env: Environment, args: list[LispValue]) -> LispValue:
    """Structural equality of exactly two values of any type."""
    if (err := check_count("==", args, 2)) is not None:
        return err
    return _truth(is_equal(args[0], args[1]))


def not_equals(env: Environment, args: list[LispValue]) -> LispValue:
    if (err := check_count("!=", args, 2)) is not None:
        return err
    return _truth(not is_equal(args[0], args[1]))


def ordering_op(env: Environment, args: list[LispValue], op: str) -> LispValue:
    if (err := check_count(op, args, 2)) is not None:
        return err
    if (err := check_all(op, args, "Number")) is not None:
        return err
    return _truth(ORDERING[op](args[0], args[1]))


def gt(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering_op(env, args, ">")


def lt(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering_op(env, args, "<")


def gte(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering_op(env, args, ">=")


def lte(env: Environment, args: list[LispValue]) -> LispValue:
    return ordering_op(env, args, "<=")


def logical_not(env: Environment, args: list[LispValue]) -> LispValue:
    if (err := check_count("!", args, 1)) is not None:
        return err
    if (err := check_all("!", args, "Number")) is not None:
        return err
    return _truth(args[0] == 0)


def logical_or(env: Environment, args: list[LispValue]) -> LispValue:
    if (err := check_count("||", args, 2)) is not None:
        return err
    if (err := check_all("||", args, "Number")) is not None:
        return err
    return _truth(args[0] != 0 or args[1] != 0)


def logical_and(env: Environment, args: list[LispValue]) -> LispValue:
    if (err := check_count("&&", args, 2)) is not None:
        return err
    if (err := check_all("&&", args, "Number")) is not None:
        return err
    return _truth(args[0] != 0 and args[1] != 0)
