"""Arithmetic builtins: + - * / % ^

Every operator folds its Number arguments left to right starting from the
first one. A single argument to `-` is negated.
"""

from __future__ import annotations

import math

from lispy import LispValue
from lispy.builtin.assertions import check_all, check_min_count
from lispy.types.environment import Environment
from lispy.types.error import DivisionByZero, Error, UndefinedPower


def _power(x: float, y: float) -> float:
    """C `pow`: overflow saturates to infinity, domain errors give nan/inf."""
    try:
        return math.pow(x, y)
    except OverflowError:
        odd_exponent = y.is_integer() and y % 2 == 1
        return -math.inf if x < 0 and odd_exponent else math.inf
    except ValueError:
        # 0 raised to a negative power, or a negative base to a fraction
        return math.inf if x == 0 else math.nan


def _fmod(x: float, y: float) -> float:
    """C `fmod`: an infinite dividend gives nan."""
    try:
        return math.fmod(x, y)
    except ValueError:
        return math.nan


def _step(op: str, x: float, y: float) -> float | Error:
    match op:
        case "+":
            return x + y
        case "-":
            return x - y
        case "*":
            return x * y
        case "/":
            if y == 0:
                return DivisionByZero()
            return x / y
        case "%":
            if y == 0:
                return DivisionByZero()
            return _fmod(x, y)
        case "^":
            if x == 0 and y == 0:
                return UndefinedPower()
            return _power(x, y)
    raise ValueError(f"Unknown arithmetic operator {op!r}")


def arith_op(env: Environment, args: list[LispValue], op: str) -> LispValue:
    """Fold `op` over Number arguments; the first error stops the fold."""
    if (err := check_min_count(op, args, 1)) is not None:
        return err
    if (err := check_all(op, args, "Number")) is not None:
        return err

    x = float(args[0])

    if op == "-" and len(args) == 1:
        return -x

    for y in args[1:]:
        x = _step(op, x, float(y))
        if isinstance(x, Error):
            return x
    return x


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return arith_op(env, args, "+")


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    return arith_op(env, args, "-")


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return arith_op(env, args, "*")


def div(env: Environment, args: list[LispValue]) -> LispValue:
    return arith_op(env, args, "/")


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    return arith_op(env, args, "%")


def power(env: Environment, args: list[LispValue]) -> LispValue:
    return arith_op(env, args, "^")
