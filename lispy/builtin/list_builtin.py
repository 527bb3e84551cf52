"""List builtins: list head tail join cons len init eval

These operate on Q-Expressions; `head`, `tail` and `join` also accept Strings,
treated as a sequence of one-character strings.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.builtin.assertions import (
    check_count,
    check_min_count,
    check_not_empty,
    check_type,
)
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.expr import QExpr, to_sexpr
from lispy.types.value import type_name


def list_builtin(env: Environment, args: list[LispValue]) -> QExpr:
    """(list a b c) -> {a b c}; the argument list itself becomes the data."""
    return QExpr(args)


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """First element of a list as a one-element list, or first character."""
    if (err := check_count("head", args, 1)) is not None:
        return err
    if (err := check_type("head", args, 0, "Q-Expression", "String")) is not None:
        return err
    if (err := check_not_empty("head", args, 0)) is not None:
        return err

    xs = args[0]
    if isinstance(xs, str):
        return xs[0]
    del xs.cells[1:]
    return xs


def tail(env: Environment, args: list[LispValue]) -> LispValue:
    """Everything but the first element (or character)."""
    if (err := check_count("tail", args, 1)) is not None:
        return err
    if (err := check_type("tail", args, 0, "Q-Expression", "String")) is not None:
        return err
    if (err := check_not_empty("tail", args, 0)) is not None:
        return err

    xs = args[0]
    if isinstance(xs, str):
        return xs[1:]
    xs.pop(0)
    return xs


def init(env: Environment, args: list[LispValue]) -> LispValue:
    """Everything but the last element."""
    if (err := check_count("init", args, 1)) is not None:
        return err
    if (err := check_type("init", args, 0, "Q-Expression")) is not None:
        return err
    if (err := check_not_empty("init", args, 0)) is not None:
        return err

    xs = args[0]
    xs.pop(-1)
    return xs


def length(env: Environment, args: list[LispValue]) -> LispValue:
    if (err := check_count("len", args, 1)) is not None:
        return err
    if (err := check_type("len", args, 0, "Q-Expression")) is not None:
        return err
    if (err := check_not_empty("len", args, 0)) is not None:
        return err
    return float(len(args[0]))


def join(env: Environment, args: list[LispValue]) -> LispValue:
    """Concatenate lists, or strings, in argument order.

    The first argument decides which: mixing lists and strings is an error.
    """
    if (err := check_min_count("join", args, 1)) is not None:
        return err
    if (err := check_type("join", args, 0, "Q-Expression", "String")) is not None:
        return err

    expected = type_name(args[0])
    for i in range(1, len(args)):
        if (err := check_type("join", args, i, expected)) is not None:
            return err

    if isinstance(args[0], str):
        return "".join(args)

    result = args[0]
    for xs in args[1:]:
        result.cells.extend(xs.cells)
    return result


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """(cons a {b c}) -> {a b c}"""
    if (err := check_count("cons", args, 2)) is not None:
        return err
    if (err := check_type("cons", args, 1, "Q-Expression")) is not None:
        return err

    value, xs = args
    xs.cells.insert(0, value)
    return xs


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate a Q-Expression as if it were an S-Expression."""
    if (err := check_count("eval", args, 1)) is not None:
        return err
    if (err := check_type("eval", args, 0, "Q-Expression")) is not None:
        return err
    return evaluate(to_sexpr(args[0]), env)

