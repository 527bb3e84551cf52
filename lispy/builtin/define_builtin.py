"""Binding builtins: def and =

(def {a b} 1 2) binds into the root frame, so definitions made inside a
lambda body are visible to every later caller. (= {a b} 1 2) binds into the
frame of the calling environment only, which keeps lambda-local state
private.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.builtin.assertions import check_min_count, check_type
from lispy.types.environment import Environment
from lispy.types.error import WrongArgumentCount, WrongArgumentType
from lispy.types.expr import SExpr
from lispy.types.value import type_name


def bind_values(env: Environment, args: list[LispValue], name: str) -> LispValue:
    if (err := check_min_count(name, args, 1)) is not None:
        return err
    if (err := check_type(name, args, 0, "Q-Expression")) is not None:
        return err

    syms = args[0]
    for sym in syms:
        if type_name(sym) != "Symbol":
            return WrongArgumentType(name, 0, type_name(sym), "Symbol")

    values = args[1:]
    if len(syms) != len(values):
        return WrongArgumentCount(name, len(values), len(syms))

    for sym, value in zip(syms, values):
        if name == "def":
            env.define_global(sym, value)
        else:
            env.define(sym, value)

    return SExpr()


def define(env: Environment, args: list[LispValue]) -> LispValue:
    return bind_values(env, args, "def")


def assign(env: Environment, args: list[LispValue]) -> LispValue:
    return bind_values(env, args, "=")
