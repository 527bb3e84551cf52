"""Registry of builtin functions for the Lispy runtime environment.

Maps names to Builtin descriptors. Every descriptor is created once here and
copied into the root environment by `register`. `load` needs the parser
context of the interpreter it belongs to, so it is bound at registration.
"""

from __future__ import annotations

from functools import partial

from lispy.builtin.arith_builtin import add, sub, mul, div, mod, power
from lispy.builtin.define_builtin import define, assign
from lispy.builtin.if_builtin import if_builtin
from lispy.builtin.io_builtin import load, print_builtin, read, error, env_builtin, exit_builtin
from lispy.builtin.lambda_builtin import lambda_builtin, fun
from lispy.builtin.list_builtin import list_builtin, head, tail, join, cons, length, init, eval_builtin
from lispy.builtin.logic_builtin import (
    equals,
    not_equals,
    gt,
    lt,
    gte,
    lte,
    logical_not,
    logical_or,
    logical_and,
)
from lispy.reader.reader import Reader
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment

BUILTINS: dict[str, Builtin] = {
    name: Builtin(name, op)
    for name, op in (
        # List functions
        ("list", list_builtin),
        ("head", head),
        ("tail", tail),
        ("join", join),
        ("cons", cons),
        ("len", length),
        ("init", init),
        ("eval", eval_builtin),
        # Mathematical functions
        ("+", add),
        ("-", sub),
        ("*", mul),
        ("/", div),
        ("%", mod),
        ("^", power),
        # Comparison functions
        ("==", equals),
        ("!=", not_equals),
        (">", gt),
        ("<", lt),
        (">=", gte),
        ("<=", lte),
        ("!", logical_not),
        ("||", logical_or),
        ("&&", logical_and),
        # Variable functions
        ("def", define),
        ("=", assign),
        ("\\", lambda_builtin),
        ("fun", fun),
        # Control flow
        ("if", if_builtin),
        # I/O and meta
        ("print", print_builtin),
        ("read", read),
        ("error", error),
        ("env", env_builtin),
        ("exit", exit_builtin),
    )
}


def register(env: Environment, reader: Reader | None = None) -> None:
    """Register all builtin functions into the given (root) environment."""
    for name, builtin in BUILTINS.items():
        env.define(name, builtin)
    reader = reader if reader is not None else Reader()
    env.define("load", Builtin("load", partial(load, reader=reader)))
