"""Function construction builtins: \\ and fun"""

from __future__ import annotations

from lispy import LispValue
from lispy.builtin.assertions import check_all, check_count, check_not_empty
from lispy.types.environment import Environment
from lispy.types.error import Error, WrongArgumentType
from lispy.types.expr import QExpr, SExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.value import type_name


def _check_formals(name: str, formals: QExpr) -> Error | None:
    for sym in formals:
        if type_name(sym) != "Symbol":
            return WrongArgumentType(name, 0, type_name(sym), "Symbol")
    return None


def lambda_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(\\ {x y} {+ x y}) -> a closure with a fresh, parentless environment.

    The parent of the closure environment is supplied at each call.
    """
    if (err := check_count("\\", args, 2)) is not None:
        return err
    if (err := check_all("\\", args, "Q-Expression")) is not None:
        return err

    formals, body = args
    if (err := _check_formals("\\", formals)) is not None:
        return err
    return Lambda(formals, body, Environment())


def fun(env: Environment, args: list[LispValue]) -> LispValue:
    """(fun {name x y} {body}) == (def {name} (\\ {x y} {body}))"""
    if (err := check_count("fun", args, 2)) is not None:
        return err
    if (err := check_all("fun", args, "Q-Expression")) is not None:
        return err
    if (err := check_not_empty("fun", args, 0)) is not None:
        return err

    signature, body = args
    if (err := _check_formals("fun", signature)) is not None:
        return err

    name = signature.pop(0)
    env.define_global(name, Lambda(signature, body, Environment()))
    return SExpr()
