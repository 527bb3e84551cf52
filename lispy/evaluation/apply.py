"""Application engine for Lispy.

This module centralizes function application semantics for the interpreter:
- Builtins are invoked directly with the calling environment.
- Lambdas consume formals one argument at a time, binding each into their
  private environment. Running out of arguments first yields a partially
  applied copy (currying); running out of formals evaluates the body.
- The variadic marker `&` captures the remaining arguments as a Q-Expression.

The body of a saturated lambda is evaluated in a view of its private frame
whose parent is the calling environment, for that call only.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.error import MalformedVariadic, NotAFunction, TooManyArguments
from lispy.types.expr import QExpr, to_sexpr
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import VARIADIC
from lispy.types.value import type_name


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    env: Environment,
    evaluate_fn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied. It is consumed: formals are popped and
      parameters bound into its environment.
    - args: The already-evaluated argument values (also consumed).
    - env: The environment from which the call originates; free names in the
      body resolve through it.
    - evaluate_fn: Evaluator used for the body once every formal is bound.

    Behavior:
    - More arguments than formals yields TooManyArguments(given, total).
    - `&` must be followed by exactly one formal, else MalformedVariadic.
    - Fewer arguments than formals returns a copy of the partially applied
      lambda instead of evaluating the body.
    """
    formals = fn.formals
    given = len(args)
    total = len(formals)

    while args:
        if not formals:
            return TooManyArguments(given, total)

        sym = formals.pop(0)
        if sym == VARIADIC:
            if len(formals) != 1:
                return MalformedVariadic()
            rest = formals.pop(0)
            fn.env.define(rest, QExpr(args))
            break

        fn.env.define(sym, args.pop(0))

    # Zero variadic arguments supplied: bind the rest name to an empty list
    if formals and formals[0] == VARIADIC:
        if len(formals) != 2:
            return MalformedVariadic()
        formals.pop(0)
        rest = formals.pop(0)
        fn.env.define(rest, QExpr())

    if formals:
        return fn.copy()

    return evaluate_fn(to_sexpr(fn.body), fn.env.with_outer(env))


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn,
) -> LispValue:
    """Apply either a Lambda or a Builtin.

    - For Lambda, defer to apply_lambda (handling partials and `&` rest).
    - For Builtin, invoke its operation with the runtime env and list of args.
    - Otherwise, return a NotAFunction error value.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    return NotAFunction(type_name(head))
