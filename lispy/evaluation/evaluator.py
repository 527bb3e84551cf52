"""Core evaluator for the Lispy interpreter.

Symbols are looked up, S-Expressions are reduced, everything else evaluates to
itself. Errors are values: the first error found among the children of an
S-Expression is returned in place of the whole expression.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.evaluation.apply import apply
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expr import SExpr
from lispy.types.symbol import Symbol


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    """Evaluate a single value in `env`.

    The expression is consumed: S-Expressions are reduced in place.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Atoms, Q-Expressions and functions return as-is ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> LispValue:
    cells = expr.cells

    # Every child is evaluated before any error check, left to right
    for i, cell in enumerate(cells):
        cells[i] = evaluate(cell, env)

    for cell in cells:
        if isinstance(cell, Error):
            return cell

    if not cells:
        return expr

    if len(cells) == 1:
        return cells.pop(0)

    head = cells.pop(0)
    return apply(head, cells, env, evaluate)
