from lispy import LispValue
from lispy.builtin.assertions import check_count, check_type
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.expr import to_sexpr


def if_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(if cond {then} {else}); only the chosen branch is evaluated."""
    if (err := check_count("if", args, 3)) is not None:
        return err
    if (err := check_type("if", args, 0, "Number")) is not None:
        return err
    for i in (1, 2):
        if (err := check_type("if", args, i, "Q-Expression")) is not None:
            return err

    cond, then_branch, else_branch = args
    branch = then_branch if cond != 0 else else_branch
    return evaluate(to_sexpr(branch), env)
