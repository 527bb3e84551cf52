"""Lambda function representation for Lispy."""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.expr import QExpr


class Lambda:
    """A first-class lambda with formal parameters, body, and private env.

    Parameters consumed by partial application are popped off `formals` and
    bound in `env`, so `formals` only lists the parameters still awaited.
    """

    __slots__ = ("formals", "body", "env")

    type_name = "Function"

    def __init__(self, formals: QExpr, body: QExpr, env: Environment | None = None):
        self.formals: QExpr = formals
        self.body: QExpr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Lambda:
        return Lambda(self.formals.copy(), self.body.copy(), self.env.copy())

    def __eq__(self, other: object) -> bool:
        # Environments never take part in equality
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Lambda({self.formals!r}, {self.body!r})"
