from lispy.types.symbol import Symbol, VARIADIC
from lispy.types.error import (
    Error,
    UnboundSymbol,
    WrongArgumentCount,
    WrongArgumentType,
    EmptyContainer,
    DivisionByZero,
    UndefinedPower,
    TooManyArguments,
    MalformedVariadic,
    NotAFunction,
    ParseFailure,
    UserError,
)
from lispy.types.value import is_number, type_name, copy_value, is_equal
from lispy.types.expr import Expr, SExpr, QExpr, to_qexpr, to_sexpr
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
