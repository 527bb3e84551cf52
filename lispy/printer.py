"""Textual form of Lispy values, as shown by the REPL and `print`."""

from __future__ import annotations

from io import StringIO

from lispy import LispValue
from lispy.types.builtin import Builtin
from lispy.types.error import Error
from lispy.types.expr import Expr
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import Symbol
from lispy.types.value import is_number

ESCAPES: dict[str, str] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\0": "\\0",
}


def escape(text: str) -> str:
    return "".join(ESCAPES.get(c, c) for c in text)


def format_number(x: float) -> str:
    """Same digits as C's printf("%g")."""
    return format(float(x), "g")


def _write(buffer: StringIO, value: LispValue) -> None:
    if is_number(value):
        buffer.write(format_number(value))
    elif isinstance(value, str):
        buffer.write('"')
        buffer.write(escape(value))
        buffer.write('"')
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, Error):
        buffer.write(f"Error: {value.message}")
    elif isinstance(value, Expr):
        _write_expr(buffer, value)
    elif isinstance(value, Builtin):
        buffer.write(f"<builtin {value.name}>")
    elif isinstance(value, Lambda):
        buffer.write("(\\ ")
        _write_expr(buffer, value.formals)
        buffer.write(" ")
        _write_expr(buffer, value.body)
        buffer.write(")")
    else:
        buffer.write(repr(value))


def _write_expr(buffer: StringIO, expr: Expr) -> None:
    buffer.write(expr.open_char)
    for i, cell in enumerate(expr.cells):
        if i:
            buffer.write(" ")
        _write(buffer, cell)
    buffer.write(expr.close_char)


def to_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()
