import math

import pytest

from lispy.printer import escape, format_number, to_string
from lispy.reader import Reader
from lispy.types import (
    Builtin,
    DivisionByZero,
    Lambda,
    QExpr,
    SExpr,
    Symbol,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (5.0, "5"),
        (5, "5"),
        (-2.5, "-2.5"),
        (0.1, "0.1"),
        (1e20, "1e+20"),
        (123456789.0, "1.23457e+08"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
    ]
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("plain", '"plain"'),
        ("a\nb", '"a\\nb"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        (Symbol("foo"), "foo"),
        (DivisionByZero(), "Error: Division By Zero!"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), 1.0, QExpr([2.0, "s"])]), '(+ 1 {2 "s"})'),
        (Builtin("head", None), "<builtin head>"),
        (Lambda(QExpr([Symbol("x")]), QExpr([Symbol("*"), Symbol("x"), 2.0])), "(\\ {x} {* x 2})"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_escape_round_trips_through_reader():
    text = 'tab\there "quoted" \\ \a'
    assert Reader().read_forms(f'"{escape(text)}"') == [text]


def test_repl_display(interp):
    assert to_string(interp.eval("list 1 2 (+ 1 2)")) == "{1 2 3}"
    assert to_string(interp.eval("\\ {x y} {+ x y}")) == "(\\ {x y} {+ x y})"
    assert to_string(interp.eval("head {}")) == "Error: Function 'head' passed {}!"
