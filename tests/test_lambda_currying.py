import pytest

from lispy.evaluation import apply_lambda, evaluate
from lispy.types import (
    EmptyContainer,
    Environment,
    Lambda,
    MalformedVariadic,
    QExpr,
    SExpr,
    Symbol,
    TooManyArguments,
    WrongArgumentType,
)


@pytest.fixture
def add(interp):
    interp.eval("def {add} (\\ {x y} {+ x y})")
    return interp


def test_full_application(add):
    assert add.eval("add 3 4") == 7


def test_currying(add):
    assert add.eval("(add 3) 4") == 7
    assert add.eval("((add 3) 4)") == 7


def test_partial_application_is_a_function(add):
    partial = add.eval("add 3")
    assert isinstance(partial, Lambda)
    assert partial.formals == QExpr([Symbol("y")])
    assert partial.env.lookup("x") == 3


def test_partial_leaves_definition_intact(add):
    add.eval("def {add3} (add 3)")
    assert add.eval("add3 4") == 7
    assert add.eval("add3 10") == 13
    assert add.eval("add 1 1") == 2
    assert len(add.env.vars["add"].formals) == 2


def test_too_many_arguments(add):
    result = add.eval("add 1 2 3")
    assert result == TooManyArguments(3, 2)
    assert str(result) == "Function passed too many arguments. Got 3, Expected 2."


@pytest.mark.parametrize(
    "source,expected",
    [
        ("f 1 2 3", QExpr([2.0, 3.0])),
        ("f 1 2", QExpr([2.0])),
        ("f 1", QExpr()),
    ]
)
def test_variadic(interp, source, expected):
    interp.eval("def {f} (\\ {x & xs} {xs})")
    assert interp.eval(source) == expected


def test_variadic_only(interp):
    interp.eval("fun {all & xs} {xs}")
    assert interp.eval("all 1 2") == QExpr([1.0, 2.0])


def test_variadic_curried(interp):
    interp.eval("fun {g a b & rest} {list a b rest}")
    assert interp.eval("(g 1) 2 3 4") == QExpr([1.0, 2.0, QExpr([3.0, 4.0])])


@pytest.mark.parametrize(
    "formals",
    ["{x &}", "{& a b}", "{x & a b}"],
)
def test_malformed_variadic(interp, formals):
    interp.eval(f"def {{bad}} (\\ {formals} {{x}})")
    result = interp.eval("bad 1 2 3")
    assert result == MalformedVariadic()


def test_malformed_variadic_without_rest_arguments(interp):
    interp.eval("def {bad} (\\ {x & a b} {x})")
    assert interp.eval("bad 1") == MalformedVariadic()


def test_lambda_formals_must_be_symbols(interp):
    assert interp.eval("\\ {1} {1}") == WrongArgumentType("\\", 0, "Number", "Symbol")
    assert interp.eval("\\ 1 {1}") == WrongArgumentType("\\", 0, "Number", "Q-Expression")


def test_fun_defines_globally(interp):
    assert interp.eval("fun {sq x} {* x x}") == SExpr()
    assert interp.eval("sq 5") == 25
    assert interp.eval("fun {} {1}") == EmptyContainer("fun")


def test_recursion(interp):
    interp.eval("fun {fact n} {if (== n 0) {1} {* n (fact (- n 1))}}")
    assert interp.eval("fact 10") == 3628800


def test_higher_order(interp):
    interp.eval("fun {twice f x} {f (f x)}")
    assert interp.eval("twice (\\ {n} {* n 3}) 2") == 18


def test_apply_lambda_directly():
    fn = Lambda(QExpr([Symbol("x"), Symbol("y")]), QExpr([Symbol("x")]), Environment())
    caller = Environment()
    partial = apply_lambda(fn, [1.0], caller, evaluate)
    assert isinstance(partial, Lambda)
    assert apply_lambda(partial, [2.0], caller, evaluate) == 1.0


def test_body_evaluation_leaves_closure_parent_untouched(interp):
    interp.eval("def {f} (\\ {x} {x})")
    interp.eval("f 1")
    assert interp.env.vars["f"].env.outer is None
