import math

import pytest

from lox.errors import LoxNotCallable, LoxTypeError, LoxUndefinedVariable
from lox.types.nil import Nil

from helpers import (
    NIL,
    assign,
    binary,
    call,
    group,
    lit,
    logical,
    unary,
    var,
)


@pytest.mark.parametrize(
    "expr,expected",
    [
        (lit(1), 1.0),
        (lit("text"), "text"),
        (lit(True), True),
        (NIL, Nil),
        (group(lit(3)), 3.0),
        (binary(lit(1), "+", lit(2)), 3.0),
        (binary(lit(10), "-", lit(4)), 6.0),
        (binary(lit(3), "*", lit(4)), 12.0),
        (binary(lit(12), "/", lit(3)), 4.0),
        (binary(lit(1), "/", lit(4)), 0.25),
        (binary(lit("foo"), "+", lit("bar")), "foobar"),
        (binary(lit(2), "*", group(binary(lit(3), "+", lit(4)))), 14.0),
        (binary(lit(3), ">", lit(2)), True),
        (binary(lit(3), ">=", lit(3)), True),
        (binary(lit(3), "<", lit(2)), False),
        (binary(lit(2), "<=", lit(2)), True),
        (binary(lit(1), "==", lit(1)), True),
        (binary(lit(1), "!=", lit(1)), False),
        (binary(NIL, "==", NIL), True),
        (binary(NIL, "==", lit(False)), False),
        (binary(lit("1"), "==", lit(1)), False),
        (unary("-", lit(5)), -5.0),
        (unary("!", lit(True)), False),
        (unary("!", NIL), True),
        (unary("!", lit(0)), False),
        (unary("!", lit("")), False),
    ],
)
def test_evaluate(interp, expr, expected):
    assert interp.evaluate(expr) == expected


def test_division_by_zero_is_ieee(interp):
    assert interp.evaluate(binary(lit(1), "/", lit(0))) == math.inf
    assert interp.evaluate(binary(lit(-1), "/", lit(0))) == -math.inf
    assert math.isnan(interp.evaluate(binary(lit(0), "/", lit(0))))


@pytest.mark.parametrize(
    "expr,message",
    [
        (unary("-", lit("a")), "Operand must be a number."),
        (unary("-", NIL), "Operand must be a number."),
        (binary(lit(1), "-", lit("a")), "Operands must be numbers."),
        (binary(lit("a"), "*", lit(2)), "Operands must be numbers."),
        (binary(lit(True), "/", lit(2)), "Operands must be numbers."),
        (binary(NIL, "<", lit(2)), "Operands must be numbers."),
        (binary(lit("a"), ">=", lit("b")), "Operands must be numbers."),
        (binary(lit(1), "+", lit("a")), "Operands must be two numbers or two strings."),
        (binary(lit("a"), "+", NIL), "Operands must be two numbers or two strings."),
        (binary(lit(True), "+", lit(1)), "Operands must be two numbers or two strings."),
    ],
)
def test_type_errors(interp, expr, message):
    with pytest.raises(LoxTypeError) as info:
        interp.evaluate(expr)
    assert info.value.message == message
    assert info.value.line == 1


@pytest.mark.parametrize(
    "expr,expected",
    [
        (logical(lit(1), "and", lit(2)), 2.0),
        (logical(NIL, "and", lit(2)), Nil),
        (logical(lit(False), "and", lit(2)), False),
        (logical(lit("x"), "or", lit(2)), "x"),
        (logical(NIL, "or", lit("y")), "y"),
        (logical(lit(False), "or", NIL), Nil),
    ],
)
def test_logical_returns_operand_value(interp, expr, expected):
    assert interp.evaluate(expr) == expected


def test_logical_short_circuits(interp):
    interp.globals.define("hits", 0.0)
    bump = assign("hits", binary(var("hits"), "+", lit(1)))

    interp.evaluate(logical(lit(False), "and", bump))
    interp.evaluate(logical(lit(True), "or", bump))
    assert interp.globals.get("hits") == 0.0

    interp.evaluate(logical(lit(True), "and", bump))
    interp.evaluate(logical(lit(False), "or", bump))
    assert interp.globals.get("hits") == 2.0


def test_variable_and_assignment(interp):
    interp.globals.define("a", 1.0)
    assert interp.evaluate(var("a")) == 1.0
    assert interp.evaluate(assign("a", lit(5))) == 5.0
    assert interp.evaluate(var("a")) == 5.0


def test_assignment_is_right_associative_expression(interp):
    interp.globals.define("a", Nil)
    interp.globals.define("b", Nil)
    assert interp.evaluate(assign("a", assign("b", lit("v")))) == "v"
    assert interp.globals.get("a") == "v"


def test_undefined_variable(interp):
    with pytest.raises(LoxUndefinedVariable):
        interp.evaluate(var("ghost"))
    with pytest.raises(LoxUndefinedVariable):
        interp.evaluate(assign("ghost", lit(1)))


@pytest.mark.parametrize("callee", [lit("not a fn"), lit(3), NIL])
def test_calling_non_callable(interp, callee):
    with pytest.raises(LoxNotCallable) as info:
        interp.evaluate(call(callee))
    assert info.value.message == "Can only call functions and classes."


def test_call_arguments_evaluated_before_callable_check(interp):
    interp.globals.define("n", 0.0)
    with pytest.raises(LoxNotCallable):
        interp.evaluate(call(lit("x"), assign("n", lit(9))))
    assert interp.globals.get("n") == 9.0
