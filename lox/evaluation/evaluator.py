"""Expression evaluator for the Lox interpreter.

`evaluate` dispatches on the closed set of expression nodes. It is pure except
for assignment (mutates the environment) and calls (arbitrary native effects,
including blocking input and the random cursor).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from lox import LoxValue
from lox.errors import LoxArityError, LoxNotCallable, LoxTypeError
from lox.syntax.ast import (
    AssignExpr,
    BinaryExpr,
    CallExpr,
    DynamicKind,
    DynamicLiteralExpr,
    Expr,
    GroupingExpr,
    LiteralExpr,
    LogicalExpr,
    UnaryExpr,
    VariableExpr,
)
from lox.syntax.tokens import Token, TokenType
from lox.types.callable import LoxCallable
from lox.types.environment import Environment
from lox.types.nil import Nil
from lox.types.values import is_equal, is_number, is_truthy

if TYPE_CHECKING:
    from lox.interpreter import Interpreter


def evaluate(expr: Expr, env: Environment, interpreter: Interpreter) -> LoxValue:
    """Compute the value of `expr` in `env`."""
    match expr:
        case LiteralExpr(value=value):
            return Nil if value is None else value
        case GroupingExpr(expression=inner):
            return evaluate(inner, env, interpreter)
        case UnaryExpr():
            return _unary(expr, env, interpreter)
        case BinaryExpr():
            return _binary(expr, env, interpreter)
        case LogicalExpr(left=left, operator=op, right=right):
            value = evaluate(left, env, interpreter)
            if op.type == TokenType.OR:
                if is_truthy(value):
                    return value
            elif not is_truthy(value):
                return value
            return evaluate(right, env, interpreter)
        case VariableExpr(name=name):
            return env.get(name)
        case AssignExpr(name=name, value=value_expr):
            value = evaluate(value_expr, env, interpreter)
            return env.assign(name, value)
        case CallExpr():
            return _call(expr, env, interpreter)
        case DynamicLiteralExpr(kind=DynamicKind.READ):
            return interpreter.read_line()
        case DynamicLiteralExpr(kind=DynamicKind.RAND):
            return interpreter.random.next()
    raise TypeError(f"Unknown expression node {expr!r}")


def _check_number_operand(operator: Token, operand: LoxValue) -> None:
    if not is_number(operand):
        raise LoxTypeError(operator, "Operand must be a number.")


def _check_number_operands(operator: Token, left: LoxValue, right: LoxValue) -> None:
    if not (is_number(left) and is_number(right)):
        raise LoxTypeError(operator, "Operands must be numbers.")


def _divide(left: float, right: float) -> float:
    """IEEE division: x/0 is a signed infinity, 0/0 is NaN."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _unary(expr: UnaryExpr, env: Environment, interpreter: Interpreter) -> LoxValue:
    right = evaluate(expr.right, env, interpreter)
    match expr.operator.type:
        case TokenType.MINUS:
            _check_number_operand(expr.operator, right)
            return -float(right)
        case TokenType.BANG:
            return not is_truthy(right)
    raise TypeError(f"Unknown unary operator {expr.operator.lexeme!r}")


def _binary(expr: BinaryExpr, env: Environment, interpreter: Interpreter) -> LoxValue:
    left = evaluate(expr.left, env, interpreter)
    right = evaluate(expr.right, env, interpreter)
    op = expr.operator

    match op.type:
        case TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        case TokenType.BANG_EQUAL:
            return not is_equal(left, right)
        case TokenType.PLUS:
            if is_number(left) and is_number(right):
                return float(left) + float(right)
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxTypeError(op, "Operands must be two numbers or two strings.")

    _check_number_operands(op, left, right)
    a, b = float(left), float(right)
    match op.type:
        case TokenType.MINUS:
            return a - b
        case TokenType.STAR:
            return a * b
        case TokenType.SLASH:
            return _divide(a, b)
        case TokenType.GREATER:
            return a > b
        case TokenType.GREATER_EQUAL:
            return a >= b
        case TokenType.LESS:
            return a < b
        case TokenType.LESS_EQUAL:
            return a <= b
    raise TypeError(f"Unknown binary operator {op.lexeme!r}")


def _call(expr: CallExpr, env: Environment, interpreter: Interpreter) -> LoxValue:
    callee = evaluate(expr.callee, env, interpreter)
    args = [evaluate(arg, env, interpreter) for arg in expr.arguments]

    if not isinstance(callee, LoxCallable):
        raise LoxNotCallable(expr.paren, "Can only call functions and classes.")
    if len(args) != callee.arity():
        raise LoxArityError(expr.paren, callee.arity(), len(args))
    return callee.call(interpreter, args)
