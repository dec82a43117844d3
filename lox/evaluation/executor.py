"""Statement executor for the Lox interpreter.

`execute` runs one statement for its effects and reports how it finished:
COMPLETED, or Returned(value) when a `return` is unwinding toward the nearest
function call. Blocks and loops stop at the first Returned and hand it back
unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from lox.errors import LoxTypeError
from lox.evaluation.evaluator import evaluate
from lox.syntax.ast import (
    BlockStmt,
    ExpressionStmt,
    FunctionStmt,
    IfStmt,
    PrintOnlyStmt,
    PrintStmt,
    ReturnStmt,
    Stmt,
    StringLoopStmt,
    VarStmt,
    WhileStmt,
)
from lox.types.environment import Environment
from lox.types.function import UserFunction
from lox.types.nil import Nil
from lox.types.signal import COMPLETED, ExecResult, Returned
from lox.types.values import is_truthy, stringify

if TYPE_CHECKING:
    from lox.interpreter import Interpreter


def execute(stmt: Stmt, env: Environment, interpreter: Interpreter) -> ExecResult:
    match stmt:
        case ExpressionStmt(expression=expr):
            evaluate(expr, env, interpreter)
        case PrintStmt(expression=expr):
            interpreter.write_line(stringify(evaluate(expr, env, interpreter)))
        case PrintOnlyStmt():
            pass
        case VarStmt(name=name, initializer=initializer):
            value = Nil if initializer is None else evaluate(initializer, env, interpreter)
            env.define(name.lexeme, value)
        case BlockStmt(statements=statements):
            return execute_block(statements, Environment(outer=env), interpreter)
        case IfStmt(condition=cond, then_branch=then_branch, else_branch=else_branch):
            if is_truthy(evaluate(cond, env, interpreter)):
                return execute(then_branch, env, interpreter)
            if else_branch is not None:
                return execute(else_branch, env, interpreter)
        case WhileStmt(condition=cond, body=body):
            while is_truthy(evaluate(cond, env, interpreter)):
                result = execute(body, env, interpreter)
                if isinstance(result, Returned):
                    return result
        case StringLoopStmt():
            return _string_loop(stmt, env, interpreter)
        case FunctionStmt(name=name):
            env.define(name.lexeme, UserFunction(stmt, env))
        case ReturnStmt(value=value_expr):
            value = Nil if value_expr is None else evaluate(value_expr, env, interpreter)
            return Returned(value)
        case _:
            raise TypeError(f"Unknown statement node {stmt!r}")
    return COMPLETED


def execute_block(
    statements: Iterable[Stmt], env: Environment, interpreter: Interpreter
) -> ExecResult:
    """Run `statements` in `env`, stopping early if one of them returns."""
    for statement in statements:
        result = execute(statement, env, interpreter)
        if isinstance(result, Returned):
            return result
    return COMPLETED


def _string_loop(stmt: StringLoopStmt, env: Environment, interpreter: Interpreter) -> ExecResult:
    # The loop variable lives in the enclosing scope and outlives the loop.
    text = evaluate(stmt.iterable, env, interpreter)
    if not isinstance(text, str):
        raise LoxTypeError(stmt.var, "'in' must be a string")

    for char in text:
        env.define(stmt.var.lexeme, char)
        result = execute(stmt.body, env, interpreter)
        if isinstance(result, Returned):
            return result
    return COMPLETED
