"""Small builders for syntax trees, standing in for the external parser."""

from lox.syntax.ast import (
    AssignExpr,
    BinaryExpr,
    BlockStmt,
    CallExpr,
    DynamicKind,
    DynamicLiteralExpr,
    ExpressionStmt,
    FunctionStmt,
    GroupingExpr,
    IfStmt,
    LiteralExpr,
    LogicalExpr,
    PrintOnlyStmt,
    PrintStmt,
    ReturnStmt,
    StringLoopStmt,
    UnaryExpr,
    VarStmt,
    VariableExpr,
    WhileStmt,
)
from lox.syntax.tokens import Token, TokenType
from lox.types.nil import Nil

OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "!": TokenType.BANG,
    "==": TokenType.EQUAL_EQUAL,
    "!=": TokenType.BANG_EQUAL,
    ">": TokenType.GREATER,
    ">=": TokenType.GREATER_EQUAL,
    "<": TokenType.LESS,
    "<=": TokenType.LESS_EQUAL,
    "and": TokenType.AND,
    "or": TokenType.OR,
}


def op(lexeme, line=1):
    return Token(OPERATORS[lexeme], lexeme, None, line)


def ident(name, line=1):
    return Token(TokenType.IDENTIFIER, name, None, line)


def lit(value):
    if isinstance(value, int) and not isinstance(value, bool):
        value = float(value)
    return LiteralExpr(value)


NIL = LiteralExpr(Nil)


def group(expr):
    return GroupingExpr(expr)


def unary(operator, right, line=1):
    return UnaryExpr(op(operator, line), right)


def binary(left, operator, right, line=1):
    return BinaryExpr(left, op(operator, line), right)


def logical(left, operator, right):
    return LogicalExpr(left, op(operator), right)


def var(name, line=1):
    return VariableExpr(ident(name, line))


def assign(name, value, line=1):
    return AssignExpr(ident(name, line), value)


def call(callee, *args, line=1):
    if isinstance(callee, str):
        callee = var(callee, line)
    return CallExpr(callee, Token(TokenType.RIGHT_PAREN, ")", None, line), tuple(args))


def read_literal():
    return DynamicLiteralExpr(DynamicKind.READ)


def rand_literal():
    return DynamicLiteralExpr(DynamicKind.RAND)


def expr_stmt(expr):
    return ExpressionStmt(expr)


def print_stmt(expr):
    return PrintStmt(expr)


def print_only():
    return PrintOnlyStmt()


def var_decl(name, initializer=None, line=1):
    return VarStmt(ident(name, line), initializer)


def block(*statements):
    return BlockStmt(tuple(statements))


def if_stmt(condition, then_branch, else_branch=None):
    return IfStmt(condition, then_branch, else_branch)


def while_stmt(condition, body):
    return WhileStmt(condition, body)


def for_in(name, iterable, body, line=1):
    return StringLoopStmt(ident(name, line), iterable, body)


def fun(name, params, *body):
    return FunctionStmt(ident(name), tuple(ident(p) for p in params), tuple(body))


def ret(value=None):
    return ReturnStmt(Token(TokenType.RETURN, "return", None, 1), value)
