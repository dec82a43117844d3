"""Syntax tree node shapes consumed by the evaluator.

Two closed variant sets: expressions (`Expr`) and statements (`Stmt`). Nodes
are immutable and owned by the parser; sequence fields are tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from lox import LoxValue
from lox.syntax.tokens import Token


class DynamicKind(Enum):
    READ = "READ"
    RAND = "RAND"


# -------------------------------
# Expressions
# -------------------------------
@dataclass(frozen=True)
class LiteralExpr:
    value: LoxValue


@dataclass(frozen=True)
class GroupingExpr:
    expression: Expr


@dataclass(frozen=True)
class UnaryExpr:
    operator: Token
    right: Expr


@dataclass(frozen=True)
class BinaryExpr:
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class LogicalExpr:
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class VariableExpr:
    name: Token


@dataclass(frozen=True)
class AssignExpr:
    name: Token
    value: Expr


@dataclass(frozen=True)
class CallExpr:
    callee: Expr
    paren: Token
    arguments: tuple[Expr, ...] = ()


@dataclass(frozen=True)
class DynamicLiteralExpr:
    kind: DynamicKind
    token: Optional[Token] = None


Expr = Union[
    LiteralExpr,
    GroupingExpr,
    UnaryExpr,
    BinaryExpr,
    LogicalExpr,
    VariableExpr,
    AssignExpr,
    CallExpr,
    DynamicLiteralExpr,
]


# -------------------------------
# Statements
# -------------------------------
@dataclass(frozen=True)
class ExpressionStmt:
    expression: Expr


@dataclass(frozen=True)
class PrintStmt:
    expression: Expr


@dataclass(frozen=True)
class PrintOnlyStmt:
    """Reserved statement; executing it has no effect."""


@dataclass(frozen=True)
class VarStmt:
    name: Token
    initializer: Optional[Expr] = None


@dataclass(frozen=True)
class BlockStmt:
    statements: tuple[Stmt, ...] = ()


@dataclass(frozen=True)
class IfStmt:
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt] = None


@dataclass(frozen=True)
class WhileStmt:
    condition: Expr
    body: Stmt


@dataclass(frozen=True)
class StringLoopStmt:
    var: Token
    iterable: Expr
    body: Stmt


@dataclass(frozen=True)
class FunctionStmt:
    name: Token
    params: tuple[Token, ...]
    body: tuple[Stmt, ...]


@dataclass(frozen=True)
class ReturnStmt:
    keyword: Token
    value: Optional[Expr] = None


Stmt = Union[
    ExpressionStmt,
    PrintStmt,
    PrintOnlyStmt,
    VarStmt,
    BlockStmt,
    IfStmt,
    WhileStmt,
    StringLoopStmt,
    FunctionStmt,
    ReturnStmt,
]
