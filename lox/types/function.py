"""User-defined function values and their invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lox import LoxValue
from lox.syntax.ast import FunctionStmt
from lox.types.callable import LoxCallable
from lox.types.environment import Environment
from lox.types.nil import Nil
from lox.types.signal import Returned

if TYPE_CHECKING:
    from lox.interpreter import Interpreter


class UserFunction(LoxCallable):
    """A first-class function: its declaration plus the closure env it was declared in."""

    __slots__ = ("declaration", "closure")

    def __init__(self, declaration: FunctionStmt, closure: Environment):
        self.declaration: FunctionStmt = declaration
        self.closure: Environment = closure

    @property
    def name(self) -> str:
        return self.declaration.name.lexeme

    def arity(self) -> int:
        return len(self.declaration.params)

    def extend_env(self, args: list[LoxValue]) -> Environment:
        """Bind argument values to the formal parameters in a fresh child of the closure.

        The parent is the closure, not the caller's environment, so name
        resolution inside the body is lexical.
        """
        env = Environment(outer=self.closure)
        for param, value in zip(self.declaration.params, args):
            env.define(param.lexeme, value)
        return env

    def call(self, interpreter: Interpreter, arguments: list[LoxValue]) -> LoxValue:
        # Deferred to avoid a cycle: the executor constructs UserFunctions
        from lox.evaluation.executor import execute_block

        result = execute_block(self.declaration.body, self.extend_env(arguments), interpreter)
        if isinstance(result, Returned):
            return result.value
        return Nil

    def __str__(self) -> str:
        return f"<fn {self.name}>"

    def __repr__(self) -> str:
        params = " ".join(p.lexeme for p in self.declaration.params)
        return f"UserFunction({self.name} ({params}))"
