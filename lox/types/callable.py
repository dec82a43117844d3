"""Callable protocol shared by native and user-defined functions.

The set of callables is closed: NativeFunction (host code) and UserFunction
(see lox.types.function). Both report a fixed arity that the evaluator checks
at the call site before `call` runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

from lox import LoxValue

if TYPE_CHECKING:
    from lox.interpreter import Interpreter


NativeFn = Callable[["Interpreter", list[LoxValue]], LoxValue]


class LoxCallable(ABC):
    """Anything a call expression can invoke."""

    __slots__ = ()

    @abstractmethod
    def arity(self) -> int: ...

    @abstractmethod
    def call(self, interpreter: Interpreter, arguments: list[LoxValue]) -> LoxValue: ...


class NativeFunction(LoxCallable):
    """A host-implemented function with a fixed arity."""

    __slots__ = ("name", "_arity", "fn")

    def __init__(self, name: str, arity: int, fn: NativeFn):
        self.name: str = name
        self._arity: int = arity
        self.fn: NativeFn = fn

    def arity(self) -> int:
        return self._arity

    def call(self, interpreter: Interpreter, arguments: list[LoxValue]) -> LoxValue:
        return self.fn(interpreter, arguments)

    def __str__(self) -> str:
        return "<native fn>"

    def __repr__(self) -> str:
        return f"NativeFunction({self.name!r}, arity={self._arity})"
