from __future__ import annotations

from typing import Optional

from lox.syntax.tokens import Token


class LoxError(Exception):
    """ Base class for all Lox errors"""
    pass


class LoxRuntimeError(LoxError):
    """ Raised when evaluation fails; carries the token used to locate the failure"""

    def __init__(self, token: Optional[Token], message: str):
        super().__init__(message)
        self.token: Optional[Token] = token
        self.message: str = message

    @property
    def line(self) -> Optional[int]:
        return self.token.line if self.token is not None else None


class LoxTypeError(LoxRuntimeError):
    """ Raised when an operand or argument has the wrong runtime kind"""


class LoxUndefinedVariable(LoxRuntimeError):
    """ Raised when a name is read or assigned before it is defined"""

    def __init__(self, token: Optional[Token], name: str):
        super().__init__(token, f"Undefined variable '{name}'.")
        self.name: str = name


class LoxNotCallable(LoxRuntimeError):
    """ Raised when a call expression targets a value that is not callable"""


class LoxArityError(LoxRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, token: Optional[Token], expected: int, got: int):
        super().__init__(token, f"Expected {expected} arguments but got {got}.")
        self.expected: int = expected
        self.got: int = got
