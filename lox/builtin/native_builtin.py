"""Native functions registered into the global scope of every interpreter.

Each builtin receives the calling interpreter and the evaluated argument list
(arity is already checked by the caller) and validates argument kinds itself.
"""
from __future__ import annotations

import math
import time
from typing import TYPE_CHECKING

from lox import LoxValue
from lox.errors import LoxTypeError
from lox.types.callable import NativeFunction
from lox.types.environment import Environment
from lox.types.values import is_number

if TYPE_CHECKING:
    from lox.interpreter import Interpreter


def clock(interpreter: Interpreter, args: list[LoxValue]) -> float:
    """Wall-clock time in seconds."""
    return time.time()


def floor(interpreter: Interpreter, args: list[LoxValue]) -> LoxValue:
    """(floor x) => largest integral Number <= x; 0 when x is not a Number."""
    value = args[0]
    if not is_number(value):
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        return value
    return float(math.floor(value))


def substring(interpreter: Interpreter, args: list[LoxValue]) -> str:
    """(substring s start end) => s[start:end], or "" when the range is out of bounds."""
    text, start, end = args
    if not (isinstance(text, str) and is_number(start) and is_number(end)):
        raise LoxTypeError(None, "Expected a string and two numbers.")
    if not (math.isfinite(start) and math.isfinite(end)):
        return ""
    start, end = math.floor(start), math.floor(end)
    if start < 0 or end > len(text) or start > end:
        return ""
    return text[start:end]


def register(env: Environment) -> None:
    """Register all native functions into the given environment."""
    env.update(
        {
            "clock": NativeFunction("clock", 0, clock),
            "floor": NativeFunction("floor", 1, floor),
            "substring": NativeFunction("substring", 3, substring),
        }
    )
