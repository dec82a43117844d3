"""Runtime value helpers: kind predicates, truthiness, equality and rendering."""

from __future__ import annotations

import math

from lox import LoxValue
from lox.types.nil import Nil


def is_number(value: LoxValue) -> bool:
    """Numbers are floats; ints are tolerated, bools are not."""
    return isinstance(value, (float, int)) and not isinstance(value, bool)


def is_truthy(value: LoxValue) -> bool:
    """Nil and false are falsy; every other value (including 0 and "") is truthy."""
    if value is Nil or value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def _same_number(a: float, b: float) -> bool:
    # NaN equals NaN and 0 differs from -0, matching boxed-double equality
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


def is_equal(a: LoxValue, b: LoxValue) -> bool:
    """Structural equality across all value kinds; never raises."""
    if a is Nil or b is Nil:
        return a is b
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return _same_number(float(a), float(b))
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if type(a) != type(b):
        return False
    return a is b or a == b


def stringify(value: LoxValue) -> str:
    """Render a value the way `print` shows it."""
    if value is Nil or value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        text = repr(float(value))
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return str(value)
