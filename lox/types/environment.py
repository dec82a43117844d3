"""Runtime environment for Lox.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Blocks and function calls each get a fresh
child environment; closures keep their defining environment alive.
"""

from __future__ import annotations

from typing import Optional, Union

from lox import LoxValue
from lox.errors import LoxUndefinedVariable
from lox.syntax.tokens import Token


Name = Union[Token, str]


def _split(name: Name) -> tuple[Optional[Token], str]:
    if isinstance(name, Token):
        return name, name.lexeme
    return None, name


class Environment:
    """Hierarchical mapping from names to Lox values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LoxValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Name, value: LoxValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any existing slot."""
        _, key = _split(name)
        self.vars[key] = value

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        _, key = _split(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Name) -> LoxValue:
        """Look up the value bound to `name`.

        Raises LoxUndefinedVariable if no frame in the chain binds it.
        """
        token, key = _split(name)
        env = self.find(key)
        if env is None:
            raise LoxUndefinedVariable(token, key)
        return env.vars[key]

    def assign(self, name: Name, value: LoxValue) -> LoxValue:
        """Update the nearest existing binding for `name`.

        Assignment never creates a binding; raises LoxUndefinedVariable if the
        name is not found.
        """
        token, key = _split(name)
        env = self.find(key)
        if env is None:
            raise LoxUndefinedVariable(token, key)
        env.vars[key] = value
        return value

    def update(self, mapping: dict[str, LoxValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _frame_text(self) -> str:
        bindings = ", ".join(f"{name}: {value!r}" for name, value in self.vars.items())
        return "{" + bindings + "}"

    def __str__(self) -> str:
        """This frame only; a trailing arrow marks an enclosing scope."""
        if self.outer is None:
            return self._frame_text()
        return self._frame_text() + " -> ..."

    def __repr__(self) -> str:
        """Every frame from innermost to global."""
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append(env._frame_text())
            env = env.outer
        return "<Environment chain: " + " -> ".join(frames) + ">"
