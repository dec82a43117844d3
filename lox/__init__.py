# Core type aliases for the Lox evaluation engine.
# Runtime values are plain Python objects: the Nil sentinel, bool, float, str
# and LoxCallable instances. No wrapper Value class is defined.
#
# Naming guidance:
# - LoxValue: use in evaluator/runtime code to denote evaluated values.

from typing import Any

# Runtime value alias
LoxValue = Any
