"""Statement execution results.

Executing a statement yields either COMPLETED or Returned(value). A Returned
result unwinds enclosing blocks and loops by early return until the nearest
function call consumes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from lox import LoxValue


class Completed:
    __slots__ = ()

    def __repr__(self) -> str:
        return "COMPLETED"


COMPLETED = Completed()


@dataclass(frozen=True)
class Returned:
    value: LoxValue


ExecResult = Union[Completed, Returned]
