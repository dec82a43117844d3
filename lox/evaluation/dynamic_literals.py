"""Dynamic literals: the blocking input read and the fixed pseudo-random sequence.

Both carry state or side effects that belong to one interpreter instance, so
they are evaluated through objects the Interpreter owns.
"""

from __future__ import annotations

import logging
from typing import TextIO

logger = logging.getLogger(__name__)

# Pre-seeded sequence; makes scripts that use `rand` reproducible across runs.
RANDOM_NUMBERS: tuple[int, ...] = (57, 97, 28, 7, 71, 1, 79, 83, 64, 82, 89, 24)


class RandomSequence:
    """Deterministic cycling sequence with a cursor starting at 0."""

    __slots__ = ("numbers", "index")

    def __init__(self, numbers: tuple[int, ...] = RANDOM_NUMBERS):
        self.numbers: tuple[int, ...] = numbers
        self.index: int = 0

    def next(self) -> float:
        value = self.numbers[self.index]
        self.index = (self.index + 1) % len(self.numbers)
        return float(value)

    def reset(self) -> None:
        self.index = 0


def read_input(prompt: str, stdout: TextIO, stdin: TextIO) -> str:
    """Write `prompt`, then block for one line of input.

    Returns the line without its terminator, or "" when the stream is closed,
    exhausted or unreadable. Never raises.
    """
    stdout.write(prompt)
    stdout.flush()
    try:
        line = stdin.readline()
    except (OSError, ValueError) as ex:
        logger.debug("input read failed: %s", ex)
        return ""
    return line.rstrip("\r\n")
