from __future__ import annotations

import logging
import sys
from typing import TextIO

from lox.errors import LoxRuntimeError

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Sink for runtime errors surfaced by `Interpreter.interpret`.

    Writes "<message>\\n[line N]" to `stream` and remembers that a runtime
    error happened so a driver can pick its exit status.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream: TextIO = stream if stream is not None else sys.stderr
        self.had_runtime_error: bool = False

    def format(self, error: LoxRuntimeError) -> str:
        if error.line is None:
            return error.message
        return f"{error.message}\n[line {error.line}]"

    def runtime_error(self, error: LoxRuntimeError) -> None:
        logger.debug("runtime error reported: %s", error.message)
        self.stream.write(self.format(error) + "\n")
        self.had_runtime_error = True

    def reset(self) -> None:
        self.had_runtime_error = False
