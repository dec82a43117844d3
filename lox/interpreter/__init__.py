from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from lox import LoxValue
from lox.builtin.native_builtin import register
from lox.config import get_input_prompt, get_recursion_limit
from lox.errors import LoxRuntimeError
from lox.evaluation.dynamic_literals import RandomSequence, read_input
from lox.evaluation.evaluator import evaluate
from lox.evaluation.executor import execute
from lox.interpreter.reporter import ErrorReporter
from lox.syntax.ast import Expr, Stmt
from lox.types.environment import Environment
from lox.types.signal import Returned

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Executes already-parsed Lox programs.
    Owns the global environment, the I/O sinks, the error reporter and the
    pseudo-random cursor; state persists across `interpret` calls and is only
    reset by constructing a new instance.
    """

    def __init__(
        self,
        stdout: TextIO | None = None,
        stdin: TextIO | None = None,
        reporter: ErrorReporter | None = None,
        *,
        prompt: str | None = None,
        recursion_limit: int | None = None,
    ):
        self.stdout: TextIO = stdout if stdout is not None else sys.stdout
        self.stdin: TextIO = stdin if stdin is not None else sys.stdin
        self.reporter: ErrorReporter = reporter if reporter is not None else ErrorReporter()
        self.prompt: str = prompt if prompt is not None else get_input_prompt()
        self.recursion_limit: int = (
            recursion_limit if recursion_limit is not None else get_recursion_limit()
        )

        self.globals: Environment = Environment()
        register(self.globals)
        self.random: RandomSequence = RandomSequence()

    def interpret(self, statements: Iterable[Stmt]) -> None:
        """Run top-level statements in order.

        The first runtime error is reported and stops the program; statements
        already executed keep their effects. Each Lox call costs several Python
        frames, so the recursion limit is raised to `recursion_limit` for the
        duration of the run (never lowered) and restored afterwards.
        """
        previous_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(previous_limit, self.recursion_limit))
        try:
            for statement in statements:
                result = execute(statement, self.globals, self)
                if isinstance(result, Returned):
                    logger.debug("top-level return; stopping program")
                    return
        except LoxRuntimeError as error:
            self.reporter.runtime_error(error)
        except RecursionError:
            self.reporter.runtime_error(LoxRuntimeError(None, "Stack overflow."))
        finally:
            sys.setrecursionlimit(previous_limit)

    def evaluate(self, expr: Expr) -> LoxValue:
        """Evaluate a single expression in the global scope; errors propagate."""
        return evaluate(expr, self.globals, self)

    def write_line(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def read_line(self) -> str:
        return read_input(self.prompt, self.stdout, self.stdin)
