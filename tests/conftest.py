import io

import pytest

from lox.interpreter import Interpreter
from lox.interpreter.reporter import ErrorReporter


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def err():
    return io.StringIO()


@pytest.fixture
def interp(out, err):
    """Fresh interpreter writing to in-memory sinks, with empty input."""
    return Interpreter(stdout=out, stdin=io.StringIO(""), reporter=ErrorReporter(err))


@pytest.fixture
def run(interp, out):
    """Interpret statements and return the printed lines."""
    def _run(*statements):
        interp.interpret(list(statements))
        return out.getvalue().splitlines()
    return _run
