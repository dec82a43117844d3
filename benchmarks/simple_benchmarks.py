import io
from timeit import timeit

from lox.interpreter import Interpreter
from lox.syntax.ast import (
    AssignExpr,
    BinaryExpr,
    BlockStmt,
    CallExpr,
    ExpressionStmt,
    FunctionStmt,
    IfStmt,
    LiteralExpr,
    ReturnStmt,
    VarStmt,
    VariableExpr,
    WhileStmt,
)
from lox.syntax.tokens import Token, TokenType
from lox.types.environment import Environment

# Trees are built by hand; there is no parser in this package.
_PAREN = Token(TokenType.RIGHT_PAREN, ")", None, 1)
_RETURN = Token(TokenType.RETURN, "return", None, 1)


def _name(lexeme: str) -> Token:
    return Token(TokenType.IDENTIFIER, lexeme, None, 1)


def _num(value: float) -> LiteralExpr:
    return LiteralExpr(float(value))


def _ref(lexeme: str) -> VariableExpr:
    return VariableExpr(_name(lexeme))


def _op(left, token_type: TokenType, lexeme: str, right) -> BinaryExpr:
    return BinaryExpr(left, Token(token_type, lexeme, None, 1), right)


def _call(callee: str, *args) -> CallExpr:
    return CallExpr(_ref(callee), _PAREN, tuple(args))


def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    root.define("answer", 42.0)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.get("answer")
    # Timed
    return timeit(lambda: env.get("answer"), number=n_lookups)


def time_program(statements: list, rounds: int) -> float:
    """Time `interpret` on a prebuilt tree, each round in a fresh interpreter."""
    def _once():
        Interpreter(stdout=io.StringIO()).interpret(statements)
    _once()  # Warmup
    return timeit(_once, number=rounds)


# fun fib(n) { if (n < 2) return n; return fib(n - 1) + fib(n - 2); } fib(15);
FIB_PROGRAM = [
    FunctionStmt(
        _name("fib"),
        (_name("n"),),
        (
            IfStmt(
                _op(_ref("n"), TokenType.LESS, "<", _num(2)),
                ReturnStmt(_RETURN, _ref("n")),
            ),
            ReturnStmt(
                _RETURN,
                _op(
                    _call("fib", _op(_ref("n"), TokenType.MINUS, "-", _num(1))),
                    TokenType.PLUS,
                    "+",
                    _call("fib", _op(_ref("n"), TokenType.MINUS, "-", _num(2))),
                ),
            ),
        ),
    ),
    ExpressionStmt(_call("fib", _num(15))),
]

# var i = 0; var sum = 0; while (i < 5000) { sum = sum + i; i = i + 1; }
WHILE_SUM_PROGRAM = [
    VarStmt(_name("i"), _num(0)),
    VarStmt(_name("sum"), _num(0)),
    WhileStmt(
        _op(_ref("i"), TokenType.LESS, "<", _num(5000)),
        BlockStmt(
            (
                ExpressionStmt(
                    AssignExpr(_name("sum"), _op(_ref("sum"), TokenType.PLUS, "+", _ref("i")))
                ),
                ExpressionStmt(
                    AssignExpr(_name("i"), _op(_ref("i"), TokenType.PLUS, "+", _num(1)))
                ),
            )
        ),
    ),
]


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print("Benchmark: recursive fib(15)")
    print(f"  time: {time_program(FIB_PROGRAM, rounds=20):.6f}s  [rounds=20]")

    print("Benchmark: while-loop sum 0..5000")
    print(f"  time: {time_program(WHILE_SUM_PROGRAM, rounds=20):.6f}s  [rounds=20]")
