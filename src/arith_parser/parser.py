"""Recursive-descent compiler from infix text to a postfix program.

Grammar::

    EXPR  -> EXPR2 { (+ | -) EXPR2 }
    EXPR2 -> EXPR3 { (* | /) EXPR3 }
    EXPR3 -> EXPR4 [ ^ EXPR4 ]
    EXPR4 -> FUNC ( EXPR )
           | x
           | NUM [ x | ( EXPR ) ]
           | ( EXPR )
           | - EXPR4

Each operator is emitted right after its right operand, so the program
comes out in post-order.  ``NUM x`` and ``NUM ( EXPR )`` are implicit
multiplication.  ``^`` does not chain: ``2^3^2`` leaves a trailing ``^``
and fails.

The parser pulls tokens from the tokenizer one at a time; there is no
token buffer.
"""

import numpy as np

from .errors import ExpressionError, ExpressionSyntaxError
from .evaluator import evaluate_array, evaluate_scalar
from .lexer import Tokenizer
from .tables import function_name
from .tokens import TokenKind, NEGATE, VARIABLE, MULTIPLY

MAX_DEPTH = 100


class _Compiler:
    """Single-use compiler state for one input string."""

    def __init__(self, text, max_depth):
        self.lexer = Tokenizer(text)
        self.max_depth = max_depth
        self.depth = 0
        self.program = []
        self.token = None

    def compile(self):
        self.advance()
        self.expr()
        self.expect(TokenKind.END)
        return tuple(self.program)

    # ── token helpers ──

    def advance(self):
        self.token = self.lexer.next_token()

    def expect(self, kind):
        if self.token.kind is not kind:
            raise self._unexpected(f"Expected {_describe_kind(kind)}")

    def _unexpected(self, msg):
        return ExpressionSyntaxError(
            f"{msg}, got {_describe(self.token)}",
            self.token, self.lexer.start)

    def emit(self, tok):
        self.program.append(tok)

    # ── grammar rules ──

    def expr(self):
        self.expr2()
        while self.token.kind in (TokenKind.PLUS, TokenKind.MINUS):
            op = self.token
            self.advance()
            self.expr2()
            self.emit(op)

    def expr2(self):
        self.expr3()
        while self.token.kind in (TokenKind.MULTIPLY, TokenKind.DIVIDE):
            op = self.token
            self.advance()
            self.expr3()
            self.emit(op)

    def expr3(self):
        self.expr4()
        if self.token.kind is TokenKind.POWER:
            op = self.token
            self.advance()
            self.expr4()
            self.emit(op)

    def expr4(self):
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise ExpressionSyntaxError(
                    f"Expression nested deeper than {self.max_depth} levels",
                    self.token, self.lexer.start)
            self._operand()
        finally:
            self.depth -= 1

    def _operand(self):
        tok = self.token
        kind = tok.kind

        if kind is TokenKind.FUNCTION:
            self.advance()
            self.expect(TokenKind.LPAREN)
            self._group()
            self.emit(tok)

        elif kind is TokenKind.VARIABLE:
            self.emit(VARIABLE)
            self.advance()

        elif kind is TokenKind.NUMBER:
            self.emit(tok)
            self.advance()
            if self.token.kind is TokenKind.VARIABLE:
                self.emit(VARIABLE)
                self.emit(MULTIPLY)
                self.advance()
            elif self.token.kind is TokenKind.LPAREN:
                self._group()
                self.emit(MULTIPLY)

        elif kind is TokenKind.LPAREN:
            self._group()

        elif kind is TokenKind.MINUS:
            self.advance()
            self.expr4()
            self.emit(NEGATE)

        else:
            raise self._unexpected("Expected operand")

    def _group(self):
        """``( EXPR )`` with the current token on the ``(``."""
        self.advance()
        self.expr()
        self.expect(TokenKind.RPAREN)
        self.advance()


def _describe_kind(kind):
    if kind is TokenKind.END:
        return "end of expression"
    if kind in (TokenKind.NUMBER, TokenKind.FUNCTION):
        return kind.value
    return f"'{kind.value}'"


def _describe(tok):
    if tok.kind is TokenKind.NUMBER:
        return f"number {tok.value:g}"
    if tok.kind is TokenKind.FUNCTION:
        return f"function '{function_name(tok.index)}'"
    return _describe_kind(tok.kind)


def compile_expression(text, max_depth=MAX_DEPTH):
    """Compile *text* into a postfix program.

    Args:
        text: Infix expression in one variable, e.g. ``"2(x+1)^2"``.
        max_depth: Maximum nesting of operands (parentheses, function
            calls, unary minus).

    Returns:
        tuple of :class:`~arith_parser.tokens.Token` in evaluation order.

    Raises:
        LexicalError: On malformed numbers, unknown names, stray characters.
        ExpressionSyntaxError: On grammar violations or excessive nesting,
            including nesting that exhausts the interpreter's recursion
            limit before *max_depth* is reached.
    """
    try:
        return _Compiler(text, max_depth).compile()
    except RecursionError:
        raise ExpressionSyntaxError("Expression nested too deeply") from None


class ArithmeticParser:
    """Compile an expression once, evaluate it many times.

    ``parse`` replaces the stored program (clearing it on failure) and
    must not run while another thread is evaluating the same instance.
    ``evaluate`` only reads the program.
    """

    def __init__(self, max_depth=MAX_DEPTH):
        self.max_depth = max_depth
        self._program = ()
        self.error = None

    def parse(self, text) -> bool:
        """Compile *text*.  Returns False on any lexical or syntax error.

        The exception that caused the failure is kept on ``self.error``.
        """
        self._program = ()
        self.error = None
        try:
            self._program = compile_expression(text, self.max_depth)
        except ExpressionError as e:
            self.error = e
            return False
        return True

    @property
    def program(self):
        """The compiled postfix program (empty after a failed parse)."""
        return self._program

    def evaluate(self, x: float) -> float:
        """Value of the expression at *x* (0.0 if nothing is compiled)."""
        return evaluate_scalar(self._program, x)

    def evaluate_many(self, xs) -> np.ndarray:
        """Values of the expression at every element of *xs*."""
        return evaluate_array(self._program, xs)

    def tabulate(self, start, stop, num=50):
        """Sample the expression on ``numpy.linspace(start, stop, num)``.

        Returns:
            (xs, ys) as float64 arrays.
        """
        xs = np.linspace(start, stop, num)
        return xs, self.evaluate_many(xs)
