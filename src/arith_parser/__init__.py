"""arith-parser: compile single-variable arithmetic expressions, evaluate fast.

Supports:
  - Numbers, the variable x, + - * / ^ and unary minus
  - Implicit multiplication: 3x, 2(x+1)
  - cos sin tg ctg arcsin arccos arctg ln lg abs
    (aliases: tan cot asin acos atan log)
  - Scalar evaluation and vectorised evaluation over numpy arrays

Architecture:
  Tokenizer pulls one token at a time from the source text.
  Recursive-descent parser emits a postfix (RPN) program.
  Stack machine replays the program for any value of x.

Usage as library:
    from arith_parser import ArithmeticParser
    p = ArithmeticParser()
    if p.parse('2(x+1)^2'):
        p.evaluate(3.0)          # 32.0
"""

from .errors import ExpressionError, LexicalError, ExpressionSyntaxError
from .evaluator import format_program
from .parser import ArithmeticParser, compile_expression, MAX_DEPTH

__version__ = '1.0.0'

__all__ = [
    'ArithmeticParser', 'compile_expression', 'format_program', 'MAX_DEPTH',
    'ExpressionError', 'LexicalError', 'ExpressionSyntaxError',
]
