"""Postfix stack machine.

A program is a sequence of tokens in evaluation order.  Running it keeps
one stack of values:

  ========  =================================================
  NUMBER    push the literal
  VARIABLE  push x
  + - * /   pop right, pop left, push ``left OP right``
  ^         same, with ``numpy.power``
  NEGATE    pop one, push its negation
  FUNCTION  pop one, push ``FUNCTIONS[index](value)``
  ========  =================================================

All arithmetic goes through numpy with floating-point errors ignored, so
division by zero, domain errors and overflow produce ``inf``/``nan``
rather than exceptions.  Because every operation is a ufunc, the same
program runs unchanged on a scalar ``x`` or on a whole array of values.
"""

import numpy as np

from .tables import BINARY_OPS, FUNCTIONS, function_name
from .tokens import TokenKind


def run(program, x):
    """Run *program* with the variable bound to *x*.

    Args:
        program: Sequence of postfix tokens.
        x: float64 scalar or ndarray.

    Returns:
        The single value left on the stack (scalar or ndarray), or
        ``np.float64(0.0)`` for an empty program.
    """
    if not program:
        return np.float64(0.0)

    stack = []
    push = stack.append
    pop = stack.pop

    with np.errstate(all='ignore'):
        for tok in program:
            kind = tok.kind
            if kind is TokenKind.NUMBER:
                push(np.float64(tok.value))
            elif kind is TokenKind.VARIABLE:
                push(x)
            elif kind is TokenKind.NEGATE:
                push(np.negative(pop()))
            elif kind is TokenKind.FUNCTION:
                push(FUNCTIONS[tok.index][1](pop()))
            else:
                right = pop()
                left = pop()
                push(BINARY_OPS[kind](left, right))

    return stack[-1]


def evaluate_scalar(program, x):
    """Evaluate *program* at a single point, returning a Python float."""
    return float(run(program, np.float64(x)))


def evaluate_array(program, xs):
    """Evaluate *program* at every element of *xs*.

    Constant expressions are broadcast to the shape of *xs*.
    """
    xs = np.asarray(xs, dtype=np.float64)
    result = run(program, xs)
    return np.broadcast_to(result, xs.shape).astype(np.float64)


def format_program(program):
    """Render a program as space-separated RPN, e.g. ``'2 x 1 + *'``."""
    parts = []
    for tok in program:
        kind = tok.kind
        if kind is TokenKind.NUMBER:
            parts.append(f"{tok.value:g}")
        elif kind is TokenKind.FUNCTION:
            parts.append(function_name(tok.index))
        elif kind is TokenKind.NEGATE:
            parts.append('neg')
        else:
            parts.append(kind.value)
    return ' '.join(parts)
