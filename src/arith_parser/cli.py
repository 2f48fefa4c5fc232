"""arith-eval CLI: compile an expression and print its values.

Usage:
    arith-eval "x^2"                       Value at x = 0
    arith-eval "3x + 1" -x 2 -x 5          Values at x = 2 and x = 5
    arith-eval "sin(x)" -r 0 3.14 -n 5     Table over [0, 3.14], 5 points
    arith-eval "2(x+1)" -p                 Also show the postfix program
"""

import argparse
import sys

import numpy as np

from .errors import ExpressionError, LexicalError
from .evaluator import format_program
from .parser import ArithmeticParser, MAX_DEPTH


def _fmt_value(v) -> str:
    """Format a result, keeping inf/nan readable."""
    v = float(v)
    if np.isnan(v):
        return 'nan'
    if np.isinf(v):
        return 'inf' if v > 0 else '-inf'
    return f"{v:.12g}"


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='arith-eval',
        description='Evaluate a single-variable arithmetic expression.',
        epilog="""Examples:
  arith-eval "x^2" -x 3              9
  arith-eval "2(x+1)" -x 4           10
  arith-eval "ln(x)" -r 1 10 -n 10   table of ln over [1, 10]
  arith-eval -p -- "-x^2"           show postfix program""")

    parser.add_argument('expression',
                        help='Expression in x, e.g. "3x^2 - sin(x)"')
    parser.add_argument('-x', '--at', type=float, action='append',
                        metavar='VALUE', default=None,
                        help='Evaluate at VALUE (repeatable, default: 0)')
    parser.add_argument('-r', '--range', type=float, nargs=2,
                        metavar=('START', 'STOP'), default=None,
                        help='Tabulate over [START, STOP]')
    parser.add_argument('-n', '--num', type=int, default=11,
                        help='Number of points for --range (default: 11)')
    parser.add_argument('-p', '--program', action='store_true',
                        help='Print the compiled postfix program')
    parser.add_argument('--max-depth', type=int, default=MAX_DEPTH,
                        help=f'Maximum nesting depth (default: {MAX_DEPTH})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show error details')

    args = parser.parse_args(argv)

    if args.num < 1:
        parser.error(f"--num must be at least 1, got {args.num}")
    if args.max_depth < 1:
        parser.error(f"--max-depth must be at least 1, got {args.max_depth}")

    try:
        return run(args)
    except ExpressionError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            _print_error_context(args.expression, e)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2


def _print_error_context(text, err):
    """Show the expression with a caret under the failing position."""
    pos = getattr(err, 'position', None)
    print(f"  {type(err).__name__}", file=sys.stderr)
    if pos is None:
        return
    print(f"  {text}", file=sys.stderr)
    print(f"  {' ' * pos}^", file=sys.stderr)
    if isinstance(err, LexicalError) and err.text:
        print(f"  offending text: {err.text!r}", file=sys.stderr)


def run(args) -> int:
    """Compile and evaluate as requested by *args*."""
    calc = ArithmeticParser(max_depth=args.max_depth)
    if not calc.parse(args.expression):
        raise calc.error

    if args.program:
        print(f"Program: {format_program(calc.program)}")

    if args.range is not None:
        start, stop = args.range
        xs, ys = calc.tabulate(start, stop, args.num)
        for x, y in zip(xs, ys):
            print(f"{_fmt_value(x):>14}  {_fmt_value(y)}")
        return 0

    points = args.at if args.at else [0.0]
    if len(points) == 1:
        print(_fmt_value(calc.evaluate(points[0])))
    else:
        for x in points:
            print(f"x = {_fmt_value(x)}: {_fmt_value(calc.evaluate(x))}")
    return 0
