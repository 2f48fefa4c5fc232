"""Function and delimiter tables shared by the tokenizer and evaluator.

All tables are built once at import time and never modified.

Functions are addressed by index so a compiled program stores a small
integer rather than a name.  Aliases resolve to the same index:

  ===  ========  =======  ====================
  idx  name      alias    function
  ===  ========  =======  ====================
  0    cos                cosine
  1    sin                sine
  2    tg        tan      tangent
  3    ctg       cot      1 / tangent
  4    arcsin    asin     inverse sine
  5    arccos    acos     inverse cosine
  6    arctg     atan     inverse tangent
  7    ln        log      natural logarithm
  8    lg                 base-10 logarithm
  9    abs                absolute value
  ===  ========  =======  ====================
"""

from types import MappingProxyType

import numpy as np

from .tokens import TokenKind


def _cot(x):
    return 1.0 / np.tan(x)


# (name, function) in index order
FUNCTIONS = (
    ('cos', np.cos),
    ('sin', np.sin),
    ('tg', np.tan),
    ('ctg', _cot),
    ('arcsin', np.arcsin),
    ('arccos', np.arccos),
    ('arctg', np.arctan),
    ('ln', np.log),
    ('lg', np.log10),
    ('abs', np.abs),
)

_ALIASES = {
    'tan': 'tg',
    'cot': 'ctg',
    'asin': 'arcsin',
    'acos': 'arccos',
    'atan': 'arctg',
    'log': 'ln',
}


def _build_index():
    index = {name: i for i, (name, _) in enumerate(FUNCTIONS)}
    for alias, name in _ALIASES.items():
        index[alias] = index[name]
    return MappingProxyType(index)


# name -> index into FUNCTIONS
FUNCTION_INDEX = _build_index()

# Single-character operators and parentheses
DELIMITERS = MappingProxyType({
    '^': TokenKind.POWER,
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.MULTIPLY,
    '/': TokenKind.DIVIDE,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
})

# Binary operator kinds -> numpy ufunc
BINARY_OPS = MappingProxyType({
    TokenKind.PLUS: np.add,
    TokenKind.MINUS: np.subtract,
    TokenKind.MULTIPLY: np.multiply,
    TokenKind.DIVIDE: np.divide,
    TokenKind.POWER: np.power,
})


def function_name(index):
    """Canonical name for a function table index."""
    return FUNCTIONS[index][0]


def lookup_function(name):
    """Table index for *name*, or None if it is not a known function."""
    return FUNCTION_INDEX.get(name)
