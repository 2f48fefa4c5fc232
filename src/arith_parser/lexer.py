"""Tokenizer: one token per call, single forward-only cursor.

Handles:
  - Unsigned decimal literals: ``12``, ``3.25`` (a ``.`` must be followed
    by at least one digit)
  - The variable ``x`` / ``X``
  - Function names from :data:`~arith_parser.tables.FUNCTION_INDEX`
    (case-sensitive, letters only)
  - Operators and parentheses from :data:`~arith_parser.tables.DELIMITERS`

ASCII whitespace is skipped.  Past the end of input every call returns END.
Only ASCII letters, digits and whitespace are recognised; any other
character (including non-breaking space) is a lexical error.

``tokenize`` and iterating a :class:`Tokenizer` drain the whole input at
once; the parser does not use them, they are for debugging and tests.
"""

from .errors import LexicalError
from .tables import DELIMITERS, lookup_function
from .tokens import Token, TokenKind, END, VARIABLE

DIGITS = '0123456789'
LETTERS = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
WHITESPACE = ' \t\n\r\f\v'


class Tokenizer:
    """Pull-style tokenizer over a single expression string."""

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.start = 0      # offset of the most recent token

    def next_token(self):
        """Consume and return the next token."""
        text = self.text
        n = len(text)
        i = self.pos

        while i < n and text[i] in WHITESPACE:
            i += 1
        self.start = i

        if i >= n:
            self.pos = i
            return END

        c = text[i]

        if c in 'xX':
            self.pos = i + 1
            return VARIABLE

        if c in DIGITS:
            return self._number(i)

        if c in LETTERS:
            j = i
            while j < n and text[j] in LETTERS:
                j += 1
            name = text[i:j]
            index = lookup_function(name)
            if index is None:
                raise LexicalError(f"Unknown function '{name}'", i, name)
            self.pos = j
            return Token(TokenKind.FUNCTION, index=index)

        kind = DELIMITERS.get(c)
        if kind is None:
            raise LexicalError(f"Unexpected character '{c}'", i, c)
        self.pos = i + 1
        return Token(kind)

    def _number(self, i):
        text = self.text
        n = len(text)
        j = i
        while j < n and text[j] in DIGITS:
            j += 1
        value = float(text[i:j])

        if j < n and text[j] == '.':
            k = j + 1
            while k < n and text[k] in DIGITS:
                k += 1
            if k == j + 1:
                raise LexicalError("Expected digit after '.'", j + 1,
                                   text[i:j + 1])
            value += float('0' + text[j:k])
            j = k

        self.pos = j
        return Token(TokenKind.NUMBER, value=value)

    def __iter__(self):
        """Yield tokens up to and including END."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.END:
                return


def tokenize(text):
    """Tokenize *text* into a list ending with an END token."""
    return list(Tokenizer(text))
