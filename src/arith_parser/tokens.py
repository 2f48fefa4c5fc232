"""Token kinds and the immutable Token value type."""

from enum import Enum


class TokenKind(Enum):
    NUMBER = 'number'
    VARIABLE = 'x'
    FUNCTION = 'function'
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POWER = '^'
    LPAREN = '('
    RPAREN = ')'
    NEGATE = 'neg'      # emitted by the parser only
    END = 'end'


class Token:
    """One lexical unit.

    ``value`` is set for NUMBER tokens, ``index`` (into the function table)
    for FUNCTION tokens; both are None otherwise.
    """
    __slots__ = ('kind', 'value', 'index')

    def __init__(self, kind, value=None, index=None):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'index', index)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.index) == \
            (other.kind, other.value, other.index)

    def __hash__(self):
        return hash((self.kind, self.value, self.index))

    def __repr__(self):
        if self.kind is TokenKind.NUMBER:
            return f"Token(NUMBER, {self.value!r})"
        if self.kind is TokenKind.FUNCTION:
            return f"Token(FUNCTION, {self.index})"
        return f"Token({self.kind.name})"


# Payload-free tokens are shared
END = Token(TokenKind.END)
VARIABLE = Token(TokenKind.VARIABLE)
NEGATE = Token(TokenKind.NEGATE)
MULTIPLY = Token(TokenKind.MULTIPLY)
