"""Error types for arith-parser."""


class ExpressionError(Exception):
    """Base error for arith-parser."""
    pass


class LexicalError(ExpressionError):
    """Malformed number, unknown identifier or stray character."""

    def __init__(self, msg, position, text=''):
        self.position = position
        self.text = text
        super().__init__(f"{msg} at position {position}")


class ExpressionSyntaxError(ExpressionError):
    """Token where the grammar expects something else."""

    def __init__(self, msg, token=None, position=None):
        self.token = token
        self.position = position
        if position is not None:
            msg = f"{msg} at position {position}"
        super().__init__(msg)
