"""Exceptions raised while turning source text into an AST."""


class ExprError(Exception):
    """Base class for lexing and parsing failures."""

    def __init__(self, message, pos=None):
        super().__init__(message)
        self.pos = pos


class LexError(ExprError):
    """An input byte (or identifier) outside the token set."""

    def __init__(self, pos, byte, text=None):
        if text is not None:
            message = f"Unknown identifier {text!r} at position {pos}"
        else:
            message = f"Unexpected byte {bytes([byte])!r} at position {pos}"
        super().__init__(message, pos)
        self.byte = byte
        self.text = text


class ParseError(ExprError):
    """The token stream cannot be reduced to exactly one tree."""

    def __init__(self, message, pos=None, token=None):
        super().__init__(message, pos)
        self.token = token
