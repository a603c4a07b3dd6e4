"""
Lexer for the 0/1/boolean expression language.

Reads the input one byte at a time and hands out typed tokens on demand;
the token stream is never materialised unless ``tokenize`` is used.
"""

import logging
from enum import Enum

from errors import LexError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    ZERO = "0"
    ONE = "1"
    LPAREN = "("
    RPAREN = ")"
    MULTIPLY = "*"
    ADD = "+"
    OR = "||"
    TRUE = "true"
    FALSE = "false"
    EOF = "EOF"


# Higher binds tighter. Only operators carry a precedence.
PRECEDENCE = {
    TokenKind.MULTIPLY: 2,
    TokenKind.ADD: 1,
    TokenKind.OR: 0,
}

_SINGLE_CHAR = {
    ord("("): TokenKind.LPAREN,
    ord(")"): TokenKind.RPAREN,
    ord("*"): TokenKind.MULTIPLY,
    ord("+"): TokenKind.ADD,
    ord("0"): TokenKind.ZERO,
    ord("1"): TokenKind.ONE,
}

_IDENTIFIERS = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "||": TokenKind.OR,
}

# Vertical tab is not whitespace here.
_WHITESPACE = frozenset(b" \t\n\r\f")


def _is_ident_byte(ch):
    return (ord("a") <= ch <= ord("z")) or (ord("A") <= ch <= ord("Z")) or ch in b"_|"


class Token:
    """A single token; ``pos`` is the byte offset where it starts."""

    __slots__ = ("kind", "pos", "precedence")

    def __init__(self, kind, pos):
        self.kind = kind
        self.pos = pos
        self.precedence = PRECEDENCE.get(kind)

    @property
    def is_operator(self):
        return self.precedence is not None

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self):
        return hash(self.kind)

    def __str__(self):
        return self.kind.value

    def __repr__(self):
        return f"Token({self.kind.name}, pos={self.pos})"


class Lexer:
    def __init__(self, text):
        # Lone surrogates become bytes >= 0x80 and are rejected like any non-ASCII input.
        self.input = text.encode("utf-8", errors="surrogatepass")
        self.position = 0

    def _peek(self):
        if self.position >= len(self.input):
            return None
        return self.input[self.position]

    def _skip_whitespace(self):
        while self.position < len(self.input) and self.input[self.position] in _WHITESPACE:
            self.position += 1

    def _read_ident(self):
        start = self.position
        while self.position < len(self.input) and _is_ident_byte(self.input[self.position]):
            self.position += 1
        return self.input[start:self.position].decode("ascii")

    def next_token(self):
        """Return the next token, or ``EOF`` on every call once the input is used up.

        Raises ``LexError`` on a byte outside the token set or an unknown identifier.
        """
        self._skip_whitespace()
        start = self.position
        ch = self._peek()

        if ch is None:
            return Token(TokenKind.EOF, start)

        kind = _SINGLE_CHAR.get(ch)
        if kind is not None:
            self.position += 1
            token = Token(kind, start)
        elif _is_ident_byte(ch):
            ident = self._read_ident()
            kind = _IDENTIFIERS.get(ident)
            if kind is None:
                raise LexError(start, ch, ident)
            token = Token(kind, start)
        else:
            raise LexError(start, ch)

        logger.debug("token %s at %d", token, start)
        return token

    def __iter__(self):
        """Yield tokens up to and including the first ``EOF``."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return


def tokenize(text):
    """Tokenize a whole expression string, ``EOF`` included."""
    return list(Lexer(text))
