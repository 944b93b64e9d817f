"""
Tokenizer for reckon arithmetic expressions.

Converts an expression string into a lazy sequence of typed tokens.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from enum import StrEnum, auto

from reckon.core.errors import ErrorKind, LexError


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "text", "start", "end", "value")

    def __init__(
        self,
        kind: TokenKind,
        text: str,
        start: int,
        end: int,
        value: float | None = None,
    ) -> None:
        self.kind = kind
        self.text = text
        self.start = start
        self.end = end
        self.value = value

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)

    def describe(self) -> str:
        """Human-readable name for diagnostics."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        return repr(self.text)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, span={self.span})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_WHITESPACE = " \t\r\n"

# Everything that could belong to a numeric literal, valid or not
_NUMBER_RUN_RE = re.compile(r"[0-9.]+")
# Literal grammar: digits, optionally a single point followed by digits
_NUMBER_RE = re.compile(r"\d+(\.\d+)?")


class TokenStream:
    """
    Lazy, restartable token sequence over one expression.

    Each call to ``iter()`` starts a fresh scan from offset 0, so the same
    stream can be walked more than once. Scanning stops after ``EOF``.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        return _scan(self.source)

    def __repr__(self) -> str:
        return f"TokenStream({self.source!r})"


def tokenize(source: str) -> TokenStream:
    """Tokenize an expression string.

    Nothing is scanned until the result is iterated; a :class:`LexError`
    surfaces at the offending token.
    """
    return TokenStream(source)


def _scan(source: str) -> Iterator[Token]:
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        if c.isascii() and (c.isdigit() or c == "."):
            tok = _read_number(source, i)
            yield tok
            i = tok.end
            continue

        kind = _SINGLE_CHAR.get(c)
        if kind is not None:
            yield Token(kind, c, i, i + 1)
            i += 1
            continue

        raise LexError(ErrorKind.UNEXPECTED_CHAR, f"Unexpected character: {c!r}", i)

    yield Token(TokenKind.EOF, "", n, n)


def _read_number(source: str, start: int) -> Token:
    """Read a numeric literal starting at ``start``."""
    m = _NUMBER_RUN_RE.match(source, start)
    text = m.group(0) if m else ""

    if not _NUMBER_RE.fullmatch(text):
        raise LexError(ErrorKind.INVALID_NUMBER, f"Invalid number: {text!r}", start)

    value = float(text)
    if not math.isfinite(value):
        raise LexError(ErrorKind.INVALID_NUMBER, f"Number out of range: {text!r}", start)

    return Token(TokenKind.NUMBER, text, start, m.end(), value)
