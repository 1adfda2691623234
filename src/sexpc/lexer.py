"""Lexical scanner for the s-expression source language.

Turns raw text into a flat list of tokens in a single left-to-right pass.
There are five token families: parentheses, numbers, strings and names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sexpc.errors import LexError, UnterminatedStringError

DIGITS = frozenset("0123456789")
LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
QUOTE = '"'


class TokenKind(Enum):
    """Token families produced by the scanner."""

    PAREN_OPEN = "paren-open"
    PAREN_CLOSE = "paren-close"
    NUMBER = "number"
    STRING = "string"
    NAME = "name"


@dataclass(frozen=True)
class Token:
    """A single scanned token.

    Attributes:
        kind: Token family.
        text: Token text. For strings, the contents without the quotes.
        position: Offset of the token's first character in the source.
    """

    kind: TokenKind
    text: str
    position: int

    @property
    def end(self) -> int:
        """Offset one past the token's last source character."""
        match self.kind:
            case TokenKind.STRING:
                return self.position + len(self.text) + 2
            case _:
                return self.position + len(self.text)


def tokenize(source: str) -> list[Token]:
    """Scan source text into tokens.

    Args:
        source: Program text.

    Returns:
        Tokens in source order.

    Raises:
        LexError: On a character no token can start with.
        UnterminatedStringError: When a string literal is never closed.
    """
    tokens: list[Token] = []
    current = 0
    length = len(source)

    while current < length:
        char = source[current]

        if char == "(":
            tokens.append(Token(TokenKind.PAREN_OPEN, char, current))
            current += 1
            continue

        if char == ")":
            tokens.append(Token(TokenKind.PAREN_CLOSE, char, current))
            current += 1
            continue

        if char.isspace():
            current += 1
            continue

        if char in DIGITS:
            end = _scan_run(source, current, DIGITS)
            tokens.append(Token(TokenKind.NUMBER, source[current:end], current))
            current = end
            continue

        if char == QUOTE:
            close = source.find(QUOTE, current + 1)
            if close == -1:
                msg = f"unterminated string starting at position {current}"
                raise UnterminatedStringError(msg, char, current)
            tokens.append(
                Token(TokenKind.STRING, source[current + 1 : close], current)
            )
            current = close + 1
            continue

        if char in LETTERS:
            end = _scan_run(source, current, LETTERS)
            tokens.append(Token(TokenKind.NAME, source[current:end], current))
            current = end
            continue

        msg = f"unrecognized character {char!r} at position {current}"
        raise LexError(msg, char, current)

    return tokens


def _scan_run(source: str, start: int, charset: frozenset[str]) -> int:
    """Return the end offset of the maximal run of `charset` from `start`."""
    end = start
    while end < len(source) and source[end] in charset:
        end += 1
    return end


__all__ = ["Token", "TokenKind", "tokenize"]
