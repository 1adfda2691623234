"""Error taxonomy for the sexpc pipeline.

Every failure in the pipeline is fatal to the compilation that raised it.
All errors derive from CompileError so callers can catch the whole family.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sexpc.lexer import Token


class CompileError(Exception):
    """Base class for all errors raised while compiling."""


class LexError(CompileError):
    """The scanner met a character it cannot start a token with."""

    def __init__(self, message: str, char: str, position: int) -> None:
        super().__init__(message)
        self.char = char
        self.position = position


class UnterminatedStringError(LexError):
    """A string literal was opened but never closed."""


class ParseError(CompileError):
    """Unexpected or missing token.

    `token` is None when the token stream ended early.
    """

    def __init__(self, message: str, token: Token | None, position: int) -> None:
        super().__init__(message)
        self.token = token
        self.position = position


class TraversalError(CompileError):
    """The tree walker was handed an object that is not a source node."""

    def __init__(self, message: str, node: Any) -> None:
        super().__init__(message)
        self.node = node


class GenerateError(CompileError):
    """The generator was handed an object that is not a target node."""

    def __init__(self, message: str, node: Any) -> None:
        super().__init__(message)
        self.node = node


__all__ = [
    "CompileError",
    "GenerateError",
    "LexError",
    "ParseError",
    "TraversalError",
    "UnterminatedStringError",
]
