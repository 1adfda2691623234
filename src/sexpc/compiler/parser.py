"""Parser from tokens to the source syntax tree.

Grammar:

    Program   = Node*
    Node      = NUMBER | STRING | Call
    Call      = '(' NAME Node* ')'

One token of lookahead, no backtracking, no error recovery. Nesting
is tracked with an explicit stack of open calls, so its depth is not
bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sexpc.compiler.nodes import (
    CallExpression,
    NumberLiteral,
    Program,
    SourceNode,
    StringLiteral,
)
from sexpc.errors import ParseError
from sexpc.lexer import Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Sequence


class _TokenCursor:
    """Read position over a token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def peek(self) -> Token | None:
        if self.at_end():
            return None
        return self.tokens[self.index]

    def advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def end_position(self) -> int:
        """Source offset just past the last token, used for end-of-input errors."""
        if not self.tokens:
            return 0
        return self.tokens[-1].end


def parse(tokens: Sequence[Token]) -> Program:
    """Build a Program from a token sequence.

    Args:
        tokens: Output of `tokenize`.

    Returns:
        The source syntax tree.

    Raises:
        ParseError: On the first malformed construct.
    """
    cursor = _TokenCursor(tokens)
    program = Program()
    # Calls whose closing parenthesis has not been seen yet, innermost last
    open_calls: list[CallExpression] = []

    while not cursor.at_end():
        token = cursor.advance()
        sink: list[SourceNode] = open_calls[-1].params if open_calls else program.body

        match token.kind:
            case TokenKind.NUMBER:
                sink.append(NumberLiteral(token.text))
            case TokenKind.STRING:
                sink.append(StringLiteral(token.text))
            case TokenKind.PAREN_OPEN:
                call = CallExpression(_call_name(cursor))
                sink.append(call)
                open_calls.append(call)
            case TokenKind.PAREN_CLOSE if open_calls:
                open_calls.pop()
            case _:
                raise _unexpected(token)

    if open_calls:
        position = cursor.end_position()
        msg = f"unexpected end of input at position {position}"
        raise ParseError(msg, None, position)
    return program


def _call_name(cursor: _TokenCursor) -> str:
    """Consume the name that must follow an opening parenthesis."""
    head = cursor.peek()
    if head is None:
        position = cursor.end_position()
        msg = f"expected a call name at position {position}, got end of input"
        raise ParseError(msg, None, position)
    if head.kind is not TokenKind.NAME:
        msg = (
            f"expected a call name at position {head.position}, "
            f"got {head.kind.value} {head.text!r}"
        )
        raise ParseError(msg, head, head.position)
    cursor.advance()
    return head.text


def _unexpected(token: Token) -> ParseError:
    msg = (
        f"unexpected {token.kind.value} token {token.text!r} "
        f"at position {token.position}"
    )
    return ParseError(msg, token, token.position)


__all__ = ["parse"]
