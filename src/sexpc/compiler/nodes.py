"""Source syntax tree produced by the parser.

The tree is a closed set of four node kinds. Each child belongs to exactly
one parent. Literals are frozen and hashable; calls and the program own
mutable child lists and are compared by value only.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NumberLiteral:
    """A run of digits, kept as text."""

    text: str


@dataclass(frozen=True)
class StringLiteral:
    """String contents without the surrounding quotes."""

    text: str


@dataclass
class CallExpression:
    """A `(name arg...)` form."""

    name: str
    params: list[SourceNode] = field(default_factory=list)


@dataclass
class Program:
    """Root of a source tree: the top-level forms in order."""

    body: list[SourceNode] = field(default_factory=list)


SourceNode = NumberLiteral | StringLiteral | CallExpression


def count_calls(node: Program | SourceNode) -> int:
    """Count CallExpression nodes in a source tree."""
    count = 0
    pending: list[Program | SourceNode] = [node]
    while pending:
        match pending.pop():
            case Program(body=children):
                pending.extend(children)
            case CallExpression(params=children):
                count += 1
                pending.extend(children)
    return count


__all__ = [
    "CallExpression",
    "NumberLiteral",
    "Program",
    "SourceNode",
    "StringLiteral",
    "count_calls",
]
