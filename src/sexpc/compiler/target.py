"""Target syntax tree produced by the transformer and read by the generator.

Calls gain an explicit Identifier callee, and calls sitting directly in the
program body are wrapped in ExpressionStatement. Leaf nodes are frozen and
hashable; nodes holding children are compared by value only.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Identifier:
    """A callee name."""

    name: str


@dataclass(frozen=True)
class NumberLiteral:
    """Number text copied from the source tree."""

    text: str


@dataclass(frozen=True)
class StringLiteral:
    """String contents copied from the source tree."""

    text: str


@dataclass
class CallExpression:
    """A call with an explicit callee and argument expressions."""

    callee: Identifier
    arguments: list[Expression] = field(default_factory=list)


@dataclass
class ExpressionStatement:
    """A top-level call used as a statement."""

    expression: Expression


@dataclass
class Program:
    """Root of a target tree."""

    body: list[Statement] = field(default_factory=list)


Expression = CallExpression | Identifier | NumberLiteral | StringLiteral

# Literals are never wrapped, so they can appear directly in Program.body
Statement = ExpressionStatement | NumberLiteral | StringLiteral


def count_calls(node: Program | Statement | Expression) -> int:
    """Count CallExpression nodes in a target tree."""
    count = 0
    pending: list[Program | Statement | Expression] = [node]
    while pending:
        match pending.pop():
            case Program(body=children):
                pending.extend(children)
            case ExpressionStatement(expression=expression):
                pending.append(expression)
            case CallExpression(arguments=children):
                count += 1
                pending.extend(children)
    return count


__all__ = [
    "CallExpression",
    "Expression",
    "ExpressionStatement",
    "Identifier",
    "NumberLiteral",
    "Program",
    "Statement",
    "StringLiteral",
    "count_calls",
]
