"""Rendering rules for each target node kind.

Importing this module registers the rules with `generate`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sexpc.compiler.codegen.generate import generate
from sexpc.compiler.target import (
    CallExpression,
    ExpressionStatement,
    Identifier,
    NumberLiteral,
    Program,
    StringLiteral,
)

STATEMENT_SEPARATOR = "\n"
STATEMENT_TERMINATOR = ";"
ARGUMENT_SEPARATOR = ", "


@generate.register
def _program(node: Program) -> str:
    return STATEMENT_SEPARATOR.join(generate(child) for child in node.body)


@generate.register
def _expression_statement(node: ExpressionStatement) -> str:
    return generate(node.expression) + STATEMENT_TERMINATOR


@dataclass
class _CallFrame:
    """A call whose arguments are partly rendered."""

    call: CallExpression
    index: int = 0
    parts: list[str] = field(default_factory=list)


@generate.register
def _call(node: CallExpression) -> str:
    # Nested calls are rendered from an explicit stack, innermost last
    frames = [_CallFrame(node)]
    while True:
        frame = frames[-1]
        if frame.index < len(frame.call.arguments):
            argument = frame.call.arguments[frame.index]
            frame.index += 1
            if isinstance(argument, CallExpression):
                frames.append(_CallFrame(argument))
            else:
                frame.parts.append(generate(argument))
            continue

        arguments = ARGUMENT_SEPARATOR.join(frame.parts)
        text = f"{generate(frame.call.callee)}({arguments})"
        frames.pop()
        if not frames:
            return text
        frames[-1].parts.append(text)


@generate.register
def _identifier(node: Identifier) -> str:
    return node.name


@generate.register
def _number(node: NumberLiteral) -> str:
    return node.text


@generate.register
def _string(node: StringLiteral) -> str:
    return f'"{node.text}"'
