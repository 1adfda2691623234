"""Plain-data views of tokens and trees.

Every node becomes a dict with a `type` key naming its kind, which makes the
intermediate stages printable as JSON.
"""

from __future__ import annotations

from typing import Any

from sexpc.compiler import nodes, target
from sexpc.lexer import Token


def dump_tokens(tokens: list[Token]) -> list[dict[str, Any]]:
    """Convert tokens to dicts."""
    return [
        {"type": token.kind.value, "value": token.text, "position": token.position}
        for token in tokens
    ]


def dump_node(node: Any) -> dict[str, Any]:
    """Convert a source or target tree node to nested dicts.

    Raises:
        TypeError: If `node` is not a tree node.
    """
    match node:
        case nodes.Program(body=body) | target.Program(body=body):
            return {"type": "Program", "body": [dump_node(child) for child in body]}
        case nodes.CallExpression(name=name, params=params):
            return {
                "type": "CallExpression",
                "name": name,
                "params": [dump_node(child) for child in params],
            }
        case target.CallExpression(callee=callee, arguments=arguments):
            return {
                "type": "CallExpression",
                "callee": dump_node(callee),
                "arguments": [dump_node(child) for child in arguments],
            }
        case target.ExpressionStatement(expression=expression):
            return {"type": "ExpressionStatement", "expression": dump_node(expression)}
        case target.Identifier(name=name):
            return {"type": "Identifier", "name": name}
        case nodes.NumberLiteral(text=text) | target.NumberLiteral(text=text):
            return {"type": "NumberLiteral", "value": text}
        case nodes.StringLiteral(text=text) | target.StringLiteral(text=text):
            return {"type": "StringLiteral", "value": text}
        case _:
            msg = f"Not a tree node: {type(node).__name__}"
            raise TypeError(msg)


__all__ = ["dump_node", "dump_tokens"]
