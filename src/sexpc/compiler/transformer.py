"""Rewrite a source tree into a target tree.

One walk over the source tree. Each enter hook builds the target form of
its node and appends it to the sink it was handed: the target program body
for top-level forms, or the enclosing call's argument list for everything
nested. A call hands its own argument list down as its children's sink.
"""

from __future__ import annotations

from sexpc.compiler import nodes, target
from sexpc.compiler.traversal import NodeHooks, Visitor, traverse


def _enter_program(
    node: nodes.Program, parent: None, sink: list[target.Program]
) -> list[target.Statement]:
    program = target.Program()
    sink.append(program)
    return program.body


def _enter_number(
    node: nodes.NumberLiteral,
    parent: nodes.Program | nodes.CallExpression,
    sink: list,
) -> None:
    sink.append(target.NumberLiteral(node.text))


def _enter_string(
    node: nodes.StringLiteral,
    parent: nodes.Program | nodes.CallExpression,
    sink: list,
) -> None:
    sink.append(target.StringLiteral(node.text))


def _enter_call(
    node: nodes.CallExpression,
    parent: nodes.Program | nodes.CallExpression,
    sink: list,
) -> list[target.Expression]:
    expression = target.CallExpression(callee=target.Identifier(node.name))
    # Only the immediate parent decides whether the call becomes a statement
    if isinstance(parent, nodes.CallExpression):
        sink.append(expression)
    else:
        sink.append(target.ExpressionStatement(expression))
    return expression.arguments


TRANSFORM_VISITOR: Visitor = {
    nodes.Program: NodeHooks(enter=_enter_program),
    nodes.NumberLiteral: NodeHooks(enter=_enter_number),
    nodes.StringLiteral: NodeHooks(enter=_enter_string),
    nodes.CallExpression: NodeHooks(enter=_enter_call),
}


def transform(program: nodes.Program) -> target.Program:
    """Build the target tree for a source program.

    The source tree is left untouched, so it can be transformed again.
    """
    result: list[target.Program] = []
    traverse(program, TRANSFORM_VISITOR, result)
    return result[0]


__all__ = ["TRANSFORM_VISITOR", "transform"]
