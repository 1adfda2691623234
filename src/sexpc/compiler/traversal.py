"""Generic depth-first walker over source syntax trees.

A visitor maps node classes to NodeHooks. For every node the walker calls
`enter` (pre-order), descends into the children, then calls `exit`
(post-order). Both hooks receive `(node, parent, sink)`.

The sink is an opaque value threaded explicitly through the walk. Whatever
a node's `enter` hook returns becomes the sink handed to that node's
children; returning None keeps the current one. Nothing is ever stored on
the nodes themselves.

The walk keeps its own stack of pending visits instead of recursing, so
arbitrarily deep trees can be walked.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sexpc.compiler.nodes import (
    CallExpression,
    NumberLiteral,
    Program,
    SourceNode,
    StringLiteral,
)
from sexpc.errors import TraversalError

Node = Program | SourceNode
Parent = Program | CallExpression | None

EnterHook = Callable[[Any, Parent, Any], Any]
ExitHook = Callable[[Any, Parent, Any], None]


@dataclass(frozen=True)
class NodeHooks:
    """Callbacks for one node kind. Either may be omitted."""

    enter: EnterHook | None = None
    exit: ExitHook | None = None


Visitor = Mapping[type, NodeHooks]


@dataclass(frozen=True)
class _Visit:
    """A pending step of the walk: entering a node, or leaving it."""

    node: Any
    parent: Parent
    sink: Any
    leaving: bool = False


def traverse(root: Node, visitor: Visitor, sink: Any = None) -> None:
    """Walk `root` depth-first, dispatching to `visitor`.

    Args:
        root: Tree root, visited with parent None.
        visitor: Hooks keyed by node class.
        sink: Initial sink passed to the root's hooks.

    Raises:
        TraversalError: If the walk reaches an object that is not a node.
    """
    pending = [_Visit(root, None, sink)]

    while pending:
        visit = pending.pop()
        node = visit.node
        hooks = visitor.get(type(node))

        if visit.leaving:
            # Only scheduled when an exit hook exists
            hooks.exit(node, visit.parent, visit.sink)
            continue

        child_sink = visit.sink
        if hooks is not None and hooks.enter is not None:
            returned = hooks.enter(node, visit.parent, visit.sink)
            if returned is not None:
                child_sink = returned

        match node:
            case Program(body=children) | CallExpression(params=children):
                pass
            case NumberLiteral() | StringLiteral():
                children = []
            case _:
                msg = f"unknown node kind: {type(node).__name__}"
                raise TraversalError(msg, node)

        if hooks is not None and hooks.exit is not None:
            pending.append(_Visit(node, visit.parent, visit.sink, leaving=True))
        # Reversed so the first child is popped first
        for child in reversed(children):
            pending.append(_Visit(child, node, child_sink))


__all__ = ["NodeHooks", "Visitor", "traverse"]
