"""The `generate` entry point for rendering target trees.

Only the fallback lives here: it rejects anything that is not a target
node. One handler per node kind is registered from handlers.py.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any

from sexpc.errors import GenerateError


@singledispatch
def generate(node: Any) -> str:
    """Render a target tree node as text."""
    msg = f"unknown node kind: {type(node).__name__}"
    raise GenerateError(msg, node)
