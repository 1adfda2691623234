"""Code generation module - renders the target tree as C-like text."""
# ruff: noqa: I001 - Import order is intentional (handlers must follow dispatcher)

from __future__ import annotations

# Import dispatcher first
from sexpc.compiler.codegen.generate import generate

# Import handlers to register them with the dispatcher
from sexpc.compiler.codegen import handlers as _handlers  # noqa: F401
from sexpc.compiler.codegen.handlers import (
    ARGUMENT_SEPARATOR,
    STATEMENT_SEPARATOR,
    STATEMENT_TERMINATOR,
)

__all__ = [
    "ARGUMENT_SEPARATOR",
    "STATEMENT_SEPARATOR",
    "STATEMENT_TERMINATOR",
    "generate",
]
