"""sexpc compiler package - s-expressions to C-like call code.

Stages: tokenize -> parse -> transform -> generate.
"""

from __future__ import annotations

from sexpc.compiler.codegen import generate
from sexpc.compiler.compiler import (
    CompileResult,
    Failure,
    Success,
    compile_result,
    compile_source,
)
from sexpc.compiler.parser import parse
from sexpc.compiler.transformer import transform
from sexpc.compiler.traversal import NodeHooks, traverse

__all__ = [
    "CompileResult",
    "Failure",
    "NodeHooks",
    "Success",
    "compile_result",
    "compile_source",
    "generate",
    "parse",
    "transform",
    "traverse",
]
