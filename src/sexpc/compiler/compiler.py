"""Core compiler module - the four stages composed into one call."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sexpc.compiler.codegen import generate
from sexpc.compiler.parser import parse
from sexpc.compiler.transformer import transform
from sexpc.errors import CompileError
from sexpc.lexer import tokenize

logger = logging.getLogger(__name__)


def compile_source(source: str) -> str:
    """Compile s-expression source to C-like call code.

    Args:
        source: Program text.

    Returns:
        Generated code, one top-level form per line.

    Raises:
        CompileError: From whichever stage failed first.
    """
    tokens = tokenize(source)
    logger.debug("scanned %d tokens", len(tokens))

    program = parse(tokens)
    logger.debug("parsed %d top-level forms", len(program.body))

    output = generate(transform(program))
    logger.debug("generated %d characters", len(output))
    return output


@dataclass(frozen=True)
class Success:
    """Compilation finished; `output` holds the generated code."""

    output: str


@dataclass(frozen=True)
class Failure:
    """Compilation stopped at `error`."""

    error: CompileError


CompileResult = Success | Failure


def compile_result(source: str) -> CompileResult:
    """Compile like `compile_source`, returning failures instead of raising.

    Only CompileError is captured; anything else is a bug and propagates.
    """
    try:
        return Success(compile_source(source))
    except CompileError as e:
        logger.debug("compilation failed: %s", e)
        return Failure(e)


__all__ = ["CompileResult", "Failure", "Success", "compile_result", "compile_source"]
