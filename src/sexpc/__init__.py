"""sexpc: s-expression to C-like call code transpiler."""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys

from sexpc.compiler import compile_result, compile_source, generate, parse, transform
from sexpc.compiler.dump import dump_node, dump_tokens
from sexpc.errors import CompileError
from sexpc.lexer import tokenize

EMIT_STAGES = ("tokens", "ast", "target", "code")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sexpc",
        description="Compile s-expressions to C-like call code.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Source file (default: read stdin)",
    )
    parser.add_argument(
        "--emit",
        choices=EMIT_STAGES,
        default="code",
        help="Stop after this stage and print its result",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline progress to stderr",
    )
    return parser


def run_stage(source: str, emit: str) -> str:
    """Run the pipeline up to `emit` and return printable output."""
    if emit == "code":
        return compile_source(source)

    tokens = tokenize(source)
    if emit == "tokens":
        return json.dumps(dump_tokens(tokens), indent=2)

    program = parse(tokens)
    if emit == "ast":
        return json.dumps(dump_node(program), indent=2)

    return json.dumps(dump_node(transform(program)), indent=2)


def main(argv: list[str] | None = None) -> int:
    """Entry point for sexpc CLI."""
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.source == "-":
        source = sys.stdin.read()
    else:
        path = pathlib.Path(args.source)
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            print(f"error: no such file: {path}", file=sys.stderr)
            return 2
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: cannot read {path}: {e}", file=sys.stderr)
            return 2

    try:
        output = run_stage(source, args.emit)
    except CompileError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        # Only the JSON views of --emit recurse over the tree
        print(f"error: tree too deeply nested for --emit {args.emit}", file=sys.stderr)
        return 1

    print(output)
    return 0


__all__ = [
    "compile_result",
    "compile_source",
    "generate",
    "main",
    "parse",
    "tokenize",
    "transform",
]
