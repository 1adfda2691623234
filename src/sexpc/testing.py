"""Testing utilities for sexpc."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from sexpc.compiler import Failure, Success, compile_result


@dataclass
class CaseConfig:
    """A single compilation case.

    Attributes:
        name: Case identifier.
        source: Program text.
        expected: Expected output, for cases that should compile.
        error: Expected CompileError subclass name, for cases that should fail.
        enabled: Whether the case is run.
    """

    name: str
    source: str
    expected: str | None = None
    error: str | None = None
    enabled: bool = True


@dataclass
class CaseSuite:
    """Collection of compilation cases loaded from YAML."""

    name: str
    cases: list[CaseConfig] = field(default_factory=list)


def load_suite(config_path: Path | str) -> CaseSuite:
    """Load a case suite from YAML.

    Args:
        config_path: Path to suite.yaml file.

    Returns:
        CaseSuite configuration.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f) or {}

    cases = []
    for case_data in data.get("cases", []):
        # Entries without a name or a source are skipped
        if "name" not in case_data or "source" not in case_data:
            continue
        expected = case_data.get("expected")
        cases.append(
            CaseConfig(
                name=case_data["name"],
                source=case_data["source"],
                expected=expected.rstrip("\n") if expected is not None else None,
                error=case_data.get("error"),
                enabled=case_data.get("enabled", True),
            )
        )

    return CaseSuite(name=data.get("name", "cases"), cases=cases)


def compare_output(case: CaseConfig) -> tuple[str, str, bool]:
    """Compile a case and compare against what it declares.

    Failures are rendered as the error class name, so a case expecting
    `error: LexError` matches a LexError.

    Returns:
        Tuple of (expected, actual, match).
    """
    match compile_result(case.source):
        case Success(output=output):
            actual = output
        case Failure(error=error):
            actual = type(error).__name__

    expected = case.error if case.error is not None else case.expected or ""
    return expected, actual, expected == actual


def get_test_programs(directory: Path | str = "programs/internal") -> list[Path]:
    """Get all source programs from a directory.

    Each `name.sx` program is expected to have a `name.out` file beside it.
    """
    dir_path = Path(directory)
    if not dir_path.exists():
        return []
    return sorted(dir_path.glob("*.sx"))
