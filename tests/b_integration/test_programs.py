"""Integration tests for programs/ sources and the YAML case suite.

Each programs/internal/*.sx file is compiled and compared to the .out file
beside it. programs/suite.yaml lists further cases, including ones that
must fail with a given error.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from sexpc.compiler import compile_source
from sexpc.testing import CaseConfig, compare_output, get_test_programs, load_suite

PROGRAMS_ROOT = Path(__file__).parent.parent.parent / "programs"
PROGRAMS_DIR = PROGRAMS_ROOT / "internal"
SUITE_PATH = PROGRAMS_ROOT / "suite.yaml"

PROGRAMS = get_test_programs(PROGRAMS_DIR)
SUITE = load_suite(SUITE_PATH)


def test_programs_found() -> None:
    assert PROGRAMS, f"no programs in {PROGRAMS_DIR}"
    assert SUITE.cases, f"no cases in {SUITE_PATH}"


@pytest.mark.parametrize("program", PROGRAMS, ids=lambda p: p.stem)
def test_program(program: Path) -> None:
    expected = program.with_suffix(".out").read_text().rstrip("\n")
    assert compile_source(program.read_text()) == expected


@pytest.mark.parametrize(
    "case",
    [case for case in SUITE.cases if case.enabled],
    ids=lambda c: c.name,
)
def test_suite_case(case: CaseConfig) -> None:
    expected, actual, ok = compare_output(case)
    assert ok, f"{case.name}: expected {expected!r}, got {actual!r}"


class TestLoadSuite:
    """Tests for the YAML suite loader."""

    def test_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "suite.yaml"
        path.write_text(
            "name: demo\n"
            "cases:\n"
            "  - name: ok\n"
            "    source: '(f 1)'\n"
            "    expected: |\n"
            "      f(1);\n"
            "  - name: bad\n"
            "    source: '(f'\n"
            "    error: ParseError\n"
            "    enabled: false\n"
            "  - name: no_source\n"
            "  - source: '(g)'\n"
        )
        suite = load_suite(path)

        assert suite.name == "demo"
        assert [c.name for c in suite.cases] == ["ok", "bad"]
        assert suite.cases[0].expected == "f(1);"
        assert suite.cases[1].error == "ParseError"
        assert not suite.cases[1].enabled

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "suite.yaml"
        path.write_text("")
        suite = load_suite(path)
        assert suite.name == "cases"
        assert suite.cases == []
