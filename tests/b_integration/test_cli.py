"""Integration tests for the sexpc command-line entry point."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from sexpc import main


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "prog.sx"
    path.write_text("(add 1 (subtract 6 5))\n")
    return path


class TestMain:
    """Tests for main()."""

    def test_compile_file(
        self, source_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(source_file)]) == 0
        assert capsys.readouterr().out == "add(1, subtract(6, 5));\n"

    def test_compile_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("1 2"))
        assert main([]) == 0
        assert capsys.readouterr().out == "1\n2\n"

    def test_emit_tokens(
        self, source_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--emit", "tokens", str(source_file)]) == 0
        tokens = json.loads(capsys.readouterr().out)
        assert len(tokens) == 9
        assert tokens[1] == {"type": "name", "value": "add", "position": 1}

    def test_emit_ast(
        self, source_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--emit", "ast", str(source_file)]) == 0
        tree = json.loads(capsys.readouterr().out)
        assert tree["body"][0]["name"] == "add"

    def test_emit_target(
        self, source_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--emit", "target", str(source_file)]) == 0
        tree = json.loads(capsys.readouterr().out)
        assert tree["body"][0]["type"] == "ExpressionStatement"

    def test_compile_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bad.sx"
        path.write_text("(add 1);")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("error: unrecognized character ';'")

    def test_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "nope.sx")]) == 2
        assert "no such file" in capsys.readouterr().err

    def test_directory_source(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path)]) == 2
        assert capsys.readouterr().err.startswith("error: cannot read")

    def test_undecodable_source(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "latin1.sx"
        path.write_bytes(b'(say "caf\xe9")')
        assert main([str(path)]) == 2
        assert capsys.readouterr().err.startswith("error: cannot read")

    def test_deep_nesting(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        depth = 2000
        path = tmp_path / "deep.sx"
        path.write_text("(f " * depth + "1" + ")" * depth)
        assert main([str(path)]) == 0
        assert capsys.readouterr().out == "f(" * depth + "1" + ")" * depth + ";\n"
