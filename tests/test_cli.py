"""Tests for the line-oriented command-line driver."""

from __future__ import annotations

import io
import os
import subprocess
import sys

import pytest

from expression_tree.__main__ import main


def _run(monkeypatch: pytest.MonkeyPatch, stdin: str) -> int:
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    return main()


class TestSuccess:
    def test_prints_every_stage(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run(monkeypatch, "3 + 4 * 2\n") == 0
        assert capsys.readouterr().out.splitlines() == [
            "Original Expression: 3 + 4 * 2",
            "Infix Tokens: [3, +, 4, *, 2]",
            "Postfix Tokens: [3, 4, 2, *, +]",
            "Build: complete",
            "Prefix: + 3 * 4 2",
            "Infix: (3+(4*2))",
            "Postfix: 3 4 2 * +",
            "Evaluate: 11",
            "Display: complete",
        ]

    def test_reads_only_first_line(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run(monkeypatch, "(3 + 4) * 2\n1 / 0\n") == 0
        assert "Evaluate: 14" in capsys.readouterr().out


class TestFailure:
    def test_division_by_zero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run(monkeypatch, "6 / 0\n") == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "Error: Division by zero: 6 / 0"

    def test_malformed(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run(monkeypatch, "(3 + 4\n") == 1
        assert "Missing closing parenthesis" in capsys.readouterr().err

    def test_no_input(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run(monkeypatch, "") == 1
        assert "no expression" in capsys.readouterr().err


def test_module_entry_point() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "expression_tree"],
        input="10 % 3\n",
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "Evaluate: 1" in result.stdout.splitlines()


@pytest.mark.parametrize("level", ["VERBOSE", "debug"])
def test_log_level_from_environment(level: str) -> None:
    result = subprocess.run(
        [sys.executable, "-m", "expression_tree"],
        input="1 + 2\n",
        capture_output=True,
        text=True,
        env={**os.environ, "EXPRESSION_TREE_LOG_LEVEL": level},
    )
    assert result.returncode == 0
    assert "Evaluate: 3" in result.stdout.splitlines()
    assert "Traceback" not in result.stderr
