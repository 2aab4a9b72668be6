# tests/test_cli.py
"""
Tests for the textfathom command-line interface (CLI).

Scope
-----
1.  **Command Registration**: `--help` lists the commands.
2.  **Argument Validation**: Typer's `exists=True` checks for input files.
3.  **Rendering**: text reports, `--json` summaries and word listings.
4.  **Error Handling**: unexpected failures exit with code 1.

`typer.testing.CliRunner` invokes the app in-process. Validation errors go
to stderr, so assertions read `result.output` (combined stdout/stderr).
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from textfathom import __version__
from textfathom.cli import app


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """A fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture  # type: ignore[misc]
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_text("The cat and the hat.\n\nThey sat on a mat.\n", encoding="utf-8")
    return path


def test_cli_help_shows_usage(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0, f"Help failed: {result.output}"
    assert "analyse" in result.output
    assert "block" in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_analyse_fails_on_missing_file(runner: CliRunner) -> None:
    """Typer enforces `exists=True` with a usage error."""
    result = runner.invoke(app, ["analyse", "ghost.txt"])
    assert result.exit_code != 0


def test_analyse_prints_report(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(app, ["analyse", str(sample_file)])
    assert result.exit_code == 0, result.output
    assert "Number of words" in result.output
    assert "READABILITY INDICES" in result.output


def test_analyse_json(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(app, ["analyse", str(sample_file), "--json", "--words"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.output)
    assert payload["source_label"] == str(sample_file)
    assert payload["word_count"] == 10
    assert payload["paragraph_count"] == 2
    assert payload["unique_words"]["the"] == 2


def test_analyse_accumulate(runner: CliRunner, sample_file: Path, tmp_path: Path) -> None:
    """Accumulated files produce one combined summary."""
    other = tmp_path / "other.txt"
    other.write_text("Fish swim.\n", encoding="utf-8")

    result = runner.invoke(app, ["analyse", str(sample_file), str(other), "-a", "--json"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.output)
    assert payload["word_count"] == 12
    assert payload["paragraph_count"] == 3
    assert payload["source_label"] == str(other)


def test_block_reads_stdin(runner: CliRunner) -> None:
    result = runner.invoke(app, ["block", "--json"], input="The cat sat on the mat.")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["word_count"] == 6
    assert payload["source_label"] == ""


def test_block_argument_with_words(runner: CliRunner) -> None:
    result = runner.invoke(app, ["block", "The cat sat.", "--words"])
    assert result.exit_code == 0, result.output
    assert "Unique words" in result.output
    assert "File name" not in result.output


def test_wordlist(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(app, ["wordlist", str(sample_file)])
    assert result.exit_code == 0, result.output
    assert result.output == (
        "1 :a\n1 :and\n1 :cat\n1 :hat\n1 :mat\n1 :on\n1 :sat\n2 :the\n1 :they\n"
    )


def test_analyse_handles_crash(runner: CliRunner, sample_file: Path) -> None:
    """Unexpected exceptions are reported and exit with code 1."""
    with patch(
        "textfathom.cli.AnalysisSession.analyse_file",
        side_effect=RuntimeError("disk on fire"),
    ):
        result = runner.invoke(app, ["analyse", str(sample_file)])

    assert result.exit_code == 1
    assert "Analysis Error" in result.output
    assert "disk on fire" in result.output
