# tests/test_cli.py
"""
Tests for the Legible command-line interface (CLI).

Scope
-----
1.  **Command Registration**: `--help` lists every command.
2.  **Output Modes**: rich table by default, JSON with `--json`.
3.  **Options**: `--speed` overrides the configured reading speed.
4.  **Error Handling**: Unsupported inputs and network failures exit with code 1.

We use `typer.testing.CliRunner` to invoke the app in-process.
"""

from __future__ import annotations

import json
import urllib.error
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from legible.cli import app
from legible.core.contracts.scores import SCORE_KEYS

TEXT = "An easy word to read is deal. Others I can learn are make, gem and the."


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """Create a fresh CliRunner for each test."""
    return CliRunner()


@pytest.fixture  # type: ignore[misc]
def essay(tmp_path: Path) -> Path:
    path = tmp_path / "essay.txt"
    path.write_text(TEXT, encoding="utf-8")
    return path


def test_cli_help_shows_usage(runner: CliRunner) -> None:
    """Invoking --help should print usage instructions and exit 0."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0, f"Help failed: {result.output}"
    for command in ("scores", "url", "reading-time"):
        assert command in result.output


def test_scores_renders_table(runner: CliRunner, essay: Path) -> None:
    result = runner.invoke(app, ["scores", str(essay)])

    assert result.exit_code == 0, result.output
    assert "Readability of essay.txt" in result.output
    assert "Flesch-Kincaid grade level" in result.output
    assert "0:00:04" in result.output


def test_scores_json(runner: CliRunner, essay: Path) -> None:
    result = runner.invoke(app, ["scores", str(essay), "--json"])

    assert result.exit_code == 0, result.output
    record = json.loads(result.stdout)
    assert list(record) == ["resourcehash", *SCORE_KEYS]
    assert record["wordcount"] == 16
    assert record["readingtime"] == 4


def test_scores_speed_option(runner: CliRunner, essay: Path) -> None:
    result = runner.invoke(app, ["scores", str(essay), "--json", "--speed", "60"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["readingtime"] == 16


def test_scores_empty_file_reports_no_text(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("   ", encoding="utf-8")

    result = runner.invoke(app, ["scores", str(path)])

    assert result.exit_code == 0, result.output
    assert "No readable text" in result.output


def test_scores_missing_file_is_usage_error(runner: CliRunner, tmp_path: Path) -> None:
    """Typer's `exists=True` rejects paths that do not exist."""
    result = runner.invoke(app, ["scores", str(tmp_path / "nope.txt")])
    assert result.exit_code != 0


def test_scores_unsupported_file_exits_1(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "picture.png"
    path.write_bytes(b"\x89PNG")

    result = runner.invoke(app, ["scores", str(path)])

    assert result.exit_code == 1
    assert "Unsupported file" in result.output


def test_reading_time(runner: CliRunner, essay: Path) -> None:
    result = runner.invoke(app, ["reading-time", str(essay), "--speed", "60", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "seconds": 16,
        "formatted": "0:00:16",
        "reading_speed": 60,
    }


def test_url_rejects_non_http(runner: CliRunner) -> None:
    result = runner.invoke(app, ["url", "ftp://example.org/file.txt"])

    assert result.exit_code == 1
    assert "Unsupported URL" in result.output


def test_url_network_failure_exits_1(runner: CliRunner) -> None:
    with patch(
        "legible.extraction.content.urllib.request.urlopen",
        side_effect=urllib.error.URLError("no route to host"),
    ):
        result = runner.invoke(app, ["url", "https://unreachable.invalid/"])

    assert result.exit_code == 1
    assert "Extraction Error" in result.output
