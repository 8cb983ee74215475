from __future__ import annotations

from typer.testing import CliRunner

from randomdata.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("int", "string", "sentence", "paragraphs", "version", "ip", "coordinate"):
        assert command in result.stdout
    assert "--config" in result.stdout
    assert "--seed" in result.stdout


def test_string_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["string", "--help"])
    assert "--min-length" in result.stdout
    assert "--alphabet" in result.stdout
