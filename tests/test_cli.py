from __future__ import annotations

from typer.testing import CliRunner

from destructure.cli import app


def test_cli_demo_prints_examples() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--log-level", "WARNING", "demo"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "5 10 0" in result.stdout
    assert "[75, 88, 92]" in result.stdout
    assert "Bob is 25 years old and lives in Location Unknown" in result.stdout


def test_cli_rejects_unknown_log_level() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--log-level", "LOUD", "demo"])
    assert result.exit_code == 1
