"""Command-line entry point, both frontends."""

from __future__ import annotations

from typer.testing import CliRunner

from toadsfrogs.main import app

runner = CliRunner()


def test_vanilla_solves_size_1() -> None:
    result = runner.invoke(app, ["-s", "1"])
    assert result.exit_code == 0, result.output
    assert "The shortest solution has been found." in result.output
    assert "Solution:" in result.output
    assert "jump left" in result.output
    assert "algorithm took" in result.output


def test_vanilla_both_modes() -> None:
    result = runner.invoke(app, ["-s", "2", "-m", "both", "--no-solution"])
    assert result.exit_code == 0, result.output
    assert "B&B" in result.output
    assert "A*" in result.output
    assert "Solution:" not in result.output


def test_vanilla_trace() -> None:
    result = runner.invoke(app, ["-s", "1", "--trace"])
    assert result.exit_code == 0, result.output
    assert "-------- step: 1, distance: 0" in result.output
    assert "Move: shift left" in result.output


def test_limit_reached_message() -> None:
    result = runner.invoke(app, ["-s", "3", "--limit", "1"])
    assert result.exit_code == 0, result.output
    assert "Reached limit of 1 iterations" in result.output


def test_rich_frontend() -> None:
    result = runner.invoke(app, ["-s", "2", "-f", "rich", "-v"])
    assert result.exit_code == 0, result.output
    assert "Shortest solution found" in result.output
    assert "8 moves" in result.output


def test_prompts_for_size() -> None:
    result = runner.invoke(app, [], input="1\n")
    assert result.exit_code == 0, result.output
    assert "Enter problem size" in result.output


def test_invalid_size_exit_code() -> None:
    result = runner.invoke(app, ["-s", "16"])
    assert result.exit_code == 2
