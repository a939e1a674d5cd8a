# SPDX-License-Identifier: MIT

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rungantt.terminal.app import app
from tests.conftest import raw_summary, raw_task

runner = CliRunner()


def test_gantt(summary_file: Path) -> None:
    result = runner.invoke(app, ["--plain", "--no-header", "gantt", str(summary_file)])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("a#build  │")
    assert lines[1].startswith("b#build  │" + " " * 19 + "│")
    assert lines[3].rstrip().endswith("1.00s")
    assert "\x1b[" not in result.output


def test_gantt_alias_and_header(summary_file: Path) -> None:
    result = runner.invoke(app, ["--plain", "g", str(summary_file)])

    assert result.exit_code == 0
    assert "rungantt" in result.output
    assert "turbo run build" in result.output
    assert "cached 1/2" in result.output


def test_gantt_uses_configured_runs_path(
    summary_file: Path, isolated_config: Path
) -> None:
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(f"runs_path: {summary_file.parent}\n")

    result = runner.invoke(app, ["--plain", "--no-header", "gantt"])

    assert result.exit_code == 0
    assert "a#build" in result.output


def test_gantt_force_color(
    summary_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TERM", "xterm-256color")
    result = runner.invoke(
        app, ["--force-color", "--no-header", "gantt", str(summary_file)]
    )

    assert result.exit_code == 0
    assert "\x1b[" in result.output


def test_gantt_missing_summary(tmp_path: Path) -> None:
    result = runner.invoke(app, ["gantt", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Error: run summary not found" in result.output


def test_gantt_empty_run(tmp_path: Path) -> None:
    path = tmp_path / "run.json"
    path.write_text(json.dumps(raw_summary([])))

    result = runner.invoke(app, ["--plain", "--no-header", "gantt", str(path)])

    assert result.exit_code == 1
    assert "empty task list" in result.output


def test_tasks(summary_file: Path) -> None:
    result = runner.invoke(app, ["--plain", "--no-header", "tasks", str(summary_file)])

    assert result.exit_code == 0
    assert "HIT" in result.output
    assert "MISS" in result.output
    assert "local" in result.output
    assert "1.20s" in result.output


def test_config_set_and_view(isolated_config: Path) -> None:
    result = runner.invoke(app, ["config", "set", "--dim-style", "gray"])

    assert result.exit_code == 0
    assert "gray" in result.output


def test_config_set_rejects_unknown_dim_style() -> None:
    result = runner.invoke(app, ["config", "set", "--dim-style", "sparkly"])

    assert result.exit_code != 0


def test_gantt_empty_run_prints_nothing(tmp_path: Path) -> None:
    path = tmp_path / "run.json"
    path.write_text(json.dumps(raw_summary([])))

    result = runner.invoke(app, ["--plain", "gantt", str(path)])

    assert result.exit_code == 1
    assert "rungantt" not in result.output
    assert "turbo run build" not in result.output
    assert "Error: cannot build a timeline from an empty task list" in result.output


def test_tasks_keeps_brackets_in_names(tmp_path: Path) -> None:
    path = tmp_path / "run.json"
    path.write_text(
        json.dumps(raw_summary([raw_task("pkg#[build]", 0, 100), raw_task("x#[/y]", 0, 50)]))
    )

    result = runner.invoke(app, ["--plain", "--no-header", "tasks", str(path)])

    assert result.exit_code == 0
    assert "pkg#[build]" in result.output
    assert "x#[/y]" in result.output
