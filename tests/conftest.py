# SPDX-License-Identifier: MIT

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from rungantt import configuration
from rungantt.model.task import Task
from rungantt.repository.configuration import CONFIGURATION_REPO

TaskFactory = Callable[..., Task]


def build_task(
    id: str,
    start_time: int,
    end_time: int,
    package: Optional[str] = None,
    cache_status: str = "MISS",
) -> Task:
    return {
        "id": id,
        "package": package if package is not None else id.split("#")[0],
        "command": "echo",
        "start_time": start_time,
        "end_time": end_time,
        "exit_code": 0,
        "cache": {
            "local": cache_status == "HIT",
            "remote": False,
            "status": cache_status,  # type: ignore[typeddict-item]
            "time_saved": 0,
        },
    }


@pytest.fixture
def make_task() -> TaskFactory:
    return build_task


def raw_summary(tasks: list[dict[str, Any]]) -> dict[str, Any]:
    starts = [task["execution"]["startTime"] for task in tasks] or [0]
    ends = [task["execution"]["endTime"] for task in tasks] or [0]
    return {
        "id": "2abc",
        "version": "1",
        "execution": {
            "command": "turbo run build",
            "startTime": min(starts),
            "endTime": max(ends),
            "exitCode": 0,
        },
        "tasks": tasks,
    }


def raw_task(
    task_id: str,
    start_time: int,
    end_time: int,
    status: str = "MISS",
    time_saved: int = 0,
) -> dict[str, Any]:
    return {
        "taskId": task_id,
        "package": task_id.split("#")[0],
        "task": task_id.split("#")[1],
        "command": "tsc",
        "cache": {
            "local": status == "HIT",
            "remote": False,
            "status": status,
            "timeSaved": time_saved,
        },
        "execution": {"startTime": start_time, "endTime": end_time, "exitCode": 0},
    }


@pytest.fixture
def summary_file(tmp_path: Path) -> Path:
    path = tmp_path / "run.json"
    path.write_text(
        json.dumps(
            raw_summary(
                [
                    raw_task("a#build", 0, 500, status="HIT", time_saved=1200),
                    raw_task("b#build", 200, 1000),
                ]
            )
        )
    )
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration repository at a throwaway config file."""
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path.parent)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return config_path
