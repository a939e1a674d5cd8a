# SPDX-License-Identifier: MIT

import json
import logging
from pathlib import Path
from typing import Any, Optional

from rungantt.errors import SummaryError
from rungantt.model.summary import Execution, Summary
from rungantt.model.task import CacheStatus, Task

logger = logging.getLogger(__name__)


def find_latest_summary(runs_path: Path) -> Path:
    """
    Find the most recently written run summary in a directory.

    Raises:
        SummaryError: If the directory is missing or holds no summaries
    """
    if not runs_path.is_dir():
        raise SummaryError(f"run summary directory not found: {runs_path}")

    candidates = [path for path in runs_path.glob("*.json") if path.is_file()]
    if not candidates:
        raise SummaryError(f"no run summaries found in {runs_path}")

    latest = max(candidates, key=lambda path: (path.stat().st_mtime, path.name))
    logger.debug("using latest of %d run summaries: %s", len(candidates), latest)
    return latest


def load_summary(path: Path) -> Summary:
    """
    Read and convert a JSON run summary.

    Raises:
        SummaryError: If the file cannot be read, is not JSON, or lacks
            required fields
    """
    try:
        raw = json.loads(path.read_text())
    except FileNotFoundError:
        raise SummaryError(f"run summary not found: {path}")
    except OSError as e:
        raise SummaryError(f"could not read run summary {path}: {e}")
    except json.JSONDecodeError as e:
        raise SummaryError(f"run summary {path} is not valid JSON: {e}")

    logger.debug("loaded run summary %s", path)
    return summary_from_dict(raw, source=str(path))


def summary_from_dict(raw: Any, source: str = "run summary") -> Summary:
    if not isinstance(raw, dict):
        raise SummaryError(f"{source}: expected a JSON object at the top level")

    try:
        execution = _execution_from_dict(raw["execution"])
        tasks = [_task_from_dict(task) for task in raw["tasks"]]
    except (KeyError, TypeError, ValueError) as e:
        raise SummaryError(f"{source}: malformed summary ({_describe(e)})")

    return {"execution": execution, "tasks": tasks}


def _execution_from_dict(raw: dict[str, Any]) -> Execution:
    return {
        "command": str(raw.get("command", "")),
        "start_time": int(raw["startTime"]),
        "end_time": int(raw["endTime"]),
        "exit_code": _optional_int(raw.get("exitCode")),
    }


def _task_from_dict(raw: dict[str, Any]) -> Task:
    execution = raw["execution"]
    return {
        "id": str(raw["taskId"]),
        "package": str(raw["package"]),
        "command": str(raw.get("command", "")),
        "start_time": int(execution["startTime"]),
        "end_time": int(execution["endTime"]),
        "exit_code": _optional_int(execution.get("exitCode")),
        "cache": _cache_from_dict(raw.get("cache") or {}),
    }


def _cache_from_dict(raw: dict[str, Any]) -> CacheStatus:
    local = bool(raw.get("local", False))
    remote = bool(raw.get("remote", False))
    status = raw.get("status")
    if status not in ("HIT", "MISS"):
        status = "HIT" if local or remote else "MISS"
    return {
        "local": local,
        "remote": remote,
        "status": status,
        "time_saved": int(raw.get("timeSaved", 0) or 0),
    }


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing field {error.args[0]!r}"
    return str(error)
