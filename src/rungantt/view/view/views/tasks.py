# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from rungantt.color import CACHE_HIT_COLOR, CACHE_MISS_COLOR
from rungantt.model.render_settings import RenderSettings
from rungantt.model.summary import Summary
from rungantt.model.task import CacheStatus
from rungantt.service.grouping import order_tasks
from rungantt.time import format_duration
from rungantt.view.style import get_console
from rungantt.view.view.views.header import header


def cache_source(cache: CacheStatus) -> str:
    if cache["local"] and cache["remote"]:
        return "local+remote"
    if cache["local"]:
        return "local"
    if cache["remote"]:
        return "remote"
    return ""


def tasks_view(
    summary: Summary,
    settings: RenderSettings,
    console: Optional[Console] = None,
) -> None:
    if console is None:
        console = get_console(settings)

    if settings["show_header"]:
        header(summary, console)

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("task")
    tasks_table.add_column("package")
    tasks_table.add_column("duration", justify="right")
    tasks_table.add_column("cache")
    tasks_table.add_column("source")
    tasks_table.add_column("saved", justify="right")
    tasks_table.add_column("exit", justify="right")

    for task in order_tasks(summary["tasks"]):
        cache = task["cache"]
        status = cache["status"]
        if not settings["plain"]:
            status_color = CACHE_HIT_COLOR if status == "HIT" else CACHE_MISS_COLOR
            status = f"[{status_color}]{status}[/{status_color}]"

        tasks_table.add_row(
            # Task names may contain brackets, keep them out of markup parsing
            Text(task["id"]),
            Text(task["package"]),
            format_duration(task["end_time"] - task["start_time"]),
            status,
            cache_source(cache),
            format_duration(cache["time_saved"]) if cache["time_saved"] else "",
            str(task["exit_code"]) if task["exit_code"] is not None else "",
        )

    console.print(tasks_table)
