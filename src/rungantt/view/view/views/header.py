# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from rungantt.color import COMMAND_COLOR, HEADER_COLOR
from rungantt.model.summary import Summary
from rungantt.time import epoch_ms_to_display_local_datetime_str, format_duration


def header(summary: Summary, console: Console) -> None:
    """Print the run header: command, start time, wall time and cache hits.

    Args:
        summary: The run being displayed
        console: Console to print to
    """
    execution = summary["execution"]
    tasks = summary["tasks"]
    cached = sum(1 for task in tasks if task["cache"]["status"] == "HIT")
    wall_time = format_duration(max(0, execution["end_time"] - execution["start_time"]))
    started = epoch_ms_to_display_local_datetime_str(execution["start_time"])

    console.print(Padding(f"[{HEADER_COLOR}]rungantt[/{HEADER_COLOR}]", (1, 0, 0, 1)))
    # Commands may contain brackets, keep them out of markup parsing
    console.print(Padding(Text(execution["command"], style=COMMAND_COLOR), (0, 1)))
    console.print(
        Padding(
            f"started {started} · took {wall_time} · "
            f"{len(tasks)} tasks · cached {cached}/{len(tasks)}",
            (0, 1, 1, 1),
        )
    )
