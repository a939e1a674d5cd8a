# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from rich.console import Console
from rich.text import Text

from rungantt.configuration import MIN_BAR_WIDTH, NUM_TIME_MARKERS, TIMELINE_WIDTH
from rungantt.model.render_settings import RenderSettings
from rungantt.model.summary import Summary
from rungantt.model.task import Task
from rungantt.model.timeline import Marker, Timeline
from rungantt.service.color import PackageColors
from rungantt.service.grouping import order_tasks
from rungantt.service.timeline import (
    calculate_timeline,
    get_marker_positions,
    time_to_chars,
)
from rungantt.time import format_duration
from rungantt.view.style import (
    AXIS,
    BAR,
    DURATION,
    MARKER,
    MARKER_IN_BAR,
    MUTED,
    Styler,
    get_console,
    get_styler,
)
from rungantt.view.view.views.header import header

logger = logging.getLogger(__name__)

BAR_CHAR = "█"
MARKER_CHAR = "│"


def gantt_view(
    summary: Summary,
    settings: RenderSettings,
    console: Optional[Console] = None,
) -> None:
    """
    Print the run as a gantt chart: one row per task, then the time axis.

    Args:
        summary: The run to display
        settings: Styling and header options resolved at startup
        console: Console to print to (defaults to one built from settings)
    """
    # Build every line first so an empty run fails before anything is printed
    lines = build_gantt_lines(summary["tasks"], get_styler(settings))

    if console is None:
        console = get_console(settings)

    if settings["show_header"]:
        header(summary, console)

    for line in lines:
        console.print(line, soft_wrap=True)
    console.print()


def build_gantt_lines(
    tasks: list[Task],
    styler: Styler,
    timeline_width: int = TIMELINE_WIDTH,
    min_bar_width: int = MIN_BAR_WIDTH,
    num_markers: int = NUM_TIME_MARKERS,
) -> list[Text]:
    """
    Render task rows followed by the two axis lines.

    Everything derived here (scale, gridlines, package colors) belongs to this
    call alone.
    """
    timeline = calculate_timeline(tasks, timeline_width)
    markers = get_marker_positions(timeline, timeline_width, num_markers)
    marker_columns = frozenset(marker["column"] for marker in markers)
    # Colors follow display order, so the top package gets the first palette entry
    colors = PackageColors()

    logger.debug(
        "timeline spans %dms over %d columns (%.4f chars/ms), %d markers",
        timeline["total_duration"],
        timeline_width,
        timeline["ms_to_chars"],
        len(markers),
    )

    lines: list[Text] = []
    for task in order_tasks(tasks):
        lines.append(
            build_task_row(
                task,
                timeline,
                marker_columns,
                styler,
                colors.color_for(task["package"]),
                timeline_width,
                min_bar_width,
            )
        )
    lines.extend(build_axis_rows(timeline, markers, styler, timeline_width))
    return lines


def get_bar_bounds(
    task: Task, timeline: Timeline, min_bar_width: int = MIN_BAR_WIDTH
) -> tuple[int, int]:
    """Return (start column, width) of a task's bar.

    Bars never shrink below min_bar_width, so very short tasks stay visible
    at the cost of looking longer than they were.
    """
    bar_start = time_to_chars(timeline, task["start_time"] - timeline["start_time"])
    bar_width = max(
        min_bar_width, time_to_chars(timeline, task["end_time"] - task["start_time"])
    )
    return bar_start, bar_width


def build_task_row(
    task: Task,
    timeline: Timeline,
    marker_columns: frozenset[int],
    styler: Styler,
    color: str,
    timeline_width: int = TIMELINE_WIDTH,
    min_bar_width: int = MIN_BAR_WIDTH,
) -> Text:
    """
    Build a row for a single task: name gutter, bar, gridlines and duration.

    Columns 0 through timeline_width are scanned left to right. Once the scan
    passes the end of the bar the duration label becomes pending, and it is
    written at the first column where its whole span is clear of gridlines.
    A label that finds no such column is appended after the last column.

    Args:
        task: The task to draw
        timeline: Scale shared by every row of the chart
        marker_columns: Gridline columns shared by every row and the axis
        styler: Styling capability
        color: The task's package color
        timeline_width: Index of the final column
        min_bar_width: Narrowest bar drawn for any task

    Returns:
        Rich Text object with the task row
    """
    row = Text()
    # Names longer than the gutter are kept whole and widen the row
    row.append_text(styler.apply(MUTED, task["id"].ljust(timeline["label_width"])))

    bar_start, bar_width = get_bar_bounds(task, timeline, min_bar_width)
    bar_end = bar_start + bar_width
    label = " " + format_duration(task["end_time"] - task["start_time"])

    # None until the bar has ended, then holds the label until it is written
    pending_label: Optional[str] = None

    column = 0
    while column <= timeline_width:
        if column == bar_end:
            pending_label = label

        if bar_start <= column < bar_end:
            if column in marker_columns:
                row.append_text(styler.apply(MARKER_IN_BAR, MARKER_CHAR, color))
            else:
                row.append_text(styler.apply(BAR, BAR_CHAR, color))
            column += 1
            continue

        if pending_label is not None and _label_fits(
            column, len(pending_label), marker_columns, timeline_width
        ):
            row.append_text(styler.apply(DURATION, pending_label))
            column += len(pending_label)
            pending_label = None
            continue

        if column in marker_columns:
            row.append_text(styler.apply(MARKER, MARKER_CHAR))
        else:
            row.append(" ")
        column += 1

    if bar_end > timeline_width:
        # The bar ran to the right edge, the label never became pending
        pending_label = label
    if pending_label is not None:
        row.append_text(styler.apply(DURATION, pending_label))

    return row


def _label_fits(
    column: int, length: int, marker_columns: frozenset[int], timeline_width: int
) -> bool:
    last = column + length - 1
    if last > timeline_width:
        return False
    return not any(c in marker_columns for c in range(column, last + 1))


def build_axis_rows(
    timeline: Timeline,
    markers: list[Marker],
    styler: Styler,
    timeline_width: int = TIMELINE_WIDTH,
) -> tuple[Text, Text]:
    """
    Build the gridline row and the elapsed time row beneath the chart.

    Each elapsed time label starts under its gridline. The final label is
    always written; any other label is written only when it ends at least one
    column before the next gridline.

    Returns:
        Tuple of (gridline row, label row)
    """
    gutter = " " * timeline["label_width"]
    marker_columns = {marker["column"] for marker in markers}

    marker_row = Text(gutter)
    for column in range(timeline_width + 1):
        if column in marker_columns:
            marker_row.append_text(styler.apply(MARKER, MARKER_CHAR))
        else:
            marker_row.append(" ")

    label_row = Text(gutter)
    cursor = 0
    for i, marker in enumerate(markers):
        text = format_duration(marker["elapsed"])
        is_last = i == len(markers) - 1
        if not is_last and markers[i + 1]["column"] - marker["column"] < len(text) + 1:
            continue
        label_row.append(" " * (marker["column"] - cursor))
        label_row.append_text(styler.apply(AXIS, text))
        cursor = marker["column"] + len(text)

    return marker_row, label_row
