# SPDX-License-Identifier: MIT

import math

from rungantt.configuration import MAX_LABEL_WIDTH, NUM_TIME_MARKERS
from rungantt.errors import EmptyTimelineError
from rungantt.model.task import Task
from rungantt.model.timeline import Marker, Timeline


def calculate_timeline(
    tasks: list[Task],
    timeline_width: int,
    max_label_width: int = MAX_LABEL_WIDTH,
) -> Timeline:
    """
    Derive the time-to-column mapping and gutter width for a set of tasks.

    Args:
        tasks: The tasks of one run, in any order
        timeline_width: Number of character columns the full run spans
        max_label_width: Upper bound for the task name gutter

    Returns:
        Timeline covering the earliest start to the latest end

    Raises:
        EmptyTimelineError: If tasks is empty
    """
    if len(tasks) == 0:
        raise EmptyTimelineError("cannot build a timeline from an empty task list")

    start_time = min(task["start_time"] for task in tasks)
    end_time = max(task["end_time"] for task in tasks)
    total_duration = end_time - start_time

    # A zero length run projects every instant onto column 0,
    # so each bar falls back to the minimum width
    ms_to_chars = timeline_width / total_duration if total_duration > 0 else 0.0

    longest_id = max(len(task["id"]) for task in tasks)
    label_width = min(longest_id + 2, max_label_width)

    return {
        "start_time": start_time,
        "end_time": end_time,
        "total_duration": total_duration,
        "ms_to_chars": ms_to_chars,
        "label_width": label_width,
    }


def time_to_chars(timeline: Timeline, duration_ms: float) -> int:
    return math.floor(duration_ms * timeline["ms_to_chars"])


def get_marker_positions(
    timeline: Timeline,
    timeline_width: int,
    num_markers: int = NUM_TIME_MARKERS,
) -> list[Marker]:
    """
    Compute the gridline columns shared by every row and the axis.

    Gridlines sit at evenly spaced fractions 0/N .. N/N of the run, plus one
    at the final column regardless of rounding. When two fractions floor onto
    the same column the later elapsed time wins.

    Returns:
        Markers sorted by column, one per distinct column
    """
    total_duration = timeline["total_duration"]
    by_column: dict[int, int] = {}
    for i in range(num_markers + 1):
        elapsed = total_duration * i / num_markers
        by_column[time_to_chars(timeline, elapsed)] = math.floor(elapsed)
    by_column[timeline_width] = total_duration

    return [
        {"column": column, "elapsed": by_column[column]} for column in sorted(by_column)
    ]
