# SPDX-License-Identifier: MIT

from rungantt.model.task import Task


def group_tasks_by_package(tasks: list[Task]) -> dict[str, list[Task]]:
    groups: dict[str, list[Task]] = {}
    for task in tasks:
        groups.setdefault(task["package"], []).append(task)
    return groups


def order_tasks(tasks: list[Task]) -> list[Task]:
    """
    Order tasks for display, clustering each package's tasks together.

    Tasks within a package are sorted by start time, and packages are sorted by
    the earliest start among their tasks. Both sorts are stable, so tasks or
    packages that tie keep their input order.
    """
    groups = [
        sorted(group, key=lambda t: t["start_time"])
        for group in group_tasks_by_package(tasks).values()
    ]
    # Each group is already sorted, so its first task holds the minimum start
    groups.sort(key=lambda group: group[0]["start_time"])

    return [task for group in groups for task in group]
