# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from rungantt.model.task import Task


class Execution(TypedDict):
    command: str
    start_time: int
    end_time: int
    exit_code: Optional[int]


class Summary(TypedDict):
    execution: Execution
    tasks: list[Task]
