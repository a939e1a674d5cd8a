# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

CacheStatusType = Literal["HIT", "MISS"]


class CacheStatus(TypedDict):
    local: bool
    remote: bool
    status: CacheStatusType
    time_saved: int


class Task(TypedDict):
    id: str
    package: str
    command: str
    start_time: int
    end_time: int
    exit_code: Optional[int]
    cache: CacheStatus
