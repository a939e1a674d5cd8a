# SPDX-License-Identifier: MIT

from typing import TypedDict


class Timeline(TypedDict):
    start_time: int
    end_time: int
    total_duration: int
    ms_to_chars: float
    label_width: int


class Marker(TypedDict):
    column: int
    elapsed: int
