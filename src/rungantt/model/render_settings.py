# SPDX-License-Identifier: MIT

from typing import TypedDict

from rungantt.configuration import DimStyle


class RenderSettings(TypedDict):
    force_color: bool
    plain: bool
    dim_style: DimStyle
    show_header: bool
