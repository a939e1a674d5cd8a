# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import platformdirs

APP_NAME = "rungantt"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Default location of run summaries, relative to the working directory
DEFAULT_RUNS_PATH = ".turbo/runs"

# Layout of the timeline grid, in character columns
TIMELINE_WIDTH = 100
MAX_LABEL_WIDTH = 40
MIN_BAR_WIDTH = 1
NUM_TIME_MARKERS = 5

DimStyle = Literal["dim", "gray"]


class Configuration(TypedDict):
    force_color: bool
    dim_style: DimStyle
    show_header: bool
    runs_path: Optional[str]


def default_configuration() -> Configuration:
    return {
        "force_color": False,
        "dim_style": "dim",
        "show_header": True,
        "runs_path": None,
    }
