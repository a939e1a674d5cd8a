# SPDX-License-Identifier: MIT

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from rungantt import configuration
from rungantt.model.render_settings import RenderSettings
from rungantt.repository.summary import find_latest_summary


def resolve_summary_path(
    summary_path: Optional[Path], runs_path: Optional[str]
) -> Path:
    """Use the given summary file, or the newest one in the runs directory."""
    if summary_path is not None:
        return summary_path
    return find_latest_summary(Path(runs_path or configuration.DEFAULT_RUNS_PATH))


def env_flag(environ: Mapping[str, str], name: str) -> bool:
    value = environ.get(name)
    return value is not None and value != "" and value != "0"


def resolve_render_settings(
    config: configuration.Configuration,
    force_color: Optional[bool] = None,
    show_header: Optional[bool] = None,
    plain: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> RenderSettings:
    """
    Combine the config file, command line overrides and environment into the
    settings handed to the views.

    Command line options win over the environment, which wins over the config
    file. NO_COLOR selects plain output; FORCE_COLOR keeps ANSI styling when
    stdout is not a terminal, as on CI runners that render color.
    """
    if environ is None:
        environ = os.environ

    if force_color is None:
        force_color = env_flag(environ, "FORCE_COLOR") or config["force_color"]
    if show_header is None:
        show_header = config["show_header"]
    plain = plain or (bool(environ.get("NO_COLOR")) and not force_color)

    return {
        "force_color": force_color,
        "plain": plain,
        "dim_style": config["dim_style"],
        "show_header": show_header,
    }
