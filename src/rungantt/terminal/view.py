# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from rungantt import state as app_state
from rungantt.errors import EmptyTimelineError, SummaryError
from rungantt.model.render_settings import RenderSettings
from rungantt.model.summary import Summary
from rungantt.repository.configuration import CONFIGURATION_REPO
from rungantt.repository.summary import load_summary
from rungantt.terminal.parse import resolve_render_settings, resolve_summary_path
from rungantt.view.view.views.gantt import gantt_view
from rungantt.view.view.views.tasks import tasks_view

logger = logging.getLogger(__name__)

SummaryPathArgument = Annotated[
    Optional[Path],
    typer.Argument(
        help="Run summary JSON file (defaults to the newest file in the runs path)",
        dir_okay=False,
    ),
]


def _load(summary_path: Optional[Path]) -> tuple[Summary, RenderSettings]:
    config = CONFIGURATION_REPO.get_config()
    try:
        path = resolve_summary_path(summary_path, config["runs_path"])
        summary = load_summary(path)
    except SummaryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    settings = resolve_render_settings(
        config,
        force_color=app_state.get_force_color(),
        show_header=app_state.get_show_header(),
        plain=app_state.get_plain(),
    )
    logger.debug("render settings: %s", settings)
    return summary, settings


def gantt(summary_path: SummaryPathArgument = None) -> None:
    """Show the run's tasks as a gantt chart."""
    summary, settings = _load(summary_path)
    try:
        gantt_view(summary, settings)
    except EmptyTimelineError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def tasks(summary_path: SummaryPathArgument = None) -> None:
    """List the run's tasks with duration and cache status."""
    summary, settings = _load(summary_path)
    tasks_view(summary, settings)
