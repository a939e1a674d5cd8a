# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from rungantt import state as app_state
from rungantt.terminal import configuration
from rungantt.terminal.custom_typer import AliasedTyperGroup
from rungantt.terminal.view import gantt, tasks

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="rungantt - Build run timelines in the terminal",
    no_args_is_help=True,
)
app.command(name="gantt, g")(gantt)
app.command(name="tasks, t")(tasks)
app.add_typer(configuration.app, name="config, c")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress the run header",
        ),
    ] = False,
    force_color: Annotated[
        Optional[bool],
        typer.Option(
            "--force-color/--no-force-color",
            help="Emit ANSI styling even when stdout is not a terminal",
        ),
    ] = None,
    plain: Annotated[
        bool,
        typer.Option("--plain", "-p", help="Render without any styling"),
    ] = False,
) -> None:
    """
    rungantt - Build run timelines in the terminal

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    app_state.set_show_header(False if no_header else None)
    app_state.set_force_color(force_color)
    app_state.set_plain(plain)


def run() -> None:
    app()
