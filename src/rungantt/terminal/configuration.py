# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from rungantt import configuration
from rungantt.repository.configuration import CONFIGURATION_REPO
from rungantt.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "force_color",
        "✓ Enabled" if config["force_color"] else "✗ Disabled",
    )
    table.add_row("dim_style", config["dim_style"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "runs_path", config["runs_path"] or f"{configuration.DEFAULT_RUNS_PATH} (default)"
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    force_color: Annotated[
        Optional[bool],
        typer.Option(
            "--force-color/--no-force-color",
            help="Always emit ANSI styling, even when output is not a terminal",
        ),
    ] = None,
    dim_style: Annotated[
        Optional[str],
        typer.Option(
            "--dim-style",
            help="Style used for muted text: dim or gray",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the run header above the chart",
        ),
    ] = None,
    runs_path: Annotated[
        Optional[str],
        typer.Option(
            "--runs-path",
            help="Directory searched for run summaries",
        ),
    ] = None,
    remove_runs_path: Annotated[
        bool,
        typer.Option(
            "--remove-runs-path",
            help=f"Reset runs path to {configuration.DEFAULT_RUNS_PATH}",
        ),
    ] = False,
) -> None:
    """Update configuration settings."""
    if dim_style is not None and dim_style not in ("dim", "gray"):
        raise typer.BadParameter(
            f"dim style must be 'dim' or 'gray', got {dim_style}",
            param_hint="--dim-style",
        )

    CONFIGURATION_REPO.update_config(
        force_color=force_color,
        dim_style=dim_style,  # type: ignore[arg-type]
        show_header=show_header,
        runs_path=runs_path,
        remove_runs_path=remove_runs_path,
    )
    view()
