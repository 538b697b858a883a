# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from arenta import configuration
from arenta.logger import configure_logging
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.terminal.custom_typer import AliasedTyperGroup
from arenta.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    invoke_without_command=True,
    help="Show or change settings (config alone shows them)",
)


@app.callback()
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        view()


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled")
    table.add_row("use_color", "✓ Enabled" if config["use_color"] else "✗ Disabled")
    table.add_row("log_level", config["log_level"])
    table.add_row("timeline_width", str(config["timeline_width"]))
    table.add_row(
        "timeline_hours",
        f"{config['timeline_start_hour']}-{config['timeline_end_hour']}",
    )
    table.add_row("planned_glyph", repr(config["planned_glyph"]))
    table.add_row("actual_glyph", repr(config["actual_glyph"]))
    table.add_row("empty_glyph", repr(config["empty_glyph"]))
    table.add_row(
        "start_immediately",
        "✓ Enabled" if config["start_immediately"] else "✗ Disabled",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set(
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--no-show-header")
    ] = None,
    use_color: Annotated[Optional[bool], typer.Option("--use-color/--no-use-color")] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
    ] = None,
    timeline_width: Annotated[Optional[int], typer.Option("--timeline-width")] = None,
    timeline_start_hour: Annotated[
        Optional[int], typer.Option("--timeline-start-hour")
    ] = None,
    timeline_end_hour: Annotated[
        Optional[int], typer.Option("--timeline-end-hour")
    ] = None,
    start_immediately: Annotated[
        Optional[bool], typer.Option("--start-immediately/--no-start-immediately")
    ] = None,
) -> None:
    """Change configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        use_color=use_color,
        log_level=log_level,
        timeline_width=timeline_width,
        timeline_start_hour=timeline_start_hour,
        timeline_end_hour=timeline_end_hour,
        start_immediately=start_immediately,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    view_state.set_use_color(config["use_color"])
    if log_level is not None:
        configure_logging(config["log_level"])

    view()
