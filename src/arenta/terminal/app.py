# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from arenta.lock import acquire_lock
from arenta.terminal.repl import run_repl
from arenta.version import get_version

app = typer.Typer(
    help="arenta - A daily task management tool with minimal overhead",
    add_completion=False,
)


@app.command()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show the version and exit"),
    ] = False,
) -> None:
    """
    arenta - A daily task management tool with minimal overhead

    Starts the interactive prompt. Type h or help there for the commands.
    """
    console = Console()
    if version:
        console.print(f"arenta {get_version()}")
        raise typer.Exit()

    if not acquire_lock():
        console.print(
            "[red]lock file has been acquired by another process now[/red]"
        )
        raise typer.Exit(code=1)

    run_repl()


def run() -> None:
    app()
