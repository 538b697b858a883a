# SPDX-License-Identifier: MIT

import logging
import shlex
import sys

import typer
from rich.console import Console

from arenta.error import ArentaError
from arenta.repository.task import TASK_REPO
from arenta.terminal.task import app as command_app

logger = logging.getLogger(__name__)

# Newer typer releases carry their own click, so the exceptions its commands
# raise live next to typer.BadParameter rather than in the click package
_click_exceptions = sys.modules[typer.BadParameter.__module__]

QUIT_COMMANDS = ("q", "quit")
HELP_COMMANDS = ("h", "help")
PROMPT = "arenta> "

console = Console()


def dispatch(line: str) -> bool:
    """
    Run one REPL line.

    Errors are printed and the line is dropped; the session goes on.

    Returns:
        False when the line asks to leave the REPL
    """
    try:
        args = shlex.split(line)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        return True

    if not args:
        return True
    if args[0] in QUIT_COMMANDS:
        return False
    if args[0] in HELP_COMMANDS:
        args = ["--help"]

    command = typer.main.get_command(command_app)
    try:
        command.main(args=args, prog_name="arenta", standalone_mode=False)
    except (_click_exceptions.Abort, EOFError, KeyboardInterrupt):
        console.print("[yellow]aborted[/yellow]")
    except _click_exceptions.ClickException as e:
        e.show()
    except ArentaError as e:
        console.print(f"[red]Error:[/red] {e}", highlight=False)
    finally:
        if TASK_REPO.flush():
            logger.debug("flushed tasks after '%s'", line)
    return True


def run_repl() -> None:
    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not dispatch(line):
            break
