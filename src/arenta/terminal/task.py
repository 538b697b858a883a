# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from arenta.model.display_flags import DisplayFlags
from arenta.query.select import select
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.repository.task import TASK_REPO
from arenta.terminal import configuration
from arenta.terminal.custom_typer import OrderedAliasedTyperGroup
from arenta.terminal.parse import parse_date_filter
from arenta.terminal.prompt import prompt_new_task, prompt_task_changes
from arenta.time import now_local
from arenta.view.format import format_filter
from arenta.view.timeline import timeline_spec_from_config
from arenta.view.views import task as task_report

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="arenta commands (q / quit to leave, h / help for this message)",
    add_completion=False,
)
app.add_typer(configuration.app, name="config")

console = Console()


@app.command("new, n")
def new(
    description: Annotated[
        Optional[list[str]],
        typer.Argument(help="prompted for when left out"),
    ] = None,
) -> None:
    """Create a new task."""
    now = now_local()
    config = CONFIGURATION_REPO.get_config()

    task = prompt_new_task(
        " ".join(description) if description else None,
        config["start_immediately"],
        now,
    )
    index = TASK_REPO.save_new_task(task)

    task_report.single_task_view(index, TASK_REPO.get_task(index), now)


@app.command("start, s")
def start(index: int) -> None:
    """Start a task now."""
    now = now_local()
    task = TASK_REPO.start_task(index, now)
    task_report.single_task_view(index, task, now)


@app.command("complete, c")
def complete(index: int) -> None:
    """Complete a task now."""
    now = now_local()
    task = TASK_REPO.complete_task(index, now)
    task_report.single_task_view(index, task, now)


@app.command("edit, e")
def edit(index: int) -> None:
    """Edit the description and timestamps of a task."""
    now = now_local()
    changes = prompt_task_changes(TASK_REPO.get_task(index), now.date())
    task = TASK_REPO.modify_task(index, **changes)
    task_report.single_task_view(index, task, now)


@app.command("delete")
def delete(index: int) -> None:
    """Delete a task."""
    task = TASK_REPO.delete_task(index)
    console.print(f"task {index} removed: {task['description']}", markup=False)


@app.command("sort")
def sort() -> None:
    """Sort all tasks by start, backlog last."""
    TASK_REPO.sort_tasks()
    console.print("tasks sorted")


@app.command("list, ls", context_settings={"ignore_unknown_options": True})
def list_tasks(
    date_filter_text: Annotated[
        Optional[str],
        typer.Argument(
            metavar="FILTER",
            help="[<|<=|>|>=]DATE where DATE is a day offset like 0, +1, -1, mm-dd or yyyy-mm-dd (default: 0)",
            show_default=False,
        ),
    ] = None,
    include_backlog: Annotated[
        bool, typer.Option("--backlog", "-b", help="include tasks without any date")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="show all timestamps")
    ] = False,
    timeline: Annotated[
        bool, typer.Option("--timeline", "-t", help="show a timeline for a single day")
    ] = False,
    days: Annotated[
        Optional[int],
        typer.Option(
            "--days",
            "-d",
            min=0,
            help="list tasks from N days ago on, future tasks included",
        ),
    ] = None,
) -> None:
    """List tasks of a day or a range of days."""
    if days is not None and date_filter_text is not None:
        raise typer.BadParameter("use either FILTER or --days", param_hint="--days")

    if days is not None:
        text = f">=-{days}"
    elif date_filter_text is not None:
        text = date_filter_text
    else:
        text = "0"

    now = now_local()
    config = CONFIGURATION_REPO.get_config()
    date_filter = parse_date_filter(text, now.date(), allow_range=not timeline)
    flags: DisplayFlags = {
        "include_backlog": include_backlog,
        "verbose": verbose,
        "timeline": timeline,
    }

    task_report.tasks_view(
        "tasks",
        select(TASK_REPO.tasks, date_filter, flags, now),
        flags,
        now,
        date_filter,
        timeline_spec_from_config(config, date_filter["date"]),
        format_filter(date_filter),
    )
