# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from arenta.model.task import TIMESTAMP_FIELDS, Task
from arenta.query.date_filter import ParseError, parse_date_spec
from arenta.template.task import get_task_template
from arenta.terminal.parse import parse_time
from arenta.time import datetime_to_display_str_optional, local_datetime

console = Console()


def prompt_description(current: Optional[str] = None) -> str:
    """Ask for a description. With a current one, an empty answer keeps it."""
    while True:
        if current is None:
            description = Prompt.ask("description").strip()
        else:
            description = Prompt.ask(
                f"description [dim](enter keeps '{escape(current)}')[/dim]", default=""
            ).strip()
            if not description:
                return current
        if description:
            return description
        console.print("[red]description cannot be empty[/red]")


def prompt_datetime(hint: str, today: pendulum.Date) -> pendulum.DateTime:
    """Ask for a date (offset, mm-dd or yyyy-mm-dd) and a time (HH:mm)."""
    while True:
        date_text = Prompt.ask(
            f"{hint} date [dim](0, +1, -1, mm-dd or yyyy-mm-dd)[/dim]", default="0"
        )
        try:
            date = parse_date_spec(date_text, today)
            break
        except ParseError as e:
            console.print(f"[red]{e}[/red]")

    while True:
        time_text = Prompt.ask(f"{hint} time [dim](HH:mm)[/dim]")
        try:
            hour, minute = parse_time(time_text)
            break
        except typer.BadParameter as e:
            console.print(f"[red]{e.format_message()}[/red]")

    return local_datetime(date, hour, minute)


def prompt_minutes(hint: str) -> int:
    while True:
        minutes = IntPrompt.ask(hint)
        if minutes >= 0:
            return minutes
        console.print("[red]minutes cannot be negative[/red]")


def prompt_new_task(
    description: Optional[str],
    start_immediately: bool,
    now: pendulum.DateTime,
) -> Task:
    """
    Collect a new task. It either starts right away or gets a planned start
    and a planned duration.
    """
    task = get_task_template()
    task["description"] = (
        description.strip() if description and description.strip() else prompt_description()
    )

    if Confirm.ask("start immediately?", default=start_immediately):
        task["actual_start"] = now
        return task

    planned_start = prompt_datetime("planned start", now.date())
    planned_minutes = prompt_minutes("planned time to take (in minutes)")
    task["planned_start"] = planned_start
    task["planned_complete"] = planned_start.add(minutes=planned_minutes)
    return task


def prompt_task_changes(task: Task, today: pendulum.Date) -> dict[str, Any]:
    """
    Walk through the description and the four timestamps of a task, asking
    whether to keep, reset or replace each one.

    Returns:
        Keyword arguments for TaskRepository.modify_task
    """
    changes: dict[str, Any] = {}

    description = prompt_description(task["description"])
    if description != task["description"]:
        changes["description"] = description

    for field in TIMESTAMP_FIELDS:
        hint = field.replace("_", " ")
        current = datetime_to_display_str_optional(task[field])  # type: ignore[literal-required]
        if not Confirm.ask(f"update {hint}? [dim]({current})[/dim]", default=False):
            continue
        if Confirm.ask(f"reset {hint}?", default=False):
            changes[f"remove_{field}"] = True
        else:
            changes[field] = prompt_datetime(hint, today)

    return changes
