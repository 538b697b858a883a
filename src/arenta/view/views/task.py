# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from arenta.color import NOW_COLOR, STATUS_COLOR, TIMELINE_COLOR
from arenta.model.date_filter import DateFilter
from arenta.model.display_flags import DisplayFlags
from arenta.model.task import Task
from arenta.model.timeline_spec import TimelineSpec
from arenta.query.select import Selection
from arenta.service.status import derive_status
from arenta.time import datetime_to_display_str_optional
from arenta.view.format import DETAIL_INDENT, format_tasks, lines_per_task
from arenta.view.state import get_use_color
from arenta.view.timeline import now_position
from arenta.view.views.header import header


def tasks_view(
    report_name: str,
    selection: Selection,
    flags: DisplayFlags,
    now: pendulum.DateTime,
    date_filter: DateFilter,
    timeline_spec: TimelineSpec,
    sub_header: str,
) -> None:
    """
    Print the formatted lines of a selection, colored by task status.

    Args:
        report_name: The name of the listing
        selection: The tasks to show
        flags: Display flags
        now: Instant the statuses and timelines are computed for
        date_filter: The filter the selection was made with
        timeline_spec: Timeline rendering parameters
        sub_header: Description of the filter for the header
    """
    header(report_name, sub_header)

    console = Console()
    use_color = get_use_color()

    selected = list(selection.enumerate())
    lines = format_tasks(selected, flags, now, date_filter, timeline_spec)

    if flags["timeline"]:
        scale = Text(lines.pop(0))
        now_pos = now_position(timeline_spec, now)
        if use_color and now_pos is not None:
            column = len(DETAIL_INDENT) + 1 + now_pos
            scale.stylize(NOW_COLOR, column, column + 1)
        console.print(scale, soft_wrap=True)

    if not selected:
        console.print("[dim]No tasks to display[/dim]")
        return

    group_size = lines_per_task(flags)
    for position, (_, task) in enumerate(selected):
        style = STATUS_COLOR[derive_status(task, now)] if use_color else ""
        group = lines[position * group_size : (position + 1) * group_size]
        for line_number, line in enumerate(group):
            line_style = style
            if use_color and flags["timeline"] and line_number == group_size - 1:
                line_style = TIMELINE_COLOR
            console.print(Text(line, style=line_style), soft_wrap=True)


def single_task_view(index: int, task: Task, now: pendulum.DateTime) -> None:
    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    status = derive_status(task, now)
    status_value = (
        f"[{STATUS_COLOR[status]}]{status}[/{STATUS_COLOR[status]}]"
        if get_use_color()
        else str(status)
    )

    task_table.add_row("index", str(index))
    task_table.add_row("description", Text(task["description"]))
    task_table.add_row("status", status_value)
    task_table.add_row(
        "planned_start", datetime_to_display_str_optional(task["planned_start"])
    )
    task_table.add_row(
        "planned_complete", datetime_to_display_str_optional(task["planned_complete"])
    )
    task_table.add_row(
        "actual_start", datetime_to_display_str_optional(task["actual_start"])
    )
    task_table.add_row(
        "actual_complete", datetime_to_display_str_optional(task["actual_complete"])
    )
    task_table.add_row("created", datetime_to_display_str_optional(task["created"]))

    console = Console()
    console.print(task_table)
