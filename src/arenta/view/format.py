# SPDX-License-Identifier: MIT

import logging
from typing import Iterable

import pendulum

from arenta.model.date_filter import DateFilter, Operator
from arenta.model.display_flags import DisplayFlags
from arenta.model.task import Task
from arenta.model.timeline_spec import TimelineSpec
from arenta.query.select import effective_date
from arenta.service.status import derive_status
from arenta.time import date_to_display_str, datetime_to_display_str_optional
from arenta.view.timeline import has_inverted_interval, render, render_scale

logger = logging.getLogger(__name__)

DETAIL_INDENT = " " * 5


def format_tasks(
    selected: Iterable[tuple[int, Task]],
    flags: DisplayFlags,
    now: pendulum.DateTime,
    date_filter: DateFilter,
    timeline_spec: TimelineSpec,
) -> list[str]:
    """
    Turn selected tasks into display lines.

    Every task gets a summary line with its index, status and description.
    In verbose mode a detail line with the four timestamps follows. In
    timeline mode an hour scale, marking the cell of `now`, leads the listing and every task gets a
    strip for the day it is filtered by.

    Args:
        selected: (index in the collection, task) pairs, e.g. Selection.enumerate()
        flags: Display flags
        now: Instant used for status and for ongoing timelines
        date_filter: The filter the tasks were selected with
        timeline_spec: Rendering parameters; its day is replaced per task

    Returns:
        The lines, in the order of `selected`
    """
    lines: list[str] = []
    if flags["timeline"]:
        lines.append(format_scale(timeline_spec, now))

    for index, task in selected:
        lines.extend(
            format_task_lines(index, task, flags, now, date_filter, timeline_spec)
        )
    return lines


def format_task_lines(
    index: int,
    task: Task,
    flags: DisplayFlags,
    now: pendulum.DateTime,
    date_filter: DateFilter,
    timeline_spec: TimelineSpec,
) -> list[str]:
    """The lines format_tasks() produces for a single task, without the scale."""
    lines = [format_summary(index, task, now)]
    if flags["verbose"]:
        lines.append(format_details(task))
    if flags["timeline"]:
        lines.append(format_timeline(task, now, date_filter, timeline_spec))
    return lines


def format_filter(date_filter: DateFilter) -> str:
    date = date_to_display_str(date_filter["date"])
    if date_filter["operator"] == Operator.EQ:
        return date
    return f"{date_filter['operator']} {date}"


def format_scale(timeline_spec: TimelineSpec, now: pendulum.DateTime) -> str:
    return f"{DETAIL_INDENT} {render_scale(timeline_spec, now)}"


def lines_per_task(flags: DisplayFlags) -> int:
    """How many lines format_tasks() gives each task, not counting the scale."""
    return 1 + int(flags["verbose"]) + int(flags["timeline"])


def format_summary(index: int, task: Task, now: pendulum.DateTime) -> str:
    status = derive_status(task, now)
    return f"{index:>3}  {status:<8}  {task['description']}"


def format_details(task: Task) -> str:
    return DETAIL_INDENT + "  ".join(
        [
            f"planned_start: {datetime_to_display_str_optional(task['planned_start'])}",
            f"planned_complete: {datetime_to_display_str_optional(task['planned_complete'])}",
            f"actual_start: {datetime_to_display_str_optional(task['actual_start'])}",
            f"actual_complete: {datetime_to_display_str_optional(task['actual_complete'])}",
        ]
    )


def format_timeline(
    task: Task,
    now: pendulum.DateTime,
    date_filter: DateFilter,
    timeline_spec: TimelineSpec,
) -> str:
    if has_inverted_interval(task):
        logger.warning(
            "task '%s' completes before it starts, its timeline shows no coverage for that interval",
            task["description"],
        )

    day = effective_date(task) or date_filter["date"]
    strip = render(task, {**timeline_spec, "day": day}, now)
    return f"{DETAIL_INDENT}|{strip}|"
