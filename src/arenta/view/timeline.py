# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from arenta.configuration import Configuration
from arenta.model.task import Task
from arenta.model.timeline_spec import TimelineSpec
from arenta.time import local_datetime

SECONDS_PER_HOUR = 3600
NOW_GLYPH = "v"


def timeline_spec_from_config(
    config: Configuration, day: pendulum.Date
) -> TimelineSpec:
    return {
        "width": config["timeline_width"],
        "day": day,
        "start_hour": config["timeline_start_hour"],
        "end_hour": config["timeline_end_hour"],
        "planned_glyph": config["planned_glyph"],
        "actual_glyph": config["actual_glyph"],
        "empty_glyph": config["empty_glyph"],
    }


def render(task: Task, spec: TimelineSpec, now: pendulum.DateTime) -> str:
    """
    Render one task as a strip of spec["width"] glyphs covering one day.

    The window from start_hour to end_hour of spec["day"] is cut into equal
    cells. A cell shows the actual glyph when it intersects
    [actual_start, actual_complete], where an ongoing task ends at `now`.
    Otherwise it shows the planned glyph when it intersects
    [planned_start, planned_complete], which needs both planned timestamps.
    All other cells show the empty glyph. An interval whose end is before
    its start covers nothing.

    Args:
        task: The task to render
        spec: Width, day, hour window and glyphs
        now: Closes the actual interval of an ongoing task

    Returns:
        A string of exactly spec["width"] characters
    """
    width = spec["width"]
    if width <= 0:
        return ""

    window_start = local_datetime(spec["day"], spec["start_hour"], 0)
    cell_seconds = (spec["end_hour"] - spec["start_hour"]) * SECONDS_PER_HOUR / width

    actual = _interval(
        window_start,
        task["actual_start"],
        task["actual_complete"] if task["actual_complete"] is not None else now,
    )
    planned = _interval(window_start, task["planned_start"], task["planned_complete"])

    cells = []
    for i in range(width):
        cell_start = i * cell_seconds
        cell_end = (i + 1) * cell_seconds
        if _intersects(actual, cell_start, cell_end):
            cells.append(spec["actual_glyph"])
        elif _intersects(planned, cell_start, cell_end):
            cells.append(spec["planned_glyph"])
        else:
            cells.append(spec["empty_glyph"])
    return "".join(cells)


def render_scale(spec: TimelineSpec, now: Optional[pendulum.DateTime] = None) -> str:
    """
    Hour labels aligned with the cells of render(), spec["width"] wide.

    When `now` falls inside the window, its cell is marked with NOW_GLYPH,
    replacing any label character there.
    """
    width = spec["width"]
    hours = spec["end_hour"] - spec["start_hour"]
    scale = [" "] * max(width, 0)
    if width <= 0 or hours <= 0:
        return "".join(scale)

    next_free = 0
    for hour in range(spec["start_hour"], spec["end_hour"]):
        label = str(hour)
        pos = (hour - spec["start_hour"]) * width // hours
        if pos < next_free or pos + len(label) > width:
            continue
        scale[pos : pos + len(label)] = label
        next_free = pos + len(label) + 1

    if now is not None:
        now_pos = now_position(spec, now)
        if now_pos is not None:
            scale[now_pos] = NOW_GLYPH
    return "".join(scale)


def now_position(spec: TimelineSpec, now: pendulum.DateTime) -> Optional[int]:
    """The cell holding `now`, or None when `now` is outside the window."""
    width = spec["width"]
    window_seconds = (spec["end_hour"] - spec["start_hour"]) * SECONDS_PER_HOUR
    if width <= 0 or window_seconds <= 0:
        return None

    window_start = local_datetime(spec["day"], spec["start_hour"], 0)
    offset = (now - window_start).total_seconds()
    if offset < 0 or offset >= window_seconds:
        return None
    return min(int(offset * width // window_seconds), width - 1)


def has_inverted_interval(task: Task) -> bool:
    """True when a complete timestamp is earlier than its start."""
    planned_start = task["planned_start"]
    planned_complete = task["planned_complete"]
    actual_start = task["actual_start"]
    actual_complete = task["actual_complete"]
    if (
        planned_start is not None
        and planned_complete is not None
        and planned_complete < planned_start
    ):
        return True
    if (
        actual_start is not None
        and actual_complete is not None
        and actual_complete < actual_start
    ):
        return True
    return False


def _interval(
    window_start: pendulum.DateTime,
    start: Optional[pendulum.DateTime],
    end: Optional[pendulum.DateTime],
) -> Optional[tuple[float, float]]:
    # Offsets in seconds from the window start; None means no coverage
    if start is None or end is None or end < start:
        return None
    return (
        (start - window_start).total_seconds(),
        (end - window_start).total_seconds(),
    )


def _intersects(
    interval: Optional[tuple[float, float]], cell_start: float, cell_end: float
) -> bool:
    if interval is None:
        return False
    start, end = interval
    return start < cell_end and end >= cell_start
