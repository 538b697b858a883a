# SPDX-License-Identifier: MIT

import re

import pendulum
import typer

from arenta.model.date_filter import DateFilter
from arenta.query.date_filter import ParseError, parse_filter


def parse_date_filter(
    text: str, today: pendulum.Date, allow_range: bool = True
) -> DateFilter:
    """
    Parse a listing filter for a command, reporting problems as a bad
    parameter so they are shown like any other usage error.
    """
    try:
        return parse_filter(text, today, allow_range)
    except ParseError as e:
        raise typer.BadParameter(f"{e} ({e.kind})", param_hint="FILTER")


def parse_time(time_str: str) -> tuple[int, int]:
    """
    Parse a time string in (H)H:mm format and return a tuple of (hour, minute).

    Args:
        time_str: Time string in format like "8:00", "17:30", etc.

    Returns:
        Tuple of (hour, minute)

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_str.strip())
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_str}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))

    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

    return (hour, minute)
