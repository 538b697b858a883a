# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def local_datetime(date: pendulum.Date, hour: int, minute: int) -> pendulum.DateTime:
    return pendulum.datetime(
        date.year, date.month, date.day, hour, minute, tz="local"
    )


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    """Parse an ISO string, keeping its wall-clock time in the local zone."""
    parsed = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    return parsed.in_tz("local")


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def datetime_to_display_str_optional(
    datetime: Optional[pendulum.DateTime], unset: str = "unset"
) -> str:
    if datetime is None:
        return unset
    return datetime_to_display_str(datetime)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")
