# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Task(TypedDict):
    description: str
    created: pendulum.DateTime
    planned_start: Optional[pendulum.DateTime]
    planned_complete: Optional[pendulum.DateTime]
    actual_start: Optional[pendulum.DateTime]
    actual_complete: Optional[pendulum.DateTime]


TIMESTAMP_FIELDS = (
    "planned_start",
    "planned_complete",
    "actual_start",
    "actual_complete",
)
