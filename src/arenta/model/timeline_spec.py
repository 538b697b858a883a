# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TimelineSpec(TypedDict):
    width: int
    day: pendulum.Date
    start_hour: int
    end_hour: int
    planned_glyph: str
    actual_glyph: str
    empty_glyph: str
