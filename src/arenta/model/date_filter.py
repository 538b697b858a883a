# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum


class Operator(StrEnum):
    EQ = ""
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


class DateFilter(TypedDict):
    operator: Operator
    date: pendulum.Date
