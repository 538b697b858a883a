# SPDX-License-Identifier: MIT

from enum import StrEnum


class Status(StrEnum):
    BACKLOG = "Backlog"
    PLANNED = "Planned"
    OVERDUE = "Overdue"
    ONGOING = "Ongoing"
    COMPLETE = "Complete"
