# SPDX-License-Identifier: MIT

from arenta.model.status import Status

STATUS_COLOR: dict[Status, str] = {
    Status.BACKLOG: "bright_black",
    Status.PLANNED: "cyan",
    Status.OVERDUE: "red",
    Status.ONGOING: "yellow",
    Status.COMPLETE: "green",
}

TIMELINE_COLOR = "bright_blue"

NOW_COLOR = "red"
