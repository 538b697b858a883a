# SPDX-License-Identifier: MIT

import pendulum

from arenta.model.status import Status
from arenta.model.task import Task


def derive_status(task: Task, now: pendulum.DateTime) -> Status:
    """
    Compute the lifecycle status of a task from its timestamps.

    Status is never stored on the task. It is recomputed on every read so a
    planned task turns overdue purely by the passage of time.

    The rules are checked in order and the first match wins:
    Complete, Ongoing, Overdue, Planned, Backlog. The planned complete
    timestamp takes no part in the decision.

    Args:
        task: The task to classify
        now: The instant "overdue" is measured against

    Returns:
        The derived status
    """
    actual_start = task["actual_start"]
    planned_start = task["planned_start"]

    if actual_start is not None and task["actual_complete"] is not None:
        return Status.COMPLETE
    if actual_start is not None:
        return Status.ONGOING
    if planned_start is not None and planned_start < now:
        return Status.OVERDUE
    if planned_start is not None:
        return Status.PLANNED
    return Status.BACKLOG
