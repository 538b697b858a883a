# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from arenta.model.task import Task


def effective_start(task: Task) -> Optional[pendulum.DateTime]:
    if task["actual_start"] is not None:
        return task["actual_start"]
    return task["planned_start"]


def sort_tasks(tasks: list[Task]) -> list[Task]:
    """
    Order tasks by actual start, else planned start. Tasks with neither go
    last, keeping their relative order.
    """
    none_items = [task for task in tasks if effective_start(task) is None]
    value_items = [task for task in tasks if effective_start(task) is not None]
    value_items.sort(key=lambda task: effective_start(task))  # type: ignore[arg-type, return-value]
    return value_items + none_items
