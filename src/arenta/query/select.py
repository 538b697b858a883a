# SPDX-License-Identifier: MIT

from typing import Iterator, Optional, Sequence

import pendulum

from arenta.model.date_filter import DateFilter, Operator
from arenta.model.display_flags import DisplayFlags
from arenta.model.status import Status
from arenta.model.task import Task
from arenta.service.status import derive_status


def effective_date(task: Task) -> Optional[pendulum.Date]:
    """The date a task is filtered by: actual start, else planned start."""
    if task["actual_start"] is not None:
        return task["actual_start"].date()
    if task["planned_start"] is not None:
        return task["planned_start"].date()
    return None


def matches(operator: Operator, value: pendulum.Date, reference: pendulum.Date) -> bool:
    match operator:
        case Operator.EQ:
            return value == reference
        case Operator.LT:
            return value < reference
        case Operator.LE:
            return value <= reference
        case Operator.GT:
            return value > reference
        case Operator.GE:
            return value >= reference


class Selection:
    """
    Lazy view over a borrowed task collection.

    Nothing is copied and nothing is cached: every iteration re-derives each
    task's status, so iterating twice with unchanged tasks gives the same
    tasks in the same (insertion) order.
    """

    def __init__(
        self,
        tasks: Sequence[Task],
        date_filter: DateFilter,
        flags: DisplayFlags,
        now: pendulum.DateTime,
    ) -> None:
        self.tasks = tasks
        self.date_filter = date_filter
        self.flags = flags
        self.now = now

    def __iter__(self) -> Iterator[Task]:
        for _, task in self.enumerate():
            yield task

    def enumerate(self) -> Iterator[tuple[int, Task]]:
        """Yield (index in the collection, task) for every selected task."""
        for index, task in enumerate(self.tasks):
            if self.__include(task):
                yield index, task

    def __include(self, task: Task) -> bool:
        if (
            derive_status(task, self.now) == Status.BACKLOG
            and not self.flags["include_backlog"]
        ):
            return False

        task_date = effective_date(task)
        if task_date is None:
            return True

        return matches(
            self.date_filter["operator"], task_date, self.date_filter["date"]
        )


def select(
    tasks: Sequence[Task],
    date_filter: DateFilter,
    flags: DisplayFlags,
    now: pendulum.DateTime,
) -> Selection:
    return Selection(tasks, date_filter, flags, now)
