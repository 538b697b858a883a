# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from arenta import configuration, time
from arenta.error import TaskNotFoundError, TaskStateError
from arenta.model.task import TIMESTAMP_FIELDS, Task
from arenta.query.sort import sort_tasks

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    The ordered task collection and its YAML file.

    A task's index is its position in the collection. Timestamps only change
    through the methods below, which keep the rule that a task cannot be
    complete without having started.
    """

    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_PATH.is_file():
            return
        data = load(configuration.DATA_TASKS_PATH.read_text(), Loader=Loader)
        if data is None:
            return
        for raw_task in data.get("tasks") or []:
            self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        logger.debug(
            "loaded %d tasks from %s", len(self._tasks), configuration.DATA_TASKS_PATH
        )

    def __save_data(self) -> None:
        serializable_tasks = [
            self.__convert_task_for_serialization(deepcopy(task)) for task in self.tasks
        ]
        configuration.DATA_TASKS_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_TASKS_PATH.write_text(
            dump({"tasks": serializable_tasks}, Dumper=Dumper, sort_keys=False)
        )
        logger.debug(
            "saved %d tasks to %s", len(serializable_tasks), configuration.DATA_TASKS_PATH
        )

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        for field in TIMESTAMP_FIELDS:
            serializable_task[field] = time.datetime_to_iso_str_optional(
                serializable_task[field]
            )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["description"] = str(deserializable_task["description"])
        created = deserializable_task.get("created")
        deserializable_task["created"] = (
            time.datetime_from_str(created) if created is not None else time.now_local()
        )
        for field in TIMESTAMP_FIELDS:
            deserializable_task[field] = time.datetime_from_str_optional(
                deserializable_task.get(field)
            )
        return cast(Task, deserializable_task)

    def __task_at(self, index: int) -> Task:
        if index < 0 or index >= len(self.tasks):
            raise TaskNotFoundError(index)
        return self.tasks[index]

    def __validate(self, task: Task) -> None:
        if not task["description"].strip():
            raise TaskStateError("description cannot be empty")
        if task["actual_complete"] is not None and task["actual_start"] is None:
            raise TaskStateError("a task cannot be complete without an actual start")

    def save_new_task(self, task: Task) -> int:
        self.__validate(task)
        self.is_dirty = True
        self.tasks.append(task)
        index = len(self.tasks) - 1
        logger.info("added task %d: %s", index, task["description"])
        return index

    def start_task(self, index: int, now: pendulum.DateTime) -> Task:
        task = self.__task_at(index)
        if task["actual_start"] is not None:
            raise TaskStateError(f"task {index} has already been started")
        self.is_dirty = True
        task["actual_start"] = now
        logger.info("started task %d", index)
        return deepcopy(task)

    def complete_task(self, index: int, now: pendulum.DateTime) -> Task:
        task = self.__task_at(index)
        if task["actual_complete"] is not None:
            raise TaskStateError(f"task {index} has already been completed")
        self.is_dirty = True
        if task["actual_start"] is None:
            task["actual_start"] = now
        task["actual_complete"] = now
        logger.info("completed task %d", index)
        return deepcopy(task)

    def modify_task(
        self,
        index: int,
        description: Optional[str] = None,
        planned_start: Optional[pendulum.DateTime] = None,
        planned_complete: Optional[pendulum.DateTime] = None,
        actual_start: Optional[pendulum.DateTime] = None,
        actual_complete: Optional[pendulum.DateTime] = None,
        remove_planned_start: bool = False,
        remove_planned_complete: bool = False,
        remove_actual_start: bool = False,
        remove_actual_complete: bool = False,
    ) -> Task:
        task = self.__task_at(index)
        modified = deepcopy(task)

        if description is not None:
            modified["description"] = description
        if planned_start is not None:
            modified["planned_start"] = planned_start
        if planned_complete is not None:
            modified["planned_complete"] = planned_complete
        if actual_start is not None:
            modified["actual_start"] = actual_start
        if actual_complete is not None:
            modified["actual_complete"] = actual_complete

        if remove_planned_start:
            modified["planned_start"] = None
        if remove_planned_complete:
            modified["planned_complete"] = None
        if remove_actual_start:
            modified["actual_start"] = None
        if remove_actual_complete:
            modified["actual_complete"] = None

        self.__validate(modified)
        self.is_dirty = True
        task.update(modified)
        logger.info("modified task %d", index)
        return deepcopy(task)

    def delete_task(self, index: int) -> Task:
        task = self.__task_at(index)
        self.is_dirty = True
        del self.tasks[index]
        logger.info("deleted task %d: %s", index, task["description"])
        return task

    def sort_tasks(self) -> None:
        self.is_dirty = True
        self.tasks[:] = sort_tasks(self.tasks)

    def get_task(self, index: int) -> Task:
        return deepcopy(self.__task_at(index))


TASK_REPO = TaskRepository()
