# SPDX-License-Identifier: MIT

from arenta.model.task import Task
from arenta.time import now_local


def get_task_template() -> Task:
    return {
        "description": "",
        "created": now_local(),
        "planned_start": None,
        "planned_complete": None,
        "actual_start": None,
        "actual_complete": None,
    }
