# SPDX-License-Identifier: MIT

import atexit

from arenta.lock import release_lock
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.repository.task import TASK_REPO


def flush_and_release() -> None:
    CONFIGURATION_REPO.flush()
    TASK_REPO.flush()
    release_lock()


def register_cleanup() -> None:
    atexit.register(flush_and_release)
