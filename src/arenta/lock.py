# SPDX-License-Identifier: MIT

import logging
import os

from arenta import configuration

logger = logging.getLogger(__name__)

_held = False


def acquire_lock() -> bool:
    """
    Create the lock file in the data directory.

    Returns:
        False if another process already holds the lock
    """
    global _held
    try:
        fd = os.open(
            configuration.DATA_LOCK_PATH, os.O_CREAT | os.O_EXCL | os.O_WRONLY
        )
    except FileExistsError:
        return False
    with os.fdopen(fd, "w") as lock_file:
        lock_file.write(str(os.getpid()))
    _held = True
    logger.debug("acquired %s", configuration.DATA_LOCK_PATH)
    return True


def release_lock() -> None:
    global _held
    if not _held:
        return
    configuration.DATA_LOCK_PATH.unlink(missing_ok=True)
    _held = False
    logger.debug("released %s", configuration.DATA_LOCK_PATH)
