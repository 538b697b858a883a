# SPDX-License-Identifier: MIT


class ArentaError(Exception):
    """Base class for errors reported to the user without ending the session."""


class TaskNotFoundError(ArentaError):
    def __init__(self, index: int) -> None:
        super().__init__(f"index out of range: no task {index}")
        self.index = index


class TaskStateError(ArentaError):
    pass


class ConfigurationError(ArentaError):
    pass
