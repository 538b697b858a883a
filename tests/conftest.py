"""Shared fixtures for the arenta tests."""

from typing import Callable, Optional

import pendulum
import pytest

from arenta import configuration, lock
from arenta.model.task import Task
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.repository.task import TASK_REPO

TaskFactory = Callable[..., Task]


@pytest.fixture
def today() -> pendulum.Date:
    return pendulum.date(2026, 10, 18)


@pytest.fixture
def at() -> Callable[..., pendulum.DateTime]:
    """Build a local datetime on 2026-10-18 (or another day) from hour and minute."""

    def build(
        hour: int, minute: int = 0, day: Optional[pendulum.Date] = None
    ) -> pendulum.DateTime:
        day = day or pendulum.date(2026, 10, 18)
        return pendulum.datetime(day.year, day.month, day.day, hour, minute, tz="local")

    return build


@pytest.fixture
def make_task() -> TaskFactory:
    def build(
        description: str = "task",
        planned_start: Optional[pendulum.DateTime] = None,
        planned_complete: Optional[pendulum.DateTime] = None,
        actual_start: Optional[pendulum.DateTime] = None,
        actual_complete: Optional[pendulum.DateTime] = None,
    ) -> Task:
        return {
            "description": description,
            "created": pendulum.datetime(2026, 10, 1, tz="local"),
            "planned_start": planned_start,
            "planned_complete": planned_complete,
            "actual_start": actual_start,
            "actual_complete": actual_complete,
        }

    return build


@pytest.fixture
def isolated_storage(tmp_path, monkeypatch):
    """Point config, data and lock paths into tmp_path and start from empty repositories."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data_dir / "tasks.yaml")
    monkeypatch.setattr(configuration, "DATA_LOCK_PATH", data_dir / "arenta.lock")
    monkeypatch.setattr(lock, "_held", False)

    for repository in (TASK_REPO, CONFIGURATION_REPO):
        monkeypatch.setattr(repository, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_tasks", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)

    return tmp_path
