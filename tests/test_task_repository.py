"""Tests for the task repository."""

import pytest

from arenta import configuration
from arenta.error import TaskNotFoundError, TaskStateError
from arenta.model.status import Status
from arenta.repository.task import TaskRepository
from arenta.service.status import derive_status


@pytest.fixture
def repository(isolated_storage):
    return TaskRepository()


def reload() -> TaskRepository:
    return TaskRepository()


class TestPersistence:
    """Tests for loading and saving tasks."""

    def test_missing_file_is_an_empty_collection(self, repository):
        assert repository.tasks == []

    def test_round_trip_keeps_order_and_timestamps(self, repository, make_task, at):
        first = make_task("first", planned_start=at(9), planned_complete=at(10))
        second = make_task("second", actual_start=at(8), actual_complete=at(8, 45))
        repository.save_new_task(first)
        repository.save_new_task(make_task("third"))
        repository.save_new_task(second)
        assert repository.flush()

        loaded = reload().tasks
        assert [task["description"] for task in loaded] == ["first", "third", "second"]
        assert loaded[0]["planned_start"] == at(9)
        assert loaded[0]["actual_start"] is None
        assert loaded[2]["actual_complete"] == at(8, 45)
        assert loaded[2]["created"] == second["created"]

    def test_flush_without_changes_writes_nothing(self, repository):
        assert repository.tasks == []
        assert not repository.flush()
        assert not configuration.DATA_TASKS_PATH.exists()

    def test_empty_file_is_an_empty_collection(self, repository):
        configuration.DATA_TASKS_PATH.write_text("")
        assert repository.tasks == []


class TestStateChanges:
    """Tests for start, complete, modify and delete."""

    def test_save_returns_the_index(self, repository, make_task):
        assert repository.save_new_task(make_task("a")) == 0
        assert repository.save_new_task(make_task("b")) == 1

    def test_empty_description_is_rejected(self, repository, make_task):
        with pytest.raises(TaskStateError):
            repository.save_new_task(make_task("   "))

    def test_start(self, repository, make_task, at):
        repository.save_new_task(make_task(planned_start=at(9)))
        task = repository.start_task(0, at(9, 15))
        assert task["actual_start"] == at(9, 15)
        assert derive_status(task, at(10)) == Status.ONGOING

    def test_start_twice_fails(self, repository, make_task, at):
        repository.save_new_task(make_task())
        repository.start_task(0, at(9))
        with pytest.raises(TaskStateError):
            repository.start_task(0, at(10))
        assert repository.get_task(0)["actual_start"] == at(9)

    def test_complete_started_task(self, repository, make_task, at):
        repository.save_new_task(make_task(actual_start=at(9)))
        task = repository.complete_task(0, at(10))
        assert task["actual_start"] == at(9)
        assert task["actual_complete"] == at(10)

    def test_complete_unstarted_task_starts_it_too(self, repository, make_task, at):
        repository.save_new_task(make_task())
        task = repository.complete_task(0, at(10))
        assert task["actual_start"] == at(10)
        assert task["actual_complete"] == at(10)
        assert derive_status(task, at(11)) == Status.COMPLETE

    def test_complete_twice_fails(self, repository, make_task, at):
        repository.save_new_task(make_task())
        repository.complete_task(0, at(10))
        with pytest.raises(TaskStateError):
            repository.complete_task(0, at(11))

    def test_modify(self, repository, make_task, at):
        repository.save_new_task(make_task("old", planned_start=at(9)))
        task = repository.modify_task(
            0, description="new", planned_complete=at(10), remove_planned_start=True
        )
        assert task["description"] == "new"
        assert task["planned_start"] is None
        assert task["planned_complete"] == at(10)

    def test_modify_cannot_leave_complete_without_start(self, repository, make_task, at):
        repository.save_new_task(make_task(actual_start=at(9), actual_complete=at(10)))
        with pytest.raises(TaskStateError):
            repository.modify_task(0, remove_actual_start=True)
        assert repository.get_task(0)["actual_start"] == at(9)

    def test_get_task_returns_a_copy(self, repository, make_task):
        repository.save_new_task(make_task("a"))
        repository.get_task(0)["description"] = "changed"
        assert repository.tasks[0]["description"] == "a"

    def test_delete_shifts_indexes(self, repository, make_task):
        for description in ("a", "b", "c"):
            repository.save_new_task(make_task(description))
        assert repository.delete_task(1)["description"] == "b"
        assert [task["description"] for task in repository.tasks] == ["a", "c"]

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_unknown_index(self, repository, make_task, at, index):
        repository.save_new_task(make_task())
        with pytest.raises(TaskNotFoundError):
            repository.start_task(index, at(9))
        with pytest.raises(TaskNotFoundError):
            repository.delete_task(index)
        with pytest.raises(TaskNotFoundError):
            repository.get_task(index)


class TestSort:
    """Tests for sorting the collection."""

    def test_sort_by_start_backlog_last(self, repository, make_task, at):
        repository.save_new_task(make_task("backlog"))
        repository.save_new_task(make_task("noon", planned_start=at(12)))
        repository.save_new_task(make_task("started", planned_start=at(14), actual_start=at(8)))
        repository.save_new_task(make_task("nine", planned_start=at(9)))
        repository.sort_tasks()
        assert [task["description"] for task in repository.tasks] == [
            "started",
            "nine",
            "noon",
            "backlog",
        ]
        assert repository.is_dirty
