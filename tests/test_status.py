"""Tests for status derivation."""

import itertools

import pytest

from arenta.model.status import Status
from arenta.service.status import derive_status


class TestDeriveStatus:
    """Tests for derive_status."""

    def test_no_timestamps_is_backlog(self, make_task, at):
        assert derive_status(make_task(), at(12)) == Status.BACKLOG

    def test_started_and_completed_is_complete(self, make_task, at):
        task = make_task(actual_start=at(9), actual_complete=at(10))
        assert derive_status(task, at(12)) == Status.COMPLETE

    def test_complete_wins_over_overdue_plan(self, make_task, at):
        """A finished task stays complete even when its plan lies in the past."""
        task = make_task(
            planned_start=at(7),
            planned_complete=at(8),
            actual_start=at(9),
            actual_complete=at(10),
        )
        assert derive_status(task, at(12)) == Status.COMPLETE

    def test_started_only_is_ongoing(self, make_task, at):
        task = make_task(planned_start=at(7), actual_start=at(9))
        assert derive_status(task, at(12)) == Status.ONGOING

    def test_planned_start_in_the_past_is_overdue(self, make_task, at):
        assert derive_status(make_task(planned_start=at(9)), at(12)) == Status.OVERDUE

    def test_planned_start_in_the_future_is_planned(self, make_task, at):
        assert derive_status(make_task(planned_start=at(14)), at(12)) == Status.PLANNED

    def test_planned_start_equal_to_now_is_planned(self, make_task, at):
        """Overdue needs planned_start strictly before now."""
        assert derive_status(make_task(planned_start=at(12)), at(12)) == Status.PLANNED

    def test_status_changes_with_time_only(self, make_task, at):
        """The same task is planned at 08:00 and overdue at 09:30."""
        task = make_task(planned_start=at(9), planned_complete=at(10))
        assert derive_status(task, at(8)) == Status.PLANNED
        assert derive_status(task, at(9, 30)) == Status.OVERDUE

    def test_planned_complete_alone_is_backlog(self, make_task, at):
        assert derive_status(make_task(planned_complete=at(9)), at(12)) == Status.BACKLOG

    def test_actual_complete_without_start_falls_through(self, make_task, at):
        task = make_task(actual_complete=at(10))
        assert derive_status(task, at(12)) == Status.BACKLOG

        task = make_task(planned_start=at(14), actual_complete=at(10))
        assert derive_status(task, at(12)) == Status.PLANNED

    @pytest.mark.parametrize(
        "present", list(itertools.product([False, True], repeat=4))
    )
    def test_every_combination_has_a_status(self, make_task, at, present):
        fields = ("planned_start", "planned_complete", "actual_start", "actual_complete")
        values = {field: at(9) if p else None for field, p in zip(fields, present)}
        assert derive_status(make_task(**values), at(12)) in set(Status)
