"""Tests for task selection."""

import pendulum
import pytest

from arenta.model.date_filter import Operator
from arenta.query.select import effective_date, matches, select


def flags(include_backlog=False):
    return {"include_backlog": include_backlog, "verbose": False, "timeline": False}


def today_filter(today, operator=Operator.EQ):
    return {"operator": operator, "date": today}


class TestEffectiveDate:
    """Tests for effective_date."""

    def test_actual_start_wins(self, make_task, at):
        yesterday = pendulum.date(2026, 10, 17)
        task = make_task(planned_start=at(9, day=yesterday), actual_start=at(9))
        assert effective_date(task) == pendulum.date(2026, 10, 18)

    def test_planned_start_is_the_fallback(self, make_task, at):
        assert effective_date(make_task(planned_start=at(9))) == pendulum.date(
            2026, 10, 18
        )

    def test_none_without_starts(self, make_task, at):
        assert effective_date(make_task(planned_complete=at(9))) is None


class TestMatches:
    """Tests for matches."""

    @pytest.mark.parametrize(
        "operator,expected",
        [
            (Operator.EQ, [False, True, False]),
            (Operator.LT, [True, False, False]),
            (Operator.LE, [True, True, False]),
            (Operator.GT, [False, False, True]),
            (Operator.GE, [False, True, True]),
        ],
    )
    def test_operators(self, today, operator, expected):
        values = [today.subtract(days=1), today, today.add(days=1)]
        assert [matches(operator, value, today) for value in values] == expected


class TestSelect:
    """Tests for select and Selection."""

    def test_backlog_excluded_by_default(self, make_task, at, today):
        tasks = [make_task("backlog"), make_task("planned", planned_start=at(14))]
        selected = list(select(tasks, today_filter(today), flags(), at(12)))
        assert [task["description"] for task in selected] == ["planned"]

    def test_backlog_included_regardless_of_filter(self, make_task, at, today):
        tasks = [make_task("backlog")]
        date_filter = today_filter(today.add(days=30))
        selected = list(select(tasks, date_filter, flags(include_backlog=True), at(12)))
        assert [task["description"] for task in selected] == ["backlog"]

    def test_filter_by_effective_date(self, make_task, at, today):
        yesterday = today.subtract(days=1)
        tasks = [
            make_task("yesterday", planned_start=at(9, day=yesterday)),
            make_task("today", planned_start=at(9)),
            make_task("moved to today", planned_start=at(9, day=yesterday), actual_start=at(9)),
        ]
        selected = list(select(tasks, today_filter(today), flags(), at(12)))
        assert [task["description"] for task in selected] == ["today", "moved to today"]

        selected = list(select(tasks, today_filter(today, Operator.LT), flags(), at(12)))
        assert [task["description"] for task in selected] == ["yesterday"]

    def test_keeps_collection_order(self, make_task, at, today):
        tasks = [make_task(str(hour), planned_start=at(hour)) for hour in (15, 9, 12)]
        selected = list(select(tasks, today_filter(today), flags(), at(8)))
        assert [task["description"] for task in selected] == ["15", "9", "12"]

    def test_yields_the_stored_tasks(self, make_task, at, today):
        tasks = [make_task(planned_start=at(9))]
        selected = list(select(tasks, today_filter(today), flags(), at(8)))
        assert selected[0] is tasks[0]

    def test_iterating_twice_gives_the_same_tasks(self, make_task, at, today):
        tasks = [make_task(str(hour), planned_start=at(hour)) for hour in (9, 10)]
        selection = select(tasks, today_filter(today), flags(), at(8))
        assert list(selection) == list(selection)

    def test_selection_reads_the_live_collection(self, make_task, at, today):
        tasks = [make_task("first", planned_start=at(9))]
        selection = select(tasks, today_filter(today), flags(), at(8))
        tasks.append(make_task("second", planned_start=at(10)))
        assert [task["description"] for task in selection] == ["first", "second"]

    def test_enumerate_gives_collection_indexes(self, make_task, at, today):
        tasks = [
            make_task("backlog"),
            make_task("tomorrow", planned_start=at(9, day=today.add(days=1))),
            make_task("today", planned_start=at(9)),
        ]
        selection = select(tasks, today_filter(today), flags(), at(8))
        assert [index for index, _ in selection.enumerate()] == [2]
