"""Tests for past-due and completion classification."""

import pendulum
import pytest

from keeper.model.task import Task
from keeper.view.classify import DisplayState, classify, display_state, is_all_done

DAY = pendulum.date(2026, 10, 18)


def _local(hour: int, minute: int, second: int, microsecond: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(2026, 10, 18, hour, minute, second, microsecond, tz="local")


def _task(completed: bool) -> Task:
    return {"completed": completed, "description": "x"}


class TestClassify:
    def test_before_end_of_slot_is_not_past_due(self) -> None:
        assert classify(DAY, 9, _local(9, 59, 58)) == {"past_due": False}

    def test_exactly_end_of_slot_is_not_past_due(self) -> None:
        assert classify(DAY, 9, _local(9, 59, 59)) == {"past_due": False}

    def test_just_after_end_of_slot_is_past_due(self) -> None:
        assert classify(DAY, 9, _local(9, 59, 59, 1)) == {"past_due": True}

    def test_during_the_slot_is_not_past_due(self) -> None:
        assert classify(DAY, 9, _local(9, 0, 0))["past_due"] is False

    def test_earlier_day_is_past_due(self) -> None:
        now = _local(0, 0, 0)
        assert classify(DAY.subtract(days=1), 23, now)["past_due"] is True

    def test_later_day_is_not_past_due(self) -> None:
        now = _local(23, 59, 59, 999999)
        assert classify(DAY.add(days=1), 0, now)["past_due"] is False

    @pytest.mark.parametrize("hour", [0, 12, 23])
    def test_every_hour_uses_its_own_end(self, hour: int) -> None:
        assert classify(DAY, hour, _local(hour, 59, 59))["past_due"] is False
        assert classify(DAY, hour, _local(hour, 59, 59, 1))["past_due"] is True


class TestIsAllDone:
    def test_all_completed(self) -> None:
        assert is_all_done([_task(True), _task(True)]) is True

    def test_one_remaining(self) -> None:
        assert is_all_done([_task(True), _task(False)]) is False


class TestDisplayState:
    @pytest.mark.parametrize(
        ("completed", "past_due", "expected"),
        [
            (True, True, DisplayState.DONE),
            (True, False, DisplayState.DONE),
            (False, True, DisplayState.OVERDUE),
            (False, False, DisplayState.PENDING),
        ],
    )
    def test_state_table(
        self, completed: bool, past_due: bool, expected: DisplayState
    ) -> None:
        assert display_state(completed, past_due) is expected
