"""Tests for date range selections."""

import pendulum
import pytest

from keeper.model.selection import date_selection, days_selection, selected_dates


class TestSelectedDates:
    def test_single_date(self, today: pendulum.Date) -> None:
        other = pendulum.date(2027, 1, 2)
        assert selected_dates(date_selection(other), today) == [other]

    def test_zero_days(self, today: pendulum.Date) -> None:
        assert selected_dates(days_selection(0), today) == []

    def test_day_count_starts_today(self, today: pendulum.Date) -> None:
        assert selected_dates(days_selection(3), today) == [
            today,
            today.add(days=1),
            today.add(days=2),
        ]

    def test_crosses_month_end(self) -> None:
        dates = selected_dates(days_selection(2), pendulum.date(2026, 10, 31))
        assert dates == [pendulum.date(2026, 10, 31), pendulum.date(2026, 11, 1)]

    def test_negative_day_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            days_selection(-1)
