"""Tests for command line argument parsing."""

import pendulum
import pytest
import typer

from keeper.terminal.parse import (
    parse_date,
    parse_hour,
    parse_selection,
    parse_slot_id,
    validate_color,
    validate_description,
    validate_terminal_color,
)
from keeper.time import today_local


class TestParseDate:
    def test_keywords(self) -> None:
        today = today_local()
        assert parse_date("today") == today
        assert parse_date("tomorrow") == today.add(days=1)
        assert parse_date("yesterday") == today.subtract(days=1)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("18-10-2026", pendulum.date(2026, 10, 18)),
            ("1-2-2027", pendulum.date(2027, 2, 1)),
            ("29-02-2028", pendulum.date(2028, 2, 29)),
        ],
    )
    def test_day_month_year(self, value: str, expected: pendulum.Date) -> None:
        assert parse_date(value) == expected

    @pytest.mark.parametrize("value", ["2026-10-18", "31-02-2026", "next week", ""])
    def test_rejected(self, value: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_date(value)


class TestParseHour:
    def test_bounds(self) -> None:
        assert parse_hour("0") == 0
        assert parse_hour("23") == 23

    @pytest.mark.parametrize("value", ["24", "-1", "nine", "9.5"])
    def test_rejected(self, value: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_hour(value)


class TestParseSlotId:
    def test_hour_only_means_first_task(self) -> None:
        assert parse_slot_id("9") == (9, 0)

    def test_hour_and_index(self) -> None:
        assert parse_slot_id("14.3") == (14, 3)

    @pytest.mark.parametrize("value", ["24.0", "9.x", "9.-1", ".1", "9."])
    def test_rejected(self, value: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_slot_id(value)


class TestParseSelection:
    def test_nothing_means_today(self) -> None:
        assert parse_selection(None) == {"date": today_local(), "days": None}

    def test_number_is_a_day_count(self) -> None:
        assert parse_selection("3") == {"date": None, "days": 3}
        assert parse_selection("0") == {"date": None, "days": 0}

    def test_date(self) -> None:
        assert parse_selection("18-10-2026") == {
            "date": pendulum.date(2026, 10, 18),
            "days": None,
        }

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(typer.BadParameter):
            parse_selection("-2")


class TestValidation:
    def test_description_single_line(self) -> None:
        assert validate_description("buy milk") == "buy milk"
        with pytest.raises(typer.BadParameter):
            validate_description("buy\nmilk")

    def test_image_color(self) -> None:
        assert validate_color(None) is None
        assert validate_color("#102030") == "#102030"
        with pytest.raises(typer.BadParameter):
            validate_color("not-a-color")

    def test_terminal_color(self) -> None:
        assert validate_terminal_color("bright_black") == "bright_black"
        with pytest.raises(typer.BadParameter):
            validate_terminal_color("not-a-color")
