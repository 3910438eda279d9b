# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer
from PIL import ImageColor
from rich.errors import StyleSyntaxError
from rich.style import Style

from keeper.model.selection import Selection, date_selection, days_selection
from keeper.time import today_local


def parse_date(date_param: str) -> pendulum.Date:
    if date_param == "today":
        return today_local()
    if date_param == "tomorrow":
        return today_local().add(days=1)
    if date_param == "yesterday":
        return today_local().subtract(days=1)

    # Match (D)D-(M)M-YYYY format
    if not re.match(r"^\d{1,2}-\d{1,2}-\d{4}$", date_param):
        raise typer.BadParameter(
            f"Date must be today, tomorrow, yesterday or DD-MM-YYYY, got '{date_param}'"
        )
    try:
        return pendulum.from_format(date_param, "D-M-YYYY").date()
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date '{date_param}': {e}")


def parse_hour(hour_param: str) -> int:
    try:
        hour = int(hour_param)
    except ValueError:
        raise typer.BadParameter(f"Hour must be an integer, got '{hour_param}'")

    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    return hour


def parse_slot_id(slot_param: str) -> tuple[int, int]:
    """
    Parse a task id in hour.index or hour format.

    Args:
        slot_param: Task id like "9.1" (second task at 9) or "9" (first task at 9)

    Returns:
        Tuple of (hour, index)

    Raises:
        typer.BadParameter: If the hour or index is malformed or out of range
    """
    hour_str, separator, index_str = slot_param.partition(".")
    hour = parse_hour(hour_str)
    if not separator:
        return (hour, 0)

    try:
        index = int(index_str)
    except ValueError:
        raise typer.BadParameter(
            f"Index must be an integer in format [hour.index], got '{index_str}'"
        )
    if index < 0:
        raise typer.BadParameter(f"Index cannot be negative, got {index}")
    return (hour, index)


def parse_selection(selection_param: Optional[str]) -> Selection:
    """
    Parse what to show: nothing for today, a day count, or a date.
    """
    if selection_param is None:
        return date_selection(today_local())

    # Numbers are day counts starting today
    if re.match(r"^-?\d+$", selection_param):
        days = int(selection_param)
        if days < 0:
            raise typer.BadParameter(f"Day count cannot be negative, got {days}")
        return days_selection(days)

    return date_selection(parse_date(selection_param))


def validate_description(description: str) -> str:
    if "\n" in description or "\r" in description:
        raise typer.BadParameter("Description must be a single line")
    return description


def validate_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    try:
        ImageColor.getrgb(color)
    except ValueError:
        raise typer.BadParameter(f"Unknown color '{color}'")
    return color


def validate_terminal_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    try:
        Style.parse(color)
    except StyleSyntaxError:
        raise typer.BadParameter(f"Unknown terminal color '{color}'")
    return color
