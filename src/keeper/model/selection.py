# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Selection(TypedDict):
    date: Optional[pendulum.Date]
    days: Optional[int]


def date_selection(date: pendulum.Date) -> Selection:
    return {"date": date, "days": None}


def days_selection(days: int) -> Selection:
    if days < 0:
        raise ValueError(f"day count cannot be negative, got {days}")
    return {"date": None, "days": days}


def selected_dates(selection: Selection, today: pendulum.Date) -> list[pendulum.Date]:
    """Dates covered by a selection, in ascending order."""
    if selection["date"] is not None:
        return [selection["date"]]
    days = selection["days"] or 0
    return [today.add(days=offset) for offset in range(days)]
