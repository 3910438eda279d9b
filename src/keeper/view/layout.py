# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

import pendulum

from keeper.model.keeper import Keeper
from keeper.model.selection import Selection, selected_dates
from keeper.time import date_to_display_str
from keeper.view.classify import DisplayState, classify, display_state, is_all_done

EMPTY_DAY = "Empty"


class Run(NamedTuple):
    text: str
    # None means the run is drawn in the plain text color
    state: Optional[DisplayState] = None


Line = list[Run]


def day_lines(keeper: Keeper, date: pendulum.Date, now: pendulum.DateTime) -> list[Line]:
    """
    Lay out one day: a date header, then one line per hour slot.

    A slot line is the bracketed hour followed by each task's description
    in parentheses. Brackets take the state of the whole slot, parentheses
    the state of their task.
    """
    lines: list[Line] = [[Run(date_to_display_str(date))]]

    schedule = keeper.get(date)
    if schedule is None:
        lines.append([Run(EMPTY_DAY)])
        return lines

    for hour in sorted(schedule):
        tasks = schedule[hour]
        past_due = classify(date, hour, now)["past_due"]

        line: Line = [Run(f"[{hour}]", display_state(is_all_done(tasks), past_due))]
        for task in tasks:
            task_state = display_state(task["completed"], past_due)
            line.append(Run(" "))
            line.append(Run("(", task_state))
            line.append(Run(task["description"]))
            line.append(Run(")", task_state))
        lines.append(line)

    return lines


def selection_lines(
    keeper: Keeper, selection: Selection, now: pendulum.DateTime
) -> list[Line]:
    """Lay out every selected day, with one blank line between days."""
    lines: list[Line] = []
    for position, date in enumerate(selected_dates(selection, now.date())):
        if position > 0:
            lines.append([])
        lines.extend(day_lines(keeper, date, now))
    return lines
