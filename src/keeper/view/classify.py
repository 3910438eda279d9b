# SPDX-License-Identifier: MIT

from enum import Enum
from typing import TypedDict

import pendulum

from keeper.model.task import Task
from keeper.time import end_of_hour_slot


class DisplayState(Enum):
    DONE = "done"
    OVERDUE = "overdue"
    PENDING = "pending"


class SlotClassification(TypedDict):
    past_due: bool


def classify(
    date: pendulum.Date, hour: int, now: pendulum.DateTime
) -> SlotClassification:
    # If hour = 10, the slot is past due from 11:00 onward.
    return {"past_due": end_of_hour_slot(date, hour) < now}


def is_all_done(tasks: list[Task]) -> bool:
    return all(task["completed"] for task in tasks)


def display_state(completed: bool, past_due: bool) -> DisplayState:
    match (completed, past_due):
        case (True, _):
            return DisplayState.DONE
        case (False, True):
            return DisplayState.OVERDUE
        case _:
            return DisplayState.PENDING
