# SPDX-License-Identifier: MIT

import pendulum
import structlog

from keeper.model.keeper import Keeper, Schedule
from keeper.model.task import Task
from keeper.template.task import get_task_template

logger = structlog.get_logger(__name__)


class ScheduleError(Exception):
    pass


class AbsentDayError(ScheduleError):
    def __init__(self, date: pendulum.Date) -> None:
        super().__init__(f"no tasks scheduled on {date.to_date_string()}")
        self.date = date


class AbsentSlotError(ScheduleError):
    def __init__(self, date: pendulum.Date, hour: int) -> None:
        super().__init__(f"no tasks at hour [{hour}] on {date.to_date_string()}")
        self.date = date
        self.hour = hour


class IndexOutOfRangeError(ScheduleError):
    def __init__(self, hour: int, index: int, length: int) -> None:
        super().__init__(
            f"index {index} is out of range for hour [{hour}] ({length} tasks)"
        )
        self.hour = hour
        self.index = index
        self.length = length


def add_task(keeper: Keeper, date: pendulum.Date, hour: int, description: str) -> Task:
    task = get_task_template()
    task["description"] = description

    if date not in keeper:
        keeper[date] = {}
        _sort_keys(keeper)
    schedule = keeper[date]
    if hour not in schedule:
        schedule[hour] = []
        _sort_keys(schedule)
    schedule[hour].append(task)

    logger.debug("task added", date=date.to_date_string(), hour=hour)
    return task


def mark_task(keeper: Keeper, date: pendulum.Date, hour: int, index: int) -> bool:
    """
    Mark the task at (date, hour, index) as completed.

    Returns whether a task was found. A missing task is not an error.
    """
    tasks = keeper.get(date, {}).get(hour, [])
    if not 0 <= index < len(tasks):
        logger.debug(
            "no task to mark", date=date.to_date_string(), hour=hour, index=index
        )
        return False
    tasks[index]["completed"] = True
    return True


def move_task(
    keeper: Keeper, date: pendulum.Date, old_hour: int, index: int, new_hour: int
) -> Task:
    """
    Move a task to another hour of the same day.

    Raises:
        AbsentDayError: nothing is scheduled on the date
        AbsentSlotError: nothing is scheduled at old_hour
        IndexOutOfRangeError: old_hour has no task at index

    The keeper is only modified once every check has passed.
    """
    schedule = keeper.get(date)
    if schedule is None:
        raise AbsentDayError(date)
    old_slot = schedule.get(old_hour)
    if not old_slot:
        raise AbsentSlotError(date, old_hour)
    if not 0 <= index < len(old_slot):
        raise IndexOutOfRangeError(old_hour, index, len(old_slot))

    task = old_slot.pop(index)
    if len(old_slot) == 0:
        del schedule[old_hour]

    if new_hour not in schedule:
        schedule[new_hour] = []
        _sort_keys(schedule)
    schedule[new_hour].append(task)

    logger.debug(
        "task moved",
        date=date.to_date_string(),
        old_hour=old_hour,
        new_hour=new_hour,
    )
    return task


def normalize(keeper: Keeper) -> None:
    """Stable sort every slot so incomplete tasks come before completed ones."""
    for schedule in keeper.values():
        for tasks in schedule.values():
            tasks.sort(key=lambda task: task["completed"])


def _sort_keys(mapping: Keeper | Schedule) -> None:
    items = sorted(mapping.items())
    mapping.clear()
    mapping.update(items)  # type: ignore[arg-type]
