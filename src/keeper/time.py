# SPDX-License-Identifier: MIT

from typing import cast

import pendulum


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return now_local().date()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("DD MMM YYYY")


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_from_iso_str(date: str) -> pendulum.Date:
    return cast(pendulum.Date, pendulum.parse(date, exact=True))


def date_to_cli_str(date: pendulum.Date) -> str:
    return date.format("DD-MM-YYYY")


def end_of_hour_slot(date: pendulum.Date, hour: int) -> pendulum.DateTime:
    """The last whole second of the hour slot, in local time."""
    return pendulum.datetime(
        date.year, date.month, date.day, hour, 59, 59, tz="local"
    )
