# SPDX-License-Identifier: MIT

import pendulum

from keeper.model.task import Task

# hour of day (0-23) -> tasks in display order
Schedule = dict[int, list[Task]]

# date -> schedule, kept in ascending date order
Keeper = dict[pendulum.Date, Schedule]
