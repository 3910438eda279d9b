# SPDX-License-Identifier: MIT

from typing import TypedDict


class Task(TypedDict):
    completed: bool
    description: str
