# SPDX-License-Identifier: MIT

from keeper.model.task import Task


def get_task_template() -> Task:
    return {
        "completed": False,
        "description": "",
    }
