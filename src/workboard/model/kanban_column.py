# SPDX-License-Identifier: MIT

from typing import TypedDict

from workboard.model.task import Task


class KanbanColumn(TypedDict):
    status: str
    tasks: list[Task]
    task_count: int
    total_hours: float
