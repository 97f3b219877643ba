# SPDX-License-Identifier: MIT

from workboard.model.task import Task
from workboard.time import day_number


class InvalidTaskDatesError(ValueError):
    def __init__(self, task_id: str, start_date: str, end_date: str) -> None:
        super().__init__(
            f"Task '{task_id}' ends ({end_date}) before it starts ({start_date})"
        )
        self.task_id = task_id


def validate_task_dates(task: Task) -> Task:
    """
    Reject a task whose end date falls before its start date.

    The layout engine does not check ordering itself, so data is validated
    here, where it enters the application.

    Raises:
        InvalidTaskDatesError: If start_date is after end_date
    """
    if day_number(task["start_date"]) > day_number(task["end_date"]):
        raise InvalidTaskDatesError(
            task["id"],
            task["start_date"].to_date_string(),
            task["end_date"].to_date_string(),
        )
    return task
