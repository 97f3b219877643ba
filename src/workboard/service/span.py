# SPDX-License-Identifier: MIT

from typing import Optional

from workboard.model.column_span import ColumnSpan
from workboard.model.date_column import DateColumn
from workboard.model.task import Task
from workboard.time import day_number


def project_task_span(task: Task, columns: list[DateColumn]) -> Optional[ColumnSpan]:
    """
    Find the inclusive range of columns a task occupies once clipped to the
    visible window.

    Args:
        task: The task to place
        columns: Ordered date columns making up the visible window

    Returns:
        The column span, or None when the task has no visible intersection
    """
    if not columns:
        return None

    view_start = day_number(columns[0]["start_date"])
    view_end = day_number(columns[-1]["end_date"])
    task_start = day_number(task["start_date"])
    task_end = day_number(task["end_date"])

    if task_end < view_start or task_start > view_end:
        return None

    visible_start = max(task_start, view_start)
    visible_end = min(task_end, view_end)

    start_column_index = next(
        (
            index
            for index, column in enumerate(columns)
            if day_number(column["end_date"]) >= visible_start
        ),
        None,
    )
    end_column_index = next(
        (
            index
            for index in range(len(columns) - 1, -1, -1)
            if day_number(columns[index]["start_date"]) <= visible_end
        ),
        None,
    )
    if start_column_index is None or end_column_index is None:
        return None

    # Gapped columns can leave the clipped start past the last matching column
    if start_column_index > end_column_index:
        start_column_index = end_column_index

    if end_column_index - start_column_index + 1 <= 0:
        return None

    return {
        "start_column_index": start_column_index,
        "end_column_index": end_column_index,
    }


def is_task_visible(task: Task, columns: list[DateColumn]) -> bool:
    return project_task_span(task, columns) is not None
