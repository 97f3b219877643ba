# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional

from workboard import time
from workboard.model.entity_id import normalize_owner_id
from workboard.model.kanban_column import KanbanColumn
from workboard.model.sort_key import SortKey
from workboard.model.task import Task
from workboard.model.team_member import TeamMember
from workboard.query.sort import sort_items
from workboard.service.workload import PRIORITY_OPTIONS


def kanban_week_tasks(tasks: list[Task], anchor: time.DayValue) -> list[Task]:
    """Tasks active on any day from Monday to Sunday of anchor's week."""
    week_start = time.start_of_week(anchor)
    week_end = week_start.add(days=6)
    week_start_day = time.day_number(week_start)
    week_end_day = time.day_number(week_end)
    return [
        task
        for task in tasks
        if time.day_number(task["start_date"]) <= week_end_day
        and time.day_number(task["end_date"]) >= week_start_day
    ]


def sort_tasks(
    tasks: list[Task], sort_key: SortKey, members: list[TeamMember]
) -> list[Task]:
    """
    Order the cards of a column.

    Priority sorts urgent first and puts tasks without a known priority last;
    responsible sorts by owner name; the date keys sort oldest first. Ties
    fall back to the title.
    """
    member_names = {member["id"]: member["name"] for member in members}

    keys: dict[SortKey, Callable[[Task], Optional[Any]]] = {
        "priority": _priority_rank,
        "title": lambda task: task["title"].casefold(),
        "responsible": lambda task: member_names.get(
            normalize_owner_id(task.get("owner_id")), ""
        ).casefold(),
        "start_date": lambda task: time.day_number(task["start_date"]),
        "end_date": lambda task: time.day_number(task["end_date"]),
        "created_at": lambda task: time.day_number(task["created_at"]),
    }

    instructions = [(keys[sort_key], False)]
    if sort_key != "title":
        instructions.append((keys["title"], False))
    return sort_items(tasks, instructions)


def build_kanban_columns(
    tasks: list[Task],
    statuses: list[str],
    sort_key: SortKey,
    members: list[TeamMember],
) -> list[KanbanColumn]:
    """Group tasks by status into one column per configured status."""
    columns: list[KanbanColumn] = []
    for status in statuses:
        column_tasks = sort_tasks(
            [task for task in tasks if task["status"] == status], sort_key, members
        )
        columns.append(
            {
                "status": status,
                "tasks": column_tasks,
                "task_count": len(column_tasks),
                "total_hours": sum(task["hours"] for task in column_tasks),
            }
        )
    return columns


def _priority_rank(task: Task) -> Optional[int]:
    priority = task["priority"]
    if priority is None or priority.lower() not in PRIORITY_OPTIONS:
        return None
    return PRIORITY_OPTIONS.index(priority.lower())
