# SPDX-License-Identifier: MIT

from typing import Optional

from workboard.model.entity_id import normalize_owner_id
from workboard.model.filter import TaskFilter
from workboard.model.task import Task
from workboard.model.team_member import TeamMember


def empty_filter() -> TaskFilter:
    return {"card_names": [], "responsibles": [], "priorities": []}


def generate_filter(
    card_names: Optional[list[str]] = None,
    responsibles: Optional[list[str]] = None,
    priorities: Optional[list[str]] = None,
) -> TaskFilter:
    return {
        "card_names": list(card_names or []),
        "responsibles": list(responsibles or []),
        "priorities": [priority.lower() for priority in priorities or []],
    }


def is_filter_empty(task_filter: TaskFilter) -> bool:
    return (
        len(task_filter["card_names"]) == 0
        and len(task_filter["responsibles"]) == 0
        and len(task_filter["priorities"]) == 0
    )


def filter_tasks(
    tasks: list[Task], members: list[TeamMember], task_filter: TaskFilter
) -> list[Task]:
    """
    Keep the tasks matching every non-empty part of the filter.

    A card name matches either the task title or its project id; a responsible
    matches the owning member's name; a priority matches the task's priority
    key. Tasks without a priority never match a priority filter.
    """
    if is_filter_empty(task_filter):
        return list(tasks)

    member_names = {member["id"]: member["name"] for member in members}

    def matches(task: Task) -> bool:
        card_names = task_filter["card_names"]
        card_name_match = (
            len(card_names) == 0
            or task["title"] in card_names
            or task["project_id"] in card_names
        )

        owner_id = normalize_owner_id(task.get("owner_id"))
        responsible_name = member_names.get(owner_id, "")
        responsible_match = (
            len(task_filter["responsibles"]) == 0
            or responsible_name in task_filter["responsibles"]
        )

        priority_match = len(task_filter["priorities"]) == 0 or (
            task["priority"] is not None
            and task["priority"].lower() in task_filter["priorities"]
        )

        return card_name_match and responsible_match and priority_match

    return [task for task in tasks if matches(task)]
