# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from workboard.model.entity_id import EntityId, normalize_owner_id
from workboard.model.task import Task
from workboard.model.work_package import Container, TaskContext

DEMAND_PHASE_TITLE = "tasks"
UNKNOWN_TITLE = "N/A"


def flatten_work_packages(containers: list[Container]) -> list[Task]:
    """
    Collect every task of a Project -> Phase -> Task or Demand -> Task tree.

    Tasks are copied, flagged with whether they came from a demand, and get
    their owner normalized so a missing owner reads as unassigned.

    Args:
        containers: Projects and demands in display order

    Returns:
        Flat list of tasks in container order
    """
    tasks: list[Task] = []
    for container in containers:
        if container["type"] == "Project":
            for phase in container["phases"]:
                for task in phase["tasks"]:
                    tasks.append(_flattened_task(task, is_demand=False))
        elif container["type"] == "Demand":
            for task in container["tasks"]:
                tasks.append(_flattened_task(task, is_demand=True))
    return tasks


def find_task_context(containers: list[Container], task_id: EntityId) -> TaskContext:
    """Titles of the project/demand and phase that hold the given task."""
    for container in containers:
        if container["type"] == "Project":
            for phase in container["phases"]:
                if any(task["id"] == task_id for task in phase["tasks"]):
                    return {
                        "project_title": container["title"] or UNKNOWN_TITLE,
                        "phase_title": phase["title"] or UNKNOWN_TITLE,
                        "phase_id": phase["id"],
                    }
        elif container["type"] == "Demand":
            if any(task["id"] == task_id for task in container["tasks"]):
                return {
                    "project_title": container["title"] or UNKNOWN_TITLE,
                    "phase_title": DEMAND_PHASE_TITLE,
                    "phase_id": None,
                }
    return {
        "project_title": UNKNOWN_TITLE,
        "phase_title": UNKNOWN_TITLE,
        "phase_id": None,
    }


def find_task(containers: list[Container], task_id: EntityId) -> Optional[Task]:
    return next(
        (task for task in flatten_work_packages(containers) if task["id"] == task_id),
        None,
    )


def _flattened_task(task: Task, is_demand: bool) -> Task:
    flattened = deepcopy(task)
    flattened["is_demand"] = is_demand
    flattened["owner_id"] = normalize_owner_id(flattened.get("owner_id"))
    return flattened
