# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable

from workboard.model.entity_id import EntityId
from workboard.model.task import Task
from workboard.model.work_package import Container
from workboard.service.flatten import flatten_work_packages

LOGGER = logging.getLogger(__name__)


class KanbanColumnError(ValueError):
    pass


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: EntityId) -> None:
        super().__init__(f"Task '{task_id}' not found")
        self.task_id = task_id


def change_task_status(
    containers: list[Container], task_id: EntityId, new_status: str
) -> list[Container]:
    """
    Return a copy of the tree with one task moved to another status.

    Raises:
        TaskNotFoundError: If no task has the given id
    """
    if not any(task["id"] == task_id for task in flatten_work_packages(containers)):
        raise TaskNotFoundError(task_id)

    def update(task: Task) -> None:
        if task["id"] == task_id:
            task["status"] = new_status

    return _update_tasks(containers, update)


def move_status(
    containers: list[Container], from_status: str, to_status: str
) -> list[Container]:
    """Return a copy of the tree with every task of from_status in to_status."""

    def update(task: Task) -> None:
        if task["status"] == from_status:
            task["status"] = to_status

    return _update_tasks(containers, update)


def rename_status(
    containers: list[Container], old_status: str, new_status: str
) -> list[Container]:
    return move_status(containers, old_status, new_status)


def add_column(columns: list[str], name: str) -> list[str]:
    name = name.strip()
    if not name:
        raise KanbanColumnError("Column name cannot be empty")
    if name in columns:
        raise KanbanColumnError(f"Column '{name}' already exists")
    return [*columns, name]


def rename_column(
    columns: list[str],
    containers: list[Container],
    old_name: str,
    new_name: str,
) -> tuple[list[str], list[Container]]:
    """
    Rename a column and carry the tasks in it over to the new name.

    Raises:
        KanbanColumnError: If the column does not exist or the new name is taken
    """
    new_name = new_name.strip()
    if old_name not in columns:
        raise KanbanColumnError(f"Column '{old_name}' does not exist")
    if not new_name:
        raise KanbanColumnError("Column name cannot be empty")
    if new_name != old_name and new_name in columns:
        raise KanbanColumnError(f"Column '{new_name}' already exists")

    renamed_columns = [new_name if column == old_name else column for column in columns]
    return renamed_columns, rename_status(containers, old_name, new_name)


def delete_column(
    columns: list[str], containers: list[Container], name: str
) -> list[str]:
    """
    Remove a column that no task is in.

    Raises:
        KanbanColumnError: If the column does not exist or still holds tasks
    """
    if name not in columns:
        raise KanbanColumnError(f"Column '{name}' does not exist")
    task_count = sum(
        1 for task in flatten_work_packages(containers) if task["status"] == name
    )
    if task_count > 0:
        raise KanbanColumnError(
            f"Column '{name}' still holds {task_count} task(s); move them first"
        )
    return [column for column in columns if column != name]


def _update_tasks(
    containers: list[Container], update: Callable[[Task], None]
) -> list[Container]:
    updated = deepcopy(containers)
    for container in updated:
        if container["type"] == "Project":
            for phase in container["phases"]:
                for task in phase["tasks"]:
                    update(task)
        elif container["type"] == "Demand":
            for task in container["tasks"]:
                update(task)
    LOGGER.debug("Rewrote task statuses across %d containers", len(updated))
    return updated
