# SPDX-License-Identifier: MIT

import logging

from workboard.model.entity_id import EntityId, normalize_owner_id
from workboard.model.lane_assignment import LaneAssignment
from workboard.model.task import Task
from workboard.time import day_number

LOGGER = logging.getLogger(__name__)


def pack_lanes(tasks: list[Task]) -> dict[EntityId, LaneAssignment]:
    """
    Stack one owner's tasks into lanes so no two tasks in a lane share a day.

    Tasks are placed greedily by start day, longer tasks first on the same
    start day, each into the lowest lane that is free before the task starts.
    The greedy order makes the lane count equal to the largest number of
    tasks active on any single day.

    Args:
        tasks: All tasks of a single owner, independent of the visible window

    Returns:
        Mapping of task id to its lane index and the owner's lane count
    """
    ordered_tasks = sorted(
        tasks,
        key=lambda task: (
            day_number(task["start_date"]),
            -(day_number(task["end_date"]) - day_number(task["start_date"])),
        ),
    )

    # Day number of the last end placed in each lane
    lane_watermarks: list[int] = []
    lane_indexes: dict[EntityId, int] = {}

    for task in ordered_tasks:
        task_start = day_number(task["start_date"])
        task_end = day_number(task["end_date"])

        lane_index = next(
            (
                index
                for index, watermark in enumerate(lane_watermarks)
                if watermark < task_start
            ),
            None,
        )
        if lane_index is None:
            lane_watermarks.append(task_end)
            lane_index = len(lane_watermarks) - 1
        else:
            lane_watermarks[lane_index] = task_end

        lane_indexes[task["id"]] = lane_index

    lane_count = max(1, len(lane_watermarks))
    return {
        task_id: {"lane_index": lane_index, "lane_count": lane_count}
        for task_id, lane_index in lane_indexes.items()
    }


def pack_lanes_by_owner(
    tasks: list[Task],
) -> dict[EntityId, dict[EntityId, LaneAssignment]]:
    """Group tasks by owner, unassigned included, and pack each group."""
    tasks_by_owner: dict[EntityId, list[Task]] = {}
    for task in tasks:
        owner_id = normalize_owner_id(task.get("owner_id"))
        tasks_by_owner.setdefault(owner_id, []).append(task)

    lanes_by_owner: dict[EntityId, dict[EntityId, LaneAssignment]] = {}
    for owner_id, owner_tasks in tasks_by_owner.items():
        lanes_by_owner[owner_id] = pack_lanes(owner_tasks)
        LOGGER.debug(
            "Packed %d tasks for %s into %d lanes",
            len(owner_tasks),
            owner_id,
            lane_count_for(lanes_by_owner[owner_id]),
        )
    return lanes_by_owner


def lane_count_for(assignments: dict[EntityId, LaneAssignment]) -> int:
    """Lane count of one owner's assignments, 1 when the owner has no tasks."""
    for assignment in assignments.values():
        return assignment["lane_count"]
    return 1
