# SPDX-License-Identifier: MIT

import logging

from workboard import time
from workboard.model.entity_id import UNASSIGNED_OWNER_ID, normalize_owner_id
from workboard.model.granularity_type import GranularityType
from workboard.model.priority import Priority
from workboard.model.sort_key import ResponsibleSortOrder
from workboard.model.task import Task
from workboard.model.team_member import TeamMember
from workboard.model.workload import TaskPlacement, WorkloadLayout, WorkloadRow
from workboard.query.sort import sort_items
from workboard.service.lane import lane_count_for, pack_lanes_by_owner
from workboard.service.partition import partition_date_columns
from workboard.service.span import project_task_span

LOGGER = logging.getLogger(__name__)

PRIORITY_OPTIONS: list[Priority] = ["urgent", "high", "medium", "low"]


def order_members(
    members: list[TeamMember], order: ResponsibleSortOrder = "asc"
) -> list[TeamMember]:
    """Order members by name, keeping the unassigned member last either way."""
    assigned = [member for member in members if member["id"] != UNASSIGNED_OWNER_ID]
    unassigned = [member for member in members if member["id"] == UNASSIGNED_OWNER_ID]
    assigned = sort_items(
        assigned, [(lambda member: member["name"].casefold(), order == "desc")]
    )
    return assigned + unassigned


def card_name_options(tasks: list[Task]) -> list[str]:
    titles: set[str] = set()
    for task in tasks:
        titles.add(task["title"])
        if task["project_id"]:
            titles.add(task["project_id"])
    return sorted(titles)


def responsible_options(tasks: list[Task], members: list[TeamMember]) -> list[str]:
    member_names = {member["id"]: member["name"] for member in members}
    responsibles: set[str] = set()
    for task in tasks:
        name = member_names.get(normalize_owner_id(task.get("owner_id")))
        if name:
            responsibles.add(name)
    return sorted(responsibles)


def build_workload(
    tasks: list[Task],
    members: list[TeamMember],
    granularity: GranularityType,
    anchor: time.DayValue,
    locale: str = time.DEFAULT_LOCALE,
    order: ResponsibleSortOrder = "asc",
) -> WorkloadLayout:
    """
    Lay out the workload grid for the period around anchor.

    Lanes are packed over every task of an owner, not only the visible ones,
    so moving the window never reshuffles stacking. Tasks outside the window
    are left out of the placements.

    Args:
        tasks: Flat list of tasks to lay out
        members: Team members, one row each; owners missing from this list
            still get a row so that none of their tasks are dropped
        granularity: "day", "week", or "month"
        anchor: Any date inside the period to display
        locale: Locale for column labels
        order: Name order of the member rows

    Returns:
        The date columns and one row per member with its placed tasks
    """
    columns = partition_date_columns(granularity, anchor, locale)
    lanes_by_owner = pack_lanes_by_owner(tasks)

    row_members = list(members)
    known_ids = {member["id"] for member in members}
    for owner_id in lanes_by_owner:
        if owner_id not in known_ids:
            LOGGER.warning("Tasks reference unknown team member '%s'", owner_id)
            row_members.append({"id": owner_id, "name": owner_id})
            known_ids.add(owner_id)
    if UNASSIGNED_OWNER_ID not in known_ids:
        row_members.append({"id": UNASSIGNED_OWNER_ID, "name": UNASSIGNED_OWNER_ID})

    rows: list[WorkloadRow] = []
    for member in order_members(row_members, order):
        owner_lanes = lanes_by_owner.get(member["id"], {})
        placements: list[TaskPlacement] = []
        for task in tasks:
            if normalize_owner_id(task.get("owner_id")) != member["id"]:
                continue
            span = project_task_span(task, columns)
            if span is None:
                continue
            placements.append(
                {"task": task, "span": span, "lane": owner_lanes[task["id"]]}
            )
        rows.append(
            {
                "member": member,
                "lane_count": lane_count_for(owner_lanes),
                "placements": placements,
            }
        )

    return {"columns": columns, "rows": rows}
