# SPDX-License-Identifier: MIT

from typing import TypedDict

from workboard.model.column_span import ColumnSpan
from workboard.model.date_column import DateColumn
from workboard.model.lane_assignment import LaneAssignment
from workboard.model.task import Task
from workboard.model.team_member import TeamMember


class TaskPlacement(TypedDict):
    task: Task
    span: ColumnSpan
    lane: LaneAssignment


class WorkloadRow(TypedDict):
    member: TeamMember
    lane_count: int
    placements: list[TaskPlacement]


class WorkloadLayout(TypedDict):
    columns: list[DateColumn]
    rows: list[WorkloadRow]
