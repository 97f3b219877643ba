# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from workboard.model.entity_id import EntityId
from workboard.model.task import Task

WorkPackageType = Literal["Project", "Phase", "Demand", "Task"]


class WorkPackageBase(TypedDict):
    id: EntityId
    title: str
    start_date: pendulum.Date
    end_date: pendulum.Date
    created_at: pendulum.Date


class PhaseWorkPackage(WorkPackageBase):
    type: Literal["Phase"]
    project_id: EntityId
    tasks: list[Task]


class ProjectWorkPackage(WorkPackageBase):
    type: Literal["Project"]
    phases: list[PhaseWorkPackage]


class DemandWorkPackage(WorkPackageBase):
    type: Literal["Demand"]
    tasks: list[Task]


Container = ProjectWorkPackage | DemandWorkPackage


class TaskContext(TypedDict):
    project_title: str
    phase_title: str
    phase_id: Optional[EntityId]
