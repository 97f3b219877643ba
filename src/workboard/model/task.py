# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from workboard.model.entity_id import EntityId


class Task(TypedDict):
    id: EntityId
    title: str
    project_id: str
    phase_id: Optional[EntityId]
    hours: float
    owner_id: EntityId
    start_date: pendulum.Date
    end_date: pendulum.Date
    priority: Optional[str]
    status: str
    is_demand: bool
    created_at: pendulum.Date
