# SPDX-License-Identifier: MIT

from typing import TypedDict

from workboard.model.entity_id import EntityId


class TeamMember(TypedDict):
    id: EntityId
    name: str
