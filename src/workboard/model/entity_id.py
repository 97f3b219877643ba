# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str

UNASSIGNED_OWNER_ID: EntityId = "unassigned"


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def normalize_owner_id(owner_id: EntityId | None) -> EntityId:
    if owner_id is None or owner_id == "":
        return UNASSIGNED_OWNER_ID
    return owner_id
