# SPDX-License-Identifier: MIT

from workboard.model.entity_id import UNASSIGNED_OWNER_ID
from workboard.model.team_member import TeamMember

UNASSIGNED_MEMBER_NAME = "unassigned"


def get_unassigned_member_template() -> TeamMember:
    return {"id": UNASSIGNED_OWNER_ID, "name": UNASSIGNED_MEMBER_NAME}
