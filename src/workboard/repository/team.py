# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from workboard import configuration
from workboard.model.entity_id import UNASSIGNED_OWNER_ID, EntityId
from workboard.model.team_member import TeamMember
from workboard.template.team import get_unassigned_member_template

LOGGER = logging.getLogger(__name__)


class TeamRepository:
    def __init__(self) -> None:
        self._members: Optional[list[TeamMember]] = None
        self.is_dirty = False

    @property
    def members(self) -> list[TeamMember]:
        if self._members is None:
            self.__load_data()
        if self._members is None:
            raise ValueError()
        return self._members

    def __load_data(self) -> None:
        team_data = load(configuration.DATA_TEAM_PATH.read_text(), Loader=Loader)
        if team_data is None or "team" not in team_data:
            raise ValueError(f"{configuration.DATA_TEAM_PATH} has no 'team' list")

        self._members = [
            {"id": str(member["id"]), "name": str(member["name"])}
            for member in team_data["team"] or []
        ]

        if not any(member["id"] == UNASSIGNED_OWNER_ID for member in self._members):
            LOGGER.warning(
                "%s has no '%s' member, adding it",
                configuration.DATA_TEAM_PATH,
                UNASSIGNED_OWNER_ID,
            )
            self._members.append(get_unassigned_member_template())
            self.is_dirty = True

    def __save_data(self, members: list[TeamMember]) -> None:
        configuration.DATA_TEAM_PATH.write_text(
            dump({"team": members}, Dumper=Dumper, allow_unicode=True, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._members is not None and self.is_dirty:
            self.__save_data(self._members)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._members = None
        self.is_dirty = False

    def get_all_members(self) -> list[TeamMember]:
        return deepcopy(self.members)

    def get_member(self, id: EntityId) -> Optional[TeamMember]:
        member = next((member for member in self.members if member["id"] == id), None)
        return deepcopy(member)

    def add_member(self, id: EntityId, name: str) -> None:
        if any(member["id"] == id for member in self.members):
            raise ValueError(f"Team member '{id}' already exists")
        self.is_dirty = True
        self.members.append({"id": id, "name": name})

    def remove_member(self, id: EntityId) -> None:
        if id == UNASSIGNED_OWNER_ID:
            raise ValueError(f"The '{UNASSIGNED_OWNER_ID}' member cannot be removed")
        if not any(member["id"] == id for member in self.members):
            raise ValueError(f"Team member '{id}' not found")
        self.is_dirty = True
        self._members = [member for member in self.members if member["id"] != id]


TEAM_REPO = TeamRepository()
