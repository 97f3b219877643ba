# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

Priority: TypeAlias = str


class PriorityDefinition(TypedDict):
    key: Priority
    name: str
    color: str
