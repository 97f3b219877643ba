# SPDX-License-Identifier: MIT

from typing import Optional

from workboard.model.priority import Priority, PriorityDefinition

# Colour for tasks without a known priority
DEFAULT_PRIORITY_COLOR = "dark_orange"

# Bar background for tasks that come from a demand
DEMAND_BAR_STYLE = "on grey30"

AVATAR_COLORS = [
    "purple",
    "green",
    "blue",
    "red",
    "yellow",
    "deep_pink",
    "slate_blue1",
    "dark_cyan",
]


def get_priority_color(
    priority: Optional[Priority], priorities: list[PriorityDefinition]
) -> str:
    """Return the configured Rich colour of a priority key."""
    if not priority:
        return DEFAULT_PRIORITY_COLOR
    definition = next(
        (p for p in priorities if p["key"].lower() == priority.lower()), None
    )
    if definition is None:
        return DEFAULT_PRIORITY_COLOR
    return definition["color"]


def get_color_for_id(id: str) -> str:
    """Return a stable avatar colour for a member id.

    Uses the 32-bit string hash (h * 31 + c), so a member keeps its colour
    across runs.
    """
    if len(id) == 0:
        return AVATAR_COLORS[0]
    hash_value = 0
    for char in id:
        hash_value = (ord(char) + ((hash_value << 5) - hash_value)) & 0xFFFFFFFF
    if hash_value >= 0x80000000:
        hash_value -= 0x100000000
    return AVATAR_COLORS[abs(hash_value) % len(AVATAR_COLORS)]


def get_initials(name: str) -> str:
    return name[:1].upper()
