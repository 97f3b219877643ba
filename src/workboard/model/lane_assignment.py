# SPDX-License-Identifier: MIT

from typing import TypedDict


class LaneAssignment(TypedDict):
    lane_index: int
    lane_count: int
