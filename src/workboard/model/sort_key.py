# SPDX-License-Identifier: MIT

from typing import Literal

SortKey = Literal[
    "priority", "title", "responsible", "start_date", "end_date", "created_at"
]

SORT_KEYS: tuple[SortKey, ...] = (
    "priority",
    "title",
    "responsible",
    "start_date",
    "end_date",
    "created_at",
)

ResponsibleSortOrder = Literal["asc", "desc"]
