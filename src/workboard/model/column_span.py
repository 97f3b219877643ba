# SPDX-License-Identifier: MIT

from typing import TypedDict


class ColumnSpan(TypedDict):
    start_column_index: int
    end_column_index: int
