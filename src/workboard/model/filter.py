# SPDX-License-Identifier: MIT

from typing import TypedDict


class TaskFilter(TypedDict):
    card_names: list[str]
    responsibles: list[str]
    priorities: list[str]
