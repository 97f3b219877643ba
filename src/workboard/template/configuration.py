# SPDX-License-Identifier: MIT

from workboard.configuration import Configuration
from workboard.model.priority import PriorityDefinition


def get_priorities_template() -> list[PriorityDefinition]:
    return [
        {"key": "urgent", "name": "Urgent", "color": "purple"},
        {"key": "high", "name": "High", "color": "red"},
        {"key": "medium", "name": "Medium", "color": "yellow"},
        {"key": "low", "name": "Low", "color": "blue"},
    ]


def get_configuration_template() -> Configuration:
    return {
        "locale": "en",
        "default_granularity": "day",
        "kanban_columns": ["toDo", "sprint", "doing", "done"],
        "default_kanban_sort": "priority",
        "responsible_sort_order": "asc",
        "priorities": get_priorities_template(),
        "data_path": None,
    }
