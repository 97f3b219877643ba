# SPDX-License-Identifier: MIT

from workboard.repository.configuration import CONFIGURATION_REPO
from workboard.repository.team import TEAM_REPO
from workboard.repository.work_package import WORK_PACKAGE_REPO
from workboard.service.workload import PRIORITY_OPTIONS, card_name_options


def complete_status(incomplete: str) -> list[str]:
    """Return list of configured kanban columns for shell completion."""
    columns = CONFIGURATION_REPO.get_config()["kanban_columns"]
    return [column for column in columns if column.startswith(incomplete)]


def complete_responsible(incomplete: str) -> list[str]:
    """Return list of team member names for shell completion."""
    return [
        member["name"]
        for member in TEAM_REPO.get_all_members()
        if member["name"].startswith(incomplete)
    ]


def complete_priority(incomplete: str) -> list[str]:
    return [
        priority for priority in PRIORITY_OPTIONS if priority.startswith(incomplete)
    ]


def complete_card_name(incomplete: str) -> list[str]:
    """Return list of task titles and project ids for shell completion."""
    options = card_name_options(WORK_PACKAGE_REPO.get_all_tasks())
    return [option for option in options if option.startswith(incomplete)]


def complete_task_id(incomplete: str) -> list[str]:
    return [
        task["id"]
        for task in WORK_PACKAGE_REPO.get_all_tasks()
        if task["id"].startswith(incomplete)
    ]
