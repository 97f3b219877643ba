# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from workboard.color import get_priority_color
from workboard.model.priority import PriorityDefinition
from workboard.model.task import Task
from workboard.model.team_member import TeamMember
from workboard.time import date_to_display_str
from workboard.view.state import get_no_color
from workboard.view.views.header import header


def tasks_view(
    tasks: list[Task],
    members: list[TeamMember],
    priorities: list[PriorityDefinition],
    locale: str = "en",
    console: Optional[Console] = None,
) -> None:
    header("Tasks")

    if console is None:
        console = Console()

    member_names = {member["id"]: member["name"] for member in members}

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("id")
    tasks_table.add_column("card")
    tasks_table.add_column("responsible")
    tasks_table.add_column("dates")
    tasks_table.add_column("hours", justify="right")
    tasks_table.add_column("priority")
    tasks_table.add_column("status")

    for task in tasks:
        card = task["title"]
        if task["project_id"]:
            card = f"[{task['project_id']}] {card}"
        priority = task["priority"] or ""
        if priority and not get_no_color():
            color = get_priority_color(priority, priorities)
            priority = f"[{color}]{priority}[/{color}]"

        tasks_table.add_row(
            task["id"],
            escape(card),
            escape(member_names.get(task["owner_id"], task["owner_id"])),
            f"{date_to_display_str(task['start_date'], locale)} - "
            f"{date_to_display_str(task['end_date'], locale)}",
            f"{task['hours']:g}",
            priority,
            escape(task["status"]),
        )

    console.print(tasks_table)
