# SPDX-License-Identifier: MIT

from typing import Optional

from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from workboard.color import get_color_for_id, get_initials, get_priority_color
from workboard.model.entity_id import UNASSIGNED_OWNER_ID
from workboard.model.kanban_column import KanbanColumn
from workboard.model.priority import PriorityDefinition
from workboard.model.task import Task
from workboard.model.team_member import TeamMember
from workboard.view.state import get_no_color
from workboard.view.views.header import header
from workboard.view.views.workload import task_label


def kanban_view(
    columns: list[KanbanColumn],
    date_range: str,
    members: list[TeamMember],
    priorities: list[PriorityDefinition],
    column_width: int = 32,
    console: Optional[Console] = None,
) -> None:
    """
    Display one panel per status column with its cards.

    Args:
        columns: Kanban columns produced by build_kanban_columns
        date_range: Human readable description of the displayed week
        members: Team members, used for owner initials
        priorities: Priority definitions used to colour cards
        column_width: Width of each column panel
        console: Console to print to (defaults to a new Console)
    """
    header("Kanban", date_range)

    if console is None:
        console = Console()

    if not columns:
        console.print("\n[dim]No kanban columns configured[/dim]\n")
        return

    member_by_id = {member["id"]: member for member in members}
    panels = [
        Panel(
            _render_cards(column["tasks"], member_by_id, priorities),
            title=f"[bold]{escape(column['status'])}[/bold]",
            subtitle=f"{column['task_count']} / {column['total_hours']:g}h",
            width=column_width,
        )
        for column in columns
    ]
    console.print(Columns(panels, equal=True, expand=False))


def _render_cards(
    tasks: list[Task],
    member_by_id: dict[str, TeamMember],
    priorities: list[PriorityDefinition],
) -> Text:
    cards = Text()
    if not tasks:
        cards.append("no tasks", style="dim")
        return cards

    for index, task in enumerate(tasks):
        if index > 0:
            cards.append("\n")
        color = get_priority_color(task["priority"], priorities)
        cards.append("▌", style="" if get_no_color() else color)
        cards.append(task_label(task))

        owner = member_by_id.get(task["owner_id"])
        if owner is not None and owner["id"] != UNASSIGNED_OWNER_ID:
            avatar_style = f"bold white on {get_color_for_id(owner['id'])}"
            cards.append(" ")
            cards.append(
                f" {get_initials(owner['name'])} ",
                style="" if get_no_color() else avatar_style,
            )
    return cards
