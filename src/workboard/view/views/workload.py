# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from workboard.color import DEMAND_BAR_STYLE, get_priority_color
from workboard.model.date_column import DateColumn
from workboard.model.priority import PriorityDefinition
from workboard.model.task import Task
from workboard.model.workload import TaskPlacement, WorkloadLayout, WorkloadRow
from workboard.view.state import get_no_color
from workboard.view.views.header import header

MIN_COLUMN_WIDTH = 8


def workload_view(
    layout: WorkloadLayout,
    date_range: str,
    priorities: list[PriorityDefinition],
    left_column_width: int = 20,
    console: Optional[Console] = None,
) -> None:
    """
    Display the workload grid: one block per team member, one line per lane.

    Each task is drawn as a bar across the columns it spans. Tasks of the same
    member that share a day sit on different lanes.

    Args:
        layout: Columns and rows produced by build_workload
        date_range: Human readable description of the visible period
        priorities: Priority definitions used to colour bars
        left_column_width: Width of the member name column
        console: Console to print to (defaults to a new Console)
    """
    header("Workload", date_range)

    if console is None:
        console = Console()

    columns = layout["columns"]
    column_widths = _calculate_column_widths(
        columns, console.width - left_column_width
    )

    chart_elements: list[Text] = [
        _build_date_header(columns, column_widths, left_column_width),
        Text("─" * (left_column_width + sum(column_widths)), style="dim"),
    ]

    for row in layout["rows"]:
        chart_elements.extend(
            _build_member_rows(row, column_widths, priorities, left_column_width)
        )
        chart_elements.append(
            Text("┄" * (left_column_width + sum(column_widths)), style="dim")
        )

    console.print(Padding(Group(*chart_elements), (1, 0, 1, 0)))


def lane_segments(
    placements: list[TaskPlacement], lane_index: int
) -> tuple[list[TaskPlacement], int]:
    """
    Pick the placements drawn on one lane line.

    Placements are ordered by start column. A placement whose columns are
    already taken on this line (two tasks on different days of one week or
    month column) is left out and counted as hidden.

    Returns:
        The drawable placements and the number of hidden ones
    """
    lane_placements = sorted(
        (p for p in placements if p["lane"]["lane_index"] == lane_index),
        key=lambda p: p["span"]["start_column_index"],
    )
    drawn: list[TaskPlacement] = []
    hidden = 0
    next_free_column = 0
    for placement in lane_placements:
        if placement["span"]["start_column_index"] < next_free_column:
            hidden += 1
            continue
        drawn.append(placement)
        next_free_column = placement["span"]["end_column_index"] + 1
    return drawn, hidden


def task_label(task: Task) -> str:
    label = task["title"]
    if task["project_id"]:
        label = f"[{task['project_id']}] {label}"
    if task["hours"]:
        label = f"{label} ({task['hours']:g}h)"
    return label


def _calculate_column_widths(
    columns: list[DateColumn], available_width: int
) -> list[int]:
    if not columns:
        return []
    even_width = max(MIN_COLUMN_WIDTH, available_width // len(columns))
    return [even_width for _ in columns]


def _build_date_header(
    columns: list[DateColumn], column_widths: list[int], left_column_width: int
) -> Text:
    row = Text(" " * left_column_width)
    for column, width in zip(columns, column_widths):
        row.append(_fit(column["label"], width - 1) + " ", style="bold")
    return row


def _build_member_rows(
    row: WorkloadRow,
    column_widths: list[int],
    priorities: list[PriorityDefinition],
    left_column_width: int,
) -> list[Text]:
    lines: list[Text] = []
    for lane_index in range(row["lane_count"]):
        name = row["member"]["name"] if lane_index == 0 else ""
        line = Text(_fit(name, left_column_width - 1) + " ", style="bold cyan")

        drawn, hidden = lane_segments(row["placements"], lane_index)
        cursor = 0
        for placement in drawn:
            start = placement["span"]["start_column_index"]
            end = placement["span"]["end_column_index"]
            gap_width = sum(column_widths[cursor:start])
            if gap_width:
                line.append(" " * gap_width)
            bar_width = sum(column_widths[start : end + 1])
            line.append(
                _fit(task_label(placement["task"]), bar_width - 1),
                style=_bar_style(placement["task"], priorities),
            )
            line.append(" ")
            cursor = end + 1

        trailing_width = sum(column_widths[cursor:])
        if trailing_width:
            line.append(" " * trailing_width)
        if hidden:
            line.append(f" +{hidden}", style="dim")
        lines.append(line)
    return lines


def _bar_style(task: Task, priorities: list[PriorityDefinition]) -> str:
    if get_no_color():
        return "reverse"
    color = get_priority_color(task["priority"], priorities)
    # Demand tasks keep the priority colour on a muted background
    if task["is_demand"]:
        return f"bold {color} {DEMAND_BAR_STYLE}"
    return f"bold white on {color}"


def _fit(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) > width:
        if width <= 3:
            return text[:width]
        return text[: width - 3] + "..."
    return text.ljust(width)
