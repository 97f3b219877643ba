# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from workboard.query.filter import filter_tasks, generate_filter
from workboard.query.sort import sort_items
from workboard.repository.configuration import CONFIGURATION_REPO
from workboard.repository.team import TEAM_REPO
from workboard.repository.work_package import WORK_PACKAGE_REPO
from workboard.service.flatten import find_task, find_task_context
from workboard.service.status import TaskNotFoundError, change_task_status
from workboard.terminal.completion import (
    complete_card_name,
    complete_priority,
    complete_responsible,
    complete_status,
    complete_task_id,
)
from workboard.terminal.custom_typer import AliasedTyperGroup
from workboard.terminal.load import load_tasks, load_work_packages
from workboard.terminal.validate import validate_priorities
from workboard.time import day_number, format_date
from workboard.view.views.task import tasks_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_tasks(
    statuses: Annotated[
        Optional[list[str]],
        typer.Option(
            "--status",
            "-s",
            help="Show tasks in this column. Accepts multiple inputs",
            autocompletion=complete_status,
        ),
    ] = None,
    card_names: Annotated[
        Optional[list[str]],
        typer.Option(
            "--card",
            help="Show tasks with this title or project id. Accepts multiple inputs",
            autocompletion=complete_card_name,
        ),
    ] = None,
    responsibles: Annotated[
        Optional[list[str]],
        typer.Option(
            "--responsible",
            "-r",
            help="Show tasks of this team member. Accepts multiple inputs",
            autocompletion=complete_responsible,
        ),
    ] = None,
    priorities: Annotated[
        Optional[list[str]],
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priorities,
            help="Show tasks with this priority. Accepts multiple inputs",
            autocompletion=complete_priority,
        ),
    ] = None,
) -> None:
    """List tasks ordered by start date."""
    config = CONFIGURATION_REPO.get_config()
    members = TEAM_REPO.get_all_members()

    tasks = filter_tasks(
        load_tasks(), members, generate_filter(card_names, responsibles, priorities)
    )
    if statuses:
        tasks = [task for task in tasks if task["status"] in statuses]
    tasks = sort_items(
        tasks,
        [
            (lambda task: day_number(task["start_date"]), False),
            (lambda task: task["title"].casefold(), False),
        ],
    )

    tasks_view(tasks, members, config["priorities"], config["locale"])


@app.command("show, s", no_args_is_help=True)
def show(
    task_id: Annotated[
        str, typer.Argument(help="Task id", autocompletion=complete_task_id)
    ],
) -> None:
    """Show one task with the project and phase it belongs to."""
    config = CONFIGURATION_REPO.get_config()
    work_packages = load_work_packages()
    task = find_task(work_packages, task_id)
    if task is None:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] task '{escape(task_id)}' not found")
        raise typer.Exit(1)

    context = find_task_context(work_packages, task_id)
    owner = TEAM_REPO.get_member(task["owner_id"])
    locale = config["locale"]

    console = Console()
    console.print(f"[bold]{escape(task['title'])}[/bold] ({escape(task['id'])})")
    console.print(f"project:     {escape(context['project_title'])}")
    console.print(f"phase:       {escape(context['phase_title'])}")
    console.print(
        f"responsible: {escape(owner['name'] if owner else task['owner_id'])}"
    )
    console.print(
        f"dates:       {format_date(task['start_date'], 'D MMM YYYY', locale)}"
        f" - {format_date(task['end_date'], 'D MMM YYYY', locale)}"
    )
    console.print(f"hours:       {task['hours']:g}")
    console.print(f"priority:    {escape(task['priority'] or '-')}")
    console.print(f"status:      {escape(task['status'])}")


@app.command("move, m", no_args_is_help=True)
def move(
    task_id: Annotated[
        str, typer.Argument(help="Task id", autocompletion=complete_task_id)
    ],
    status: Annotated[
        str,
        typer.Argument(
            help="Column to move the task to", autocompletion=complete_status
        ),
    ],
) -> None:
    """Move a task to another kanban column."""
    columns = CONFIGURATION_REPO.get_config()["kanban_columns"]
    if status not in columns:
        raise typer.BadParameter(
            f"Column '{status}' does not exist, expected one of {', '.join(columns)}"
        )

    try:
        updated = change_task_status(load_work_packages(), task_id, status)
    except TaskNotFoundError:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] task '{escape(task_id)}' not found")
        raise typer.Exit(1)

    WORK_PACKAGE_REPO.set_all_work_packages(updated)

    console = Console()
    console.print(f"Moved task {escape(task_id)} to {escape(status)}")
