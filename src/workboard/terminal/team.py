# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from workboard.model.entity_id import generate_entity_id
from workboard.repository.team import TEAM_REPO
from workboard.terminal.custom_typer import AliasedTyperGroup
from workboard.terminal.load import load_tasks

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_members() -> None:
    """List team members with their number of tasks and hours."""
    tasks = load_tasks()

    table = Table()
    table.add_column("Id", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Tasks", justify="right")
    table.add_column("Hours", justify="right", style="magenta")
    for member in TEAM_REPO.get_all_members():
        member_tasks = [task for task in tasks if task["owner_id"] == member["id"]]
        table.add_row(
            escape(member["id"]),
            escape(member["name"]),
            str(len(member_tasks)),
            f"{sum(task['hours'] for task in member_tasks):g}",
        )

    console = Console()
    console.print(table)


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    member_id: Annotated[
        Optional[str],
        typer.Option("--id", help="Member id (generated when omitted)"),
    ] = None,
) -> None:
    """Add a team member."""
    member_id = member_id or generate_entity_id()
    try:
        TEAM_REPO.add_member(member_id, name)
    except ValueError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console = Console()
    console.print(f"Added {escape(name)} with id {escape(member_id)}")


@app.command("remove, rm", no_args_is_help=True)
def remove(member_id: str) -> None:
    """Remove a team member. Their tasks show up under unassigned."""
    try:
        TEAM_REPO.remove_member(member_id)
    except ValueError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console = Console()
    console.print(f"Removed team member {escape(member_id)}")
