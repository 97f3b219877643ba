# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from workboard.repository.configuration import CONFIGURATION_REPO
from workboard.repository.work_package import WORK_PACKAGE_REPO
from workboard.service.status import (
    KanbanColumnError,
    add_column,
    delete_column,
    rename_column,
)
from workboard.terminal.completion import complete_status
from workboard.terminal.custom_typer import AliasedTyperGroup
from workboard.terminal.load import load_tasks, load_work_packages
from workboard.terminal.validate import validate_column_name

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_columns() -> None:
    """List kanban columns with the number of tasks in each."""
    columns = CONFIGURATION_REPO.get_config()["kanban_columns"]
    tasks = load_tasks()

    table = Table()
    table.add_column("Column", style="cyan")
    table.add_column("Tasks", justify="right", style="magenta")
    for column in columns:
        task_count = sum(1 for task in tasks if task["status"] == column)
        table.add_row(escape(column), str(task_count))

    console = Console()
    console.print(table)


@app.command("add, a", no_args_is_help=True)
def add(
    name: Annotated[
        str,
        typer.Argument(help="Name of the new column", callback=validate_column_name),
    ],
) -> None:
    """Add a kanban column after the existing ones."""
    columns = CONFIGURATION_REPO.get_config()["kanban_columns"]
    try:
        columns = add_column(columns, name)
    except KanbanColumnError as e:
        _exit_with_error(e)

    CONFIGURATION_REPO.update_config(kanban_columns=columns)

    console = Console()
    console.print(f"Added column {escape(name)}")


@app.command("rename, r", no_args_is_help=True)
def rename(
    old_name: Annotated[
        str, typer.Argument(help="Current column name", autocompletion=complete_status)
    ],
    new_name: Annotated[
        str, typer.Argument(help="New column name", callback=validate_column_name)
    ],
) -> None:
    """Rename a kanban column and move its tasks along with it."""
    columns = CONFIGURATION_REPO.get_config()["kanban_columns"]
    try:
        columns, work_packages = rename_column(
            columns, load_work_packages(), old_name, new_name
        )
    except KanbanColumnError as e:
        _exit_with_error(e)

    CONFIGURATION_REPO.update_config(kanban_columns=columns)
    WORK_PACKAGE_REPO.set_all_work_packages(work_packages)

    console = Console()
    console.print(f"Renamed column {escape(old_name)} to {escape(new_name)}")


@app.command("delete, d", no_args_is_help=True)
def delete(
    name: Annotated[
        str, typer.Argument(help="Column to delete", autocompletion=complete_status)
    ],
) -> None:
    """Delete an empty kanban column."""
    columns = CONFIGURATION_REPO.get_config()["kanban_columns"]
    try:
        columns = delete_column(columns, load_work_packages(), name)
    except KanbanColumnError as e:
        _exit_with_error(e)

    CONFIGURATION_REPO.update_config(kanban_columns=columns)

    console = Console()
    console.print(f"Deleted column {escape(name)}")


def _exit_with_error(error: Exception) -> NoReturn:
    console = Console(stderr=True)
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)
