# SPDX-License-Identifier: MIT

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from workboard.model.task import Task
from workboard.model.work_package import Container
from workboard.repository.work_package import WORK_PACKAGE_REPO
from workboard.service.validate import InvalidTaskDatesError


def load_tasks() -> list[Task]:
    """Return every task, or exit with an error naming a task with bad dates."""
    try:
        return WORK_PACKAGE_REPO.get_all_tasks()
    except InvalidTaskDatesError as e:
        _exit_on_invalid_dates(e)


def load_work_packages() -> list[Container]:
    try:
        return WORK_PACKAGE_REPO.get_all_work_packages()
    except InvalidTaskDatesError as e:
        _exit_on_invalid_dates(e)


def _exit_on_invalid_dates(error: InvalidTaskDatesError) -> NoReturn:
    console = Console(stderr=True)
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)
