# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from workboard.terminal import column, configuration, task, team, view
from workboard.terminal.custom_typer import OrderedAliasedTyperGroup
from workboard.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Workboard - Team workload and kanban boards in the CLI",
    no_args_is_help=True,
)
app.command(name="workload, w")(view.workload)
app.command(name="kanban, k")(view.kanban)
app.add_typer(task.app, name="task, t")
app.add_typer(column.app, name="column, col")
app.add_typer(team.app, name="team, tm")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable priority and avatar colors"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout decisions to stderr"),
    ] = False,
) -> None:
    """
    Workboard - Team workload and kanban boards in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_color:
        view_state.set_no_color(True)
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


def configure_logging(level: int) -> None:
    logger = logging.getLogger("workboard")
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(level)


def run() -> None:
    app()
