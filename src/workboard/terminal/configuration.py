# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from workboard import configuration
from workboard.configuration import Configuration
from workboard.model.granularity_type import GranularityType
from workboard.model.sort_key import ResponsibleSortOrder, SortKey
from workboard.repository.configuration import CONFIGURATION_REPO
from workboard.terminal.custom_typer import AliasedTyperGroup
from workboard.terminal.parse import (
    parse_granularity,
    parse_sort_key,
    parse_sort_order,
)
from workboard.terminal.validate import validate_locale

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_config_table(config))

    console.print("\n[bold]Priorities[/bold]")
    priorities_table = Table()
    priorities_table.add_column("Key", style="cyan")
    priorities_table.add_column("Name")
    priorities_table.add_column("Color")
    for priority in config["priorities"]:
        priorities_table.add_row(
            priority["key"],
            escape(priority["name"]),
            f"[{priority['color']}]{priority['color']}[/{priority['color']}]",
        )
    console.print(priorities_table)

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    locale: Annotated[
        Optional[str],
        typer.Option(
            "--locale",
            callback=validate_locale,
            help="Locale for weekday and month names, like en or pt-BR",
        ),
    ] = None,
    default_granularity: Annotated[
        Optional[GranularityType],
        typer.Option(
            "--default-granularity",
            parser=parse_granularity,
            help="Granularity of the workload view when none is given",
        ),
    ] = None,
    default_kanban_sort: Annotated[
        Optional[SortKey],
        typer.Option(
            "--default-kanban-sort",
            parser=parse_sort_key,
            help="Card order of the kanban view when none is given",
        ),
    ] = None,
    responsible_sort_order: Annotated[
        Optional[ResponsibleSortOrder],
        typer.Option(
            "--responsible-sort-order",
            parser=parse_sort_order,
            help="Name order of team members in the workload view: asc or desc",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        locale=locale,
        default_granularity=default_granularity,
        default_kanban_sort=default_kanban_sort,
        responsible_sort_order=responsible_sort_order,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_config_table(config, title="Updated Configuration"))


def _config_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("locale", config["locale"])
    table.add_row("default_granularity", config["default_granularity"])
    table.add_row("default_kanban_sort", config["default_kanban_sort"])
    table.add_row("responsible_sort_order", config["responsible_sort_order"])
    table.add_row(
        "kanban_columns", escape(", ".join(config["kanban_columns"])) or "None"
    )
    table.add_row(
        "data_path",
        config["data_path"]
        if config["data_path"]
        else f"None ({configuration.DATA_PATH})",
    )
    return table
