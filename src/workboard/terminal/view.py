# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from workboard import time
from workboard.model.granularity_type import GranularityType
from workboard.model.sort_key import ResponsibleSortOrder, SortKey
from workboard.query.filter import filter_tasks, generate_filter
from workboard.repository.configuration import CONFIGURATION_REPO
from workboard.repository.team import TEAM_REPO
from workboard.service.kanban import build_kanban_columns, kanban_week_tasks
from workboard.service.partition import format_date_range
from workboard.service.workload import build_workload
from workboard.terminal.completion import (
    complete_card_name,
    complete_priority,
    complete_responsible,
)
from workboard.terminal.load import load_tasks
from workboard.terminal.parse import (
    parse_date,
    parse_granularity,
    parse_sort_key,
    parse_sort_order,
)
from workboard.terminal.validate import validate_locale, validate_priorities
from workboard.view.views.kanban import kanban_view
from workboard.view.views.workload import workload_view

DATE_HELP = (
    "Any date inside the period to show "
    "(YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)"
)


def workload(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    granularity: Annotated[
        Optional[GranularityType],
        typer.Option(
            "--granularity",
            "-g",
            parser=parse_granularity,
            help="day, week or month",
        ),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option(
            "--locale",
            "-l",
            callback=validate_locale,
            help="Locale for weekday and month names, like en or pt-BR",
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
    order: Annotated[
        Optional[ResponsibleSortOrder],
        typer.Option(
            "--order",
            "-o",
            parser=parse_sort_order,
            help="Order team members by name: asc or desc",
        ),
    ] = None,
) -> None:
    """Show each team member's tasks as bars over days, weeks or months."""
    config = CONFIGURATION_REPO.get_config()
    anchor = date if date is not None else time.today()
    granularity = granularity or config["default_granularity"]
    locale = locale or config["locale"]

    members = TEAM_REPO.get_all_members()
    tasks = filter_tasks(
        load_tasks(),
        members,
        generate_filter(card_names, responsibles, priorities),
    )

    layout = build_workload(
        tasks,
        members,
        granularity,
        anchor,
        locale,
        order or config["responsible_sort_order"],
    )
    workload_view(
        layout,
        format_date_range(granularity, anchor, locale),
        config["priorities"],
    )


def kanban(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    sort_key: Annotated[
        Optional[SortKey],
        typer.Option(
            "--sort",
            "-s",
            parser=parse_sort_key,
            help="priority, title, responsible, start_date, end_date or created_at",
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
    """Show the tasks active in a week grouped by status column."""
    config = CONFIGURATION_REPO.get_config()
    anchor = date if date is not None else time.today()

    members = TEAM_REPO.get_all_members()
    tasks = filter_tasks(
        kanban_week_tasks(load_tasks(), anchor),
        members,
        generate_filter(card_names, responsibles, priorities),
    )

    columns = build_kanban_columns(
        tasks,
        config["kanban_columns"],
        sort_key or config["default_kanban_sort"],
        members,
    )
    kanban_view(
        columns,
        format_date_range("day", anchor, config["locale"]),
        members,
        config["priorities"],
    )
