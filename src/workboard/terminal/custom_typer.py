# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core

_ALIAS_SEPARATOR = re.compile(r" ?, ?")


def split_aliases(name: str) -> list[str]:
    """Split a registered name like "workload, w" into its aliases."""
    return _ALIAS_SEPARATOR.split(name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as "name, alias" pairs"""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        for registered_name in self.commands:
            if cmd_name in split_aliases(registered_name):
                return super().get_command(ctx, registered_name)
        return super().get_command(ctx, cmd_name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists the top-level commands in board order rather than alphabetically"""

    _DESIRED_ORDER = [
        "workload, w",
        "kanban, k",
        "task, t",
        "column, col",
        "team, tm",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        result = [name for name in self._DESIRED_ORDER if name in self.commands]
        for cmd_name in self.commands:
            if cmd_name not in result:
                result.append(cmd_name)
        return result
