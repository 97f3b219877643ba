# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from workboard.service.workload import PRIORITY_OPTIONS


def validate_priorities(priorities: Optional[list[str]]) -> Optional[list[str]]:
    if priorities is None:
        return None
    for priority in priorities:
        if priority.lower() not in PRIORITY_OPTIONS:
            raise typer.BadParameter(
                f"Priority must be one of {', '.join(PRIORITY_OPTIONS)}, "
                f"got '{priority}'"
            )
    return priorities


def validate_locale(locale: Optional[str]) -> Optional[str]:
    """
    Validate that a locale, or at least its language, is available.

    Raises:
        typer.BadParameter: If neither the tag nor its language is known
    """
    if locale is None:
        return None
    normalized = locale.strip().lower().replace("-", "_")
    for candidate in (normalized, normalized.split("_")[0]):
        try:
            pendulum.locale(candidate)
        except ValueError:
            continue
        return locale
    raise typer.BadParameter(f"Unknown locale '{locale}'")


def validate_column_name(name: str) -> str:
    if not name.strip():
        raise typer.BadParameter("Column name cannot be empty")
    return name.strip()
