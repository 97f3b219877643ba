# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from workboard import time
from workboard.model.granularity_type import GRANULARITIES, GranularityType
from workboard.model.sort_key import SORT_KEYS, ResponsibleSortOrder, SortKey


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a date option.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day offset
    from today such as 1 or -7.
    """
    if date_param is None:
        return None

    date = str(date_param).strip().lower()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return time.date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d+$", date):
        return time.today().add(days=int(date))

    if date in ("today", "t"):
        return time.today()
    if date in ("yesterday", "y"):
        return time.today().subtract(days=1)
    if date in ("tomorrow", "o"):
        return time.today().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_granularity(granularity: Optional[str]) -> Optional[GranularityType]:
    if granularity is None:
        return None
    normalized = granularity.strip().lower()
    for candidate in GRANULARITIES:
        if normalized in (candidate, candidate[0]):
            return candidate
    raise typer.BadParameter(
        f"Granularity must be one of {', '.join(GRANULARITIES)}, got '{granularity}'"
    )


def parse_sort_key(sort_key: Optional[str]) -> Optional[SortKey]:
    if sort_key is None:
        return None
    normalized = re.sub(r"(?<!^)(?=[A-Z])", "_", sort_key.strip()).lower()
    normalized = normalized.replace("-", "_")
    for candidate in SORT_KEYS:
        if normalized == candidate:
            return candidate
    raise typer.BadParameter(
        f"Sort key must be one of {', '.join(SORT_KEYS)}, got '{sort_key}'"
    )


def parse_sort_order(order: Optional[str]) -> Optional[ResponsibleSortOrder]:
    if order is None:
        return None
    normalized = order.strip().lower()
    if normalized == "asc":
        return "asc"
    if normalized == "desc":
        return "desc"
    raise typer.BadParameter(f"Order must be 'asc' or 'desc', got '{order}'")
