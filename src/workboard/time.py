# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, TypeAlias

import pendulum

DEFAULT_LOCALE = "en"

DayValue: TypeAlias = pendulum.Date | pendulum.DateTime


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def to_date(value: DayValue) -> pendulum.Date:
    """Drop the time of day, keeping the calendar day of the value's own zone."""
    return pendulum.date(value.year, value.month, value.day)


def start_of_day(value: DayValue) -> pendulum.DateTime:
    if isinstance(value, pendulum.DateTime):
        return value.start_of("day")
    return pendulum.datetime(value.year, value.month, value.day, tz="local")


def day_number(value: DayValue) -> int:
    """
    Day-granularity key for a date or datetime.

    Every day comparison in the layout engine goes through this so that two
    values on the same calendar day always compare equal.
    """
    return datetime.date(value.year, value.month, value.day).toordinal()


def days_between(start: DayValue, end: DayValue) -> int:
    """
    Inclusive number of days from start to end.

    Same day is 1, consecutive days are 2. The difference is absolute, so an
    inverted range gives the same count as the ordered one.
    """
    return abs(day_number(end) - day_number(start)) + 1


def dates_are_equal(first: DayValue, second: DayValue) -> bool:
    return day_number(first) == day_number(second)


def add_days(value: DayValue, days: int) -> DayValue:
    return value.add(days=days)


def add_months(value: DayValue, months: int) -> DayValue:
    return value.add(months=months)


def add_years(value: DayValue, years: int) -> DayValue:
    return value.add(years=years)


def start_of_week(value: DayValue) -> pendulum.Date:
    """Monday of the week containing value. A Sunday rolls back six days."""
    date = to_date(value)
    return date.subtract(days=date.weekday())


def start_of_month(value: DayValue) -> pendulum.Date:
    return pendulum.date(value.year, value.month, 1)


def end_of_month(value: DayValue) -> pendulum.Date:
    return start_of_month(value).add(months=1).subtract(days=1)


def start_of_year(value: DayValue) -> pendulum.Date:
    return pendulum.date(value.year, 1, 1)


def days_in_month(value: DayValue) -> int:
    return end_of_month(value).day


def resolve_locale(locale: Optional[str]) -> str:
    """
    Map a tag like "pt-BR" or "en_US" onto a locale pendulum ships.

    Tries the full tag, then the bare language, then DEFAULT_LOCALE.
    """
    if not locale:
        return DEFAULT_LOCALE
    normalized = locale.strip().lower().replace("-", "_")
    for candidate in (normalized, normalized.split("_")[0]):
        try:
            pendulum.locale(candidate)
        except ValueError:
            continue
        return candidate
    return DEFAULT_LOCALE


def format_date(value: DayValue, fmt: str, locale: str = DEFAULT_LOCALE) -> str:
    return start_of_day(value).format(fmt, locale=resolve_locale(locale))


def date_to_iso_str(value: DayValue) -> str:
    return to_date(value).to_date_string()


def date_to_iso_str_optional(value: Optional[DayValue]) -> Optional[str]:
    if value is None:
        return None
    return date_to_iso_str(value)


def date_from_str(value: str | datetime.date) -> pendulum.Date:
    # YAML hands back datetime.date for unquoted ISO dates
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    parsed = pendulum.parse(value, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a calendar date: {value!r}")


def date_from_str_optional(
    value: Optional[str | datetime.date],
) -> Optional[pendulum.Date]:
    if value is None:
        return None
    return date_from_str(value)


def date_to_display_str(value: DayValue, locale: str = DEFAULT_LOCALE) -> str:
    return format_date(value, "DD/MM", locale)
