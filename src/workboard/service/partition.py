# SPDX-License-Identifier: MIT

import logging

import pendulum

from workboard import time
from workboard.model.date_column import DateColumn
from workboard.model.granularity_type import GranularityType

LOGGER = logging.getLogger(__name__)

WORKDAYS_PER_WEEK = 5
WEEKS_PER_MONTH_VIEW = 5
MONTHS_PER_YEAR = 12


def partition_date_columns(
    granularity: GranularityType,
    anchor: time.DayValue,
    locale: str = time.DEFAULT_LOCALE,
) -> list[DateColumn]:
    """
    Split the period around anchor into ordered, non-overlapping date columns.

    Args:
        granularity: "day", "week", or "month"
        anchor: Any date inside the period to display
        locale: Locale used for weekday and month names in labels

    Returns:
        Five Monday-Friday columns for "day", five Monday-Sunday columns for
        "week", twelve calendar-month columns for "month"
    """
    locale = time.resolve_locale(locale)

    if granularity == "day":
        columns = _day_columns(anchor, locale)
    elif granularity == "week":
        columns = _week_columns(anchor, locale)
    else:  # granularity == "month"
        columns = _month_columns(anchor, locale)

    LOGGER.debug(
        "Partitioned %s view around %s into %d columns (%s to %s)",
        granularity,
        time.date_to_iso_str(anchor),
        len(columns),
        columns[0]["start_date"].to_date_string(),
        columns[-1]["end_date"].to_date_string(),
    )
    return columns


def first_week_start(anchor: time.DayValue) -> pendulum.Date:
    """
    Monday that opens the five-week view of anchor's month.

    The week holding the 1st of the month is used unless both of its ends fall
    before the month starts, in which case the following week is used.
    """
    month_start = time.start_of_month(anchor)
    current = time.start_of_week(month_start)
    week_end = current.add(days=6)
    if _month_key(current) < _month_key(month_start) and _month_key(
        week_end
    ) < _month_key(month_start):
        current = current.add(weeks=1)
    return current


def format_date_range(
    granularity: GranularityType,
    anchor: time.DayValue,
    locale: str = time.DEFAULT_LOCALE,
) -> str:
    """Human readable description of the period a view of anchor covers."""
    if granularity == "day":
        week_start = time.start_of_week(anchor)
        week_end = week_start.add(days=WORKDAYS_PER_WEEK - 1)
        return (
            f"{time.format_date(week_start, 'MMM D', locale)} - "
            f"{time.format_date(week_end, 'MMM D, YYYY', locale)}"
        )
    elif granularity == "week":
        return time.format_date(anchor, "MMMM YYYY", locale)
    else:  # granularity == "month"
        return time.format_date(anchor, "YYYY", locale)


def _day_columns(anchor: time.DayValue, locale: str) -> list[DateColumn]:
    week_start = time.start_of_week(anchor)
    columns: list[DateColumn] = []
    for offset in range(WORKDAYS_PER_WEEK):
        day = week_start.add(days=offset)
        weekday = time.format_date(day, "dddd", locale).upper()
        columns.append(
            {
                "start_date": day,
                "end_date": day,
                "label": f"{weekday}, {day.day}",
            }
        )
    return columns


def _week_columns(anchor: time.DayValue, locale: str) -> list[DateColumn]:
    current = first_week_start(anchor)
    columns: list[DateColumn] = []
    for index in range(WEEKS_PER_MONTH_VIEW):
        week_end = current.add(days=6)
        start_month = time.format_date(current, "MMM", locale)
        end_month = time.format_date(week_end, "MMM", locale)
        if start_month == end_month:
            week_label = f"{current.day} - {week_end.day} {start_month}"
        else:
            week_label = f"{current.day} {start_month} - {week_end.day} {end_month}"
        columns.append(
            {
                "start_date": current,
                "end_date": week_end,
                "label": f"W{index + 1} ({week_label})",
            }
        )
        current = current.add(weeks=1)
    return columns


def _month_columns(anchor: time.DayValue, locale: str) -> list[DateColumn]:
    year_start = time.start_of_year(anchor)
    columns: list[DateColumn] = []
    for offset in range(MONTHS_PER_YEAR):
        month_start = year_start.add(months=offset)
        columns.append(
            {
                "start_date": month_start,
                "end_date": time.end_of_month(month_start),
                "label": time.format_date(month_start, "MMMM", locale),
            }
        )
    return columns


def _month_key(value: time.DayValue) -> tuple[int, int]:
    return (value.year, value.month)
