"""ISO week utilities for the timesheet builder.

Timesheets are selected by ISO week number within a single reference year.
This module converts a week number to its Monday-to-Sunday calendar range and
answers whether a date falls inside it.

Every year is treated as exactly 52 weeks counted from the ISO week-1 anchor.
Years with an ISO week 53 are deliberately not modelled; the week selector
and prev/next navigation rely on exactly 52 weeks.
"""

import datetime as dt
from typing import Dict, List, Optional, Tuple, Union

ISO_YEAR = 2026
WEEKS_PER_YEAR = 52

# Fixed English abbreviations so labels do not depend on the process locale
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def get_week_start(week_number: int) -> dt.date:
    """Return the Monday of ISO week ``week_number`` of the reference year.

    Week 1 is the week containing January 4th (equivalently, the year's first
    Thursday). Week numbers are not range-checked here.

    Args:
        week_number: ISO week number

    Returns:
        Date of the week's Monday

    Example:
        >>> get_week_start(1)
        datetime.date(2025, 12, 29)
        >>> get_week_start(5)
        datetime.date(2026, 1, 26)
    """
    jan_fourth = dt.date(ISO_YEAR, 1, 4)
    week_one_monday = jan_fourth - dt.timedelta(days=jan_fourth.isoweekday() - 1)
    return week_one_monday + dt.timedelta(weeks=week_number - 1)


def get_week_range(week_number: int) -> Tuple[dt.date, dt.date]:
    """Return the inclusive (Monday, Sunday) range of a week."""
    start = get_week_start(week_number)
    return start, start + dt.timedelta(days=6)


def _format_month_day(value: dt.date) -> str:
    return f"{_MONTH_ABBREVIATIONS[value.month - 1]} {value.day:02d}"


def format_week_range(week_number: int) -> str:
    """Return the selector label of a week.

    Example:
        >>> format_week_range(5)
        'Week 05 (Jan 26 - Feb 01)'
    """
    start, end = get_week_range(week_number)
    return (
        f"Week {week_number:02d} "
        f"({_format_month_day(start)} - {_format_month_day(end)})"
    )


def format_week_period(week_number: int) -> str:
    """Return only the date part of the week label, e.g. ``Jan 26 - Feb 01``."""
    start, end = get_week_range(week_number)
    return f"{_format_month_day(start)} - {_format_month_day(end)}"


def _coerce_date(value: Union[str, dt.date, None]) -> Optional[dt.date]:
    if not value:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def is_date_in_week(date: Union[str, dt.date, None], week_number: int) -> bool:
    """Check whether ``date`` lies inside the week, bounds included.

    Args:
        date: ISO date string or date object
        week_number: ISO week number

    Returns:
        True if Monday <= date <= Sunday of the week. False for an empty or
        unparseable date.
    """
    value = _coerce_date(date)
    if value is None:
        return False
    start, end = get_week_range(int(week_number))
    return start <= value <= end


def get_date_bounds(week_number: Optional[int]) -> Dict[str, str]:
    """Return ``{"min": ..., "max": ...}`` ISO date strings for a week.

    Used to constrain date inputs. Returns an empty dict when no week is
    selected.
    """
    if not week_number:
        return {}
    start, end = get_week_range(int(week_number))
    return {"min": start.isoformat(), "max": end.isoformat()}


def generate_weeks() -> List[int]:
    """Return every selectable week number (1-52)."""
    return list(range(1, WEEKS_PER_YEAR + 1))


def clamp_week(week_number: int) -> int:
    """Clamp a week number into the selectable 1-52 range."""
    return max(1, min(int(week_number), WEEKS_PER_YEAR))


def previous_week(week_number: Optional[int]) -> int:
    """Step back one week, never before week 1. Unset counts as week 1."""
    return clamp_week((week_number or 1) - 1)


def next_week(week_number: Optional[int]) -> int:
    """Step forward one week, never past week 52. Unset counts as week 1."""
    return clamp_week((week_number or 1) + 1)
