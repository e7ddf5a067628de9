"""Derived values of a timesheet entry.

Nothing computed here is stored on the entry; durations and totals are
recomputed from the entry fields on every call.

Formulas:
    Hours = max((EndSlot - StartSlot) * 15, 0) / 60
    Total = Hours + TravelTime
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from timesheet_builder.calculators.time_utils import SLOT_MINUTES, time_to_index

if TYPE_CHECKING:
    from timesheet_builder.models.entry import TimesheetEntry

TWO_PLACES = Decimal("0.01")

# Advisory thresholds for hours worked in one day
LONG_DAY_HOURS = Decimal("10")
MAX_DAY_HOURS = Decimal("24")


class DailyHoursAdvisory(Enum):
    """Advisory level for the number of hours booked on one day."""

    NONE = ""
    SOFT = "Long day: more than 10 hours"
    HARD = "Exceeds 24 hours in a day"

    @property
    def message(self) -> str:
        return self.value


def _parse_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        parsed = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


def parse_travel_time(value: Any) -> Decimal:
    """Parse a travel time form value into decimal hours.

    Args:
        value: Travel time as entered (text, number or None)

    Returns:
        The numeric value, or 0 for empty, non-numeric or non-finite input.
        Negative values are returned unchanged; validation reports them.

    Example:
        >>> parse_travel_time("1.5")
        Decimal('1.5')
        >>> parse_travel_time("abc")
        Decimal('0')
    """
    parsed = _parse_decimal(value)
    return Decimal("0") if parsed is None else parsed


def is_unreadable_travel_time(value: Any) -> bool:
    """Return True for filled-in travel time that is not a finite number.

    Such values are kept on the entry and count as 0 hours.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return False
    return _parse_decimal(value) is None


def calculate_duration_minutes(start_time: str, end_time: str) -> int:
    """Calculate worked minutes between two slot times.

    Returns 0 when either time is unset or the end does not come after the
    start.

    Example:
        >>> calculate_duration_minutes("09:00", "12:00")
        180
        >>> calculate_duration_minutes("12:00", "09:00")
        0
    """
    start_index = time_to_index(start_time)
    end_index = time_to_index(end_time)
    if start_index < 0 or end_index < 0:
        return 0
    return max((end_index - start_index) * SLOT_MINUTES, 0)


def minutes_to_decimal_hours(minutes: int) -> Decimal:
    """Convert minutes to decimal hours with 2 decimal precision.

    Example:
        >>> minutes_to_decimal_hours(90)
        Decimal('1.50')
    """
    hours = Decimal(minutes) / Decimal(60)
    return hours.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def calculate_duration(entry: "TimesheetEntry") -> Decimal:
    """Calculate the worked hours of an entry (end - start).

    Negative spans are clamped to zero; reporting them is the validator's job.
    """
    return minutes_to_decimal_hours(
        calculate_duration_minutes(entry.start_time, entry.end_time)
    )


def calculate_total(entry: "TimesheetEntry") -> Decimal:
    """Calculate worked hours plus travel time of an entry."""
    return calculate_duration(entry) + parse_travel_time(entry.travel_time)


def classify_daily_hours(hours: Decimal) -> DailyHoursAdvisory:
    """Classify hours booked in one day against the advisory thresholds.

    Example:
        >>> classify_daily_hours(Decimal("8"))
        <DailyHoursAdvisory.NONE: ''>
        >>> classify_daily_hours(Decimal("10.25")).name
        'SOFT'
    """
    if hours > MAX_DAY_HOURS:
        return DailyHoursAdvisory.HARD
    if hours > LONG_DAY_HOURS:
        return DailyHoursAdvisory.SOFT
    return DailyHoursAdvisory.NONE


def format_hours(value: Decimal) -> str:
    """Format hours with exactly two decimals, e.g. ``3.00``.

    Any finite value is accepted, ``1e30`` included.
    """
    value = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))

