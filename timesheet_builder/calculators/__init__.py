"""Calculator modules for the timesheet builder."""

from timesheet_builder.calculators.entry_calculator import (
    DailyHoursAdvisory,
    calculate_duration,
    calculate_duration_minutes,
    calculate_total,
    classify_daily_hours,
    format_hours,
    is_unreadable_travel_time,
    minutes_to_decimal_hours,
    parse_travel_time,
)
from timesheet_builder.calculators.time_utils import (
    TIME_OPTIONS,
    index_to_time,
    is_valid_time_option,
    time_to_index,
)
from timesheet_builder.calculators.week_utils import (
    ISO_YEAR,
    clamp_week,
    format_week_range,
    generate_weeks,
    get_date_bounds,
    get_week_range,
    get_week_start,
    is_date_in_week,
    next_week,
    previous_week,
)

__all__ = [
    # entry_calculator
    "DailyHoursAdvisory",
    "calculate_duration",
    "calculate_duration_minutes",
    "calculate_total",
    "classify_daily_hours",
    "format_hours",
    "is_unreadable_travel_time",
    "minutes_to_decimal_hours",
    "parse_travel_time",
    # time_utils
    "TIME_OPTIONS",
    "index_to_time",
    "is_valid_time_option",
    "time_to_index",
    # week_utils
    "ISO_YEAR",
    "clamp_week",
    "format_week_range",
    "generate_weeks",
    "get_date_bounds",
    "get_week_range",
    "get_week_start",
    "is_date_in_week",
    "next_week",
    "previous_week",
]
