"""CSV export of a week's timesheet entries.

The exported document has a fixed column order and quotes every cell, so
commas, quotes and leading zeros survive a round trip through any standard
CSV reader.
"""

import csv
import io
import logging
import re
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from timesheet_builder.calculators.entry_calculator import (
    calculate_duration,
    calculate_total,
    format_hours,
    parse_travel_time,
)
from timesheet_builder.calculators.week_utils import ISO_YEAR
from timesheet_builder.models.entry import TimesheetEntry
from timesheet_builder.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

CSV_HEADERS = (
    "Week",
    "Date",
    "Project",
    "Scope",
    "Service Category",
    "Service Type",
    "Start Time",
    "End Time",
    "Hours (decimal)",
    "Travel Time",
    "Total Hours",
    "Comments",
)

CSV_MIME_TYPE = "text/csv;charset=utf-8"

_LINE_BREAKS = re.compile(r"\r\n|\r|\n")
_WHITESPACE = re.compile(r"\s+")


def format_week_label(week_number: int) -> str:
    """Return the week label used in exports, e.g. ``Week 05``."""
    return f"Week {int(week_number):02d}"


def flatten_comments(comments: str) -> str:
    """Collapse each line break of a comment into a single space."""
    return _LINE_BREAKS.sub(" ", comments or "")


def build_csv_row(entry: TimesheetEntry, week_number: int) -> List[str]:
    """Build the CSV cells of one entry, in ``CSV_HEADERS`` order."""
    return [
        format_week_label(week_number),
        entry.date,
        entry.project,
        entry.scope,
        entry.service_category,
        entry.service_type,
        entry.start_time,
        entry.end_time,
        format_hours(calculate_duration(entry)),
        format_hours(parse_travel_time(entry.travel_time)),
        format_hours(calculate_total(entry)),
        flatten_comments(entry.comments),
    ]


@log_function_call
def render_csv(entries: Iterable[TimesheetEntry], week_number: int) -> str:
    """Render the entries of a week as a CSV document.

    Rows keep the order of ``entries``. Every row, the header included, ends
    with a ``\\n``.

    Args:
        entries: Filtered entries of the selected week
        week_number: Selected ISO week

    Returns:
        The complete CSV payload
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for entry in entries:
        writer.writerow(build_csv_row(entry, week_number))
    return buf.getvalue()


def build_csv_filename(engineer: str, week_number: int) -> str:
    """Return the export file name, e.g. ``Timesheet_JaneDoe_Week05_2026.csv``."""
    compact_name = _WHITESPACE.sub("", engineer or "")
    return f"Timesheet_{compact_name}_Week{int(week_number):02d}_{ISO_YEAR}.csv"


def write_csv_file(
    entries: Sequence[TimesheetEntry],
    engineer: str,
    week_number: int,
    output_dir: Union[str, Path],
) -> Path:
    """Write the week's CSV document into ``output_dir``.

    The directory is created when missing.

    Returns:
        Path of the written file
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / build_csv_filename(engineer, week_number)

    path.write_text(render_csv(entries, week_number), encoding="utf-8", newline="")
    logger.info(f"Exported {len(entries)} entries to {path}")
    return path
