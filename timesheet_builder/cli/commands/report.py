"""Read-only views of the selected week: entry list and weekly summary."""

from typing import List

import click

from timesheet_builder.aggregators.weekly_aggregator import (
    aggregate_entries,
    build_daily_hours_table,
    daily_hours_by_date,
)
from timesheet_builder.calculators.entry_calculator import (
    DailyHoursAdvisory,
    calculate_duration,
    calculate_total,
    classify_daily_hours,
    format_hours,
    parse_travel_time,
)
from timesheet_builder.calculators.week_utils import format_week_range
from timesheet_builder.cli.error_handlers import with_error_handling
from timesheet_builder.cli.state import CLIState, pass_state
from timesheet_builder.cli.utils.formatters import (
    format_field_errors,
    format_info,
    format_key_values,
    format_table,
    format_warning,
)
from timesheet_builder.models.session import Session
from timesheet_builder.validators.validator import TimesheetValidator

ENTRY_TABLE_HEADERS = [
    "ID",
    "Date",
    "Project",
    "Scope",
    "Category",
    "Type",
    "Start",
    "End",
    "Hours",
    "Travel",
    "Total",
    "Errors",
]


def _week_heading(session: Session) -> str:
    engineer = session.engineer or "(no engineer)"
    if not session.selected_week:
        return f"{engineer} - no week selected"
    return f"{engineer} - {format_week_range(session.selected_week)}"


@click.command(name="list")
@click.option(
    "--full-ids", is_flag=True, help="Show complete entry ids instead of prefixes"
)
@pass_state
def list_entries(state: CLIState, full_ids: bool):
    """List the entries of the selected week with their errors.

    Example:
        timesheet-cli list
    """
    with with_error_handling(state.debug):
        session = state.load_session()
        week_entries = [e for e in session.entries if e.week == session.selected_week]

        click.echo(format_info(_week_heading(session)))
        if not week_entries:
            click.echo(format_info("No entries in this week."))
            return

        errors_by_id = TimesheetValidator().validate_entries(
            week_entries, session.selected_week
        )

        rows: List[List[str]] = []
        for entry in week_entries:
            rows.append(
                [
                    entry.id if full_ids else entry.id[:8],
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
                    format_field_errors(errors_by_id[entry.id]),
                ]
            )

        click.echo()
        click.echo(format_table(ENTRY_TABLE_HEADERS, rows, max_width=60))

        invalid = sum(1 for errors in errors_by_id.values() if errors)
        click.echo()
        if invalid:
            click.echo(
                format_warning(f"{invalid} of {len(week_entries)} entries have errors")
            )
        else:
            click.echo(format_info(f"{len(week_entries)} entries"))


@click.command(name="summary")
@pass_state
def show_summary(state: CLIState):
    """Show weekly totals, daily hours and long-day advisories."""
    with with_error_handling(state.debug):
        session = state.load_session()
        week_entries = [e for e in session.entries if e.week == session.selected_week]
        totals = aggregate_entries(week_entries)

        click.echo("=" * 60)
        click.echo(f"Weekly Summary: {_week_heading(session)}")
        click.echo("=" * 60)
        click.echo(
            format_key_values(
                [
                    ("Entries", str(totals.entry_count)),
                    ("Hours", format_hours(totals.hours_sum)),
                    ("Travel", format_hours(totals.travel_sum)),
                    ("Total", format_hours(totals.total_sum)),
                    ("Projects", ", ".join(totals.projects) or "N/A"),
                ]
            )
        )

        table = build_daily_hours_table(week_entries)
        if not table.empty:
            click.echo()
            click.echo("Daily hours:")
            click.echo(table.to_string(float_format=lambda v: f"{v:.2f}"))

        for date, hours in daily_hours_by_date(week_entries).items():
            advisory = classify_daily_hours(hours)
            if advisory is not DailyHoursAdvisory.NONE:
                click.echo(format_warning(f"{date}: {advisory.message}"))
