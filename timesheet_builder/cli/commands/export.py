"""Export commands: CSV file and submission email draft."""

import logging
from typing import List, Optional

import click

from timesheet_builder.aggregators.weekly_aggregator import aggregate_entries
from timesheet_builder.calculators.entry_calculator import format_hours
from timesheet_builder.cli.error_handlers import (
    DataValidationError,
    ProcessingError,
    with_error_handling,
)
from timesheet_builder.cli.state import CLIState, pass_state
from timesheet_builder.cli.utils.formatters import (
    format_info,
    format_success,
    format_warning,
)
from timesheet_builder.models.entry import TimesheetEntry
from timesheet_builder.models.session import Session
from timesheet_builder.utils.logging_utils import LogContext
from timesheet_builder.validators.validator import TimesheetValidator
from timesheet_builder.writers.csv_writer import write_csv_file
from timesheet_builder.writers.email_writer import (
    build_clipboard_text,
    build_email_template,
    build_mailto_url,
)

logger = logging.getLogger(__name__)


def exportable_entries(session: Session) -> List[TimesheetEntry]:
    """Return the selected week's entries, refusing an incomplete selection.

    Raises:
        DataValidationError: If no engineer or week is selected, or the week
            has no entries
    """
    if not session.engineer:
        raise DataValidationError(
            "No engineer selected", recovery_hint="Run 'timesheet-cli start' first"
        )
    if not session.selected_week:
        raise DataValidationError(
            "No week selected", recovery_hint="Run 'timesheet-cli start' first"
        )

    entries = [e for e in session.entries if e.week == session.selected_week]
    if not entries:
        raise DataValidationError(
            f"Week {session.selected_week:02d} has no entries",
            recovery_hint="Add entries with 'timesheet-cli add'",
        )
    return entries


def _warn_invalid(entries: List[TimesheetEntry], week_number: int) -> None:
    invalid = TimesheetValidator().invalid_entry_ids(entries, week_number)
    if invalid:
        click.echo(
            format_warning(
                f"{len(invalid)} entr{'y has' if len(invalid) == 1 else 'ies have'} "
                "validation errors; run 'timesheet-cli validate' for details"
            ),
            err=True,
        )


@click.command(name="export-csv")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the CSV file (default: TIMESHEET_EXPORT_DIR)",
)
@pass_state
def export_csv(state: CLIState, output_dir: Optional[str]):
    """Write the selected week's entries to a CSV file.

    Example:
        timesheet-cli export-csv --output-dir exports
    """
    with with_error_handling(state.debug):
        session = state.load_session()
        entries = exportable_entries(session)
        target_dir = output_dir or state.settings.export_dir

        with LogContext(engineer=session.engineer, week=session.selected_week):
            _warn_invalid(entries, session.selected_week)
            try:
                path = write_csv_file(
                    entries, session.engineer, session.selected_week, target_dir
                )
            except OSError as e:
                raise ProcessingError(
                    f"Cannot write CSV file to {target_dir}: {e}",
                    recovery_hint="Check that the output directory is writable",
                ) from e

        click.echo(format_success(f"Exported {len(entries)} entries to {path}"))


@click.command(name="email")
@click.option(
    "--mailto",
    "mode",
    flag_value="mailto",
    help="Print a mailto: URL",
)
@click.option(
    "--clipboard",
    "mode",
    flag_value="clipboard",
    default=True,
    help="Print plain text ready to paste (default)",
)
@pass_state
def email_draft(state: CLIState, mode: str):
    """Print the submission email for the selected week.

    Example:
        timesheet-cli email --mailto
    """
    with with_error_handling(state.debug):
        session = state.load_session()
        entries = exportable_entries(session)

        with LogContext(engineer=session.engineer, week=session.selected_week):
            totals = aggregate_entries(entries)
            draft = build_email_template(
                session.engineer, session.selected_week, totals
            )
            logger.info(f"Built email draft ({format_hours(totals.total_sum)} hours)")

        if mode == "mailto":
            click.echo(build_mailto_url(draft))
        else:
            click.echo(build_clipboard_text(draft))
            click.echo(
                format_info("Copy the text above into your mail client"), err=True
            )
