"""Engineer and week selection commands."""

import logging
from typing import Optional

import click

from timesheet_builder.calculators.week_utils import (
    WEEKS_PER_YEAR,
    clamp_week,
    format_week_range,
    generate_weeks,
    next_week,
    previous_week,
)
from timesheet_builder.cli.error_handlers import (
    DataValidationError,
    with_error_handling,
)
from timesheet_builder.cli.state import CLIState, pass_state
from timesheet_builder.cli.utils.formatters import (
    format_info,
    format_key_values,
    format_success,
    format_warning,
)
from timesheet_builder.utils.logging_utils import LogContext

logger = logging.getLogger(__name__)

WEEK_NUMBER = click.IntRange(1, WEEKS_PER_YEAR)


@click.command(name="start")
@click.option(
    "--engineer", required=True, type=str, help="Engineer submitting the timesheet"
)
@click.option(
    "--week", "week_number", required=True, type=WEEK_NUMBER, help="ISO week (1-52)"
)
@pass_state
def start_timesheet(state: CLIState, engineer: str, week_number: int):
    """Select the engineer and week to work on.

    Entries already recorded for other weeks are kept.

    Example:
        timesheet-cli start --engineer "Jane Doe" --week 5
    """
    with with_error_handling(state.debug):
        catalog = state.load_catalog()
        if engineer not in catalog.engineers:
            raise DataValidationError(
                f"Unknown engineer: {engineer}",
                recovery_hint=f"Choose one of: {', '.join(catalog.engineers)}",
            )

        session = state.load_session()
        session.engineer = engineer
        session.selected_week = week_number
        session.has_started = True

        with LogContext(engineer=engineer, week=week_number):
            state.save_session(session)
            logger.info("Timesheet started")

        click.echo(
            format_success(
                f"Started timesheet for {catalog.engineer_label(engineer)}, "
                f"{format_week_range(week_number)}"
            )
        )


@click.command(name="status")
@pass_state
def show_status(state: CLIState):
    """Show the selected engineer and week."""
    with with_error_handling(state.debug):
        session = state.load_session()
        week_label = (
            format_week_range(session.selected_week) if session.selected_week else "-"
        )
        click.echo(
            format_key_values(
                [
                    ("Engineer", session.engineer or "-"),
                    ("Week", week_label),
                    ("Started", "yes" if session.has_started else "no"),
                    ("Entries", str(len(session.entries))),
                ]
            )
        )
        if not session.has_started:
            click.echo(format_info("Run 'timesheet-cli start' to begin"))


@click.command(name="weeks")
@pass_state
def list_weeks(state: CLIState):
    """List the selectable weeks; the selected one is marked with '*'."""
    with with_error_handling(state.debug):
        session = state.load_session()
        for week_number in generate_weeks():
            marker = "*" if week_number == session.selected_week else " "
            click.echo(f"{marker} {format_week_range(week_number)}")


@click.command(name="week")
@click.argument("action", type=click.Choice(["next", "prev", "set"]))
@click.argument("week_number", required=False, type=int)
@pass_state
def change_week(state: CLIState, action: str, week_number: Optional[int]):
    """Move the selected week.

    ``next`` and ``prev`` stop at weeks 52 and 1.

    Example:
        timesheet-cli week next
        timesheet-cli week set 7
    """
    with with_error_handling(state.debug):
        session = state.load_session()
        current = session.selected_week

        if action == "set":
            if week_number is None:
                raise click.UsageError("'week set' requires a week number")
            if week_number != clamp_week(week_number):
                raise click.BadParameter(
                    f"{week_number} is not in the range 1<=x<={WEEKS_PER_YEAR}",
                    param_hint="WEEK_NUMBER",
                )
            target = week_number
        elif action == "next":
            target = next_week(current)
        else:
            target = previous_week(current)

        if target == current:
            click.echo(format_warning(f"Already at {format_week_range(target)}"))
            return

        session.selected_week = target
        with LogContext(engineer=session.engineer, week=target):
            state.save_session(session)
            logger.info(f"Week changed from {current} to {target}")

        visible = sum(1 for entry in session.entries if entry.week == target)
        click.echo(format_success(f"Selected {format_week_range(target)}"))
        noun = "entry" if visible == 1 else "entries"
        click.echo(format_info(f"{visible} {noun} in this week"))
