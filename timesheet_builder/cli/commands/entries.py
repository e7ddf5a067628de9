"""Entry editing commands: add, update, duplicate, delete and reset."""

import logging
from typing import Any, Callable, Dict

import click
from pydantic import ValidationError

from timesheet_builder.cli.error_handlers import (
    DataValidationError,
    describe_validation_error,
    with_error_handling,
)
from timesheet_builder.cli.state import CLIState, pass_state
from timesheet_builder.cli.utils.formatters import (
    format_field_errors,
    format_info,
    format_success,
    format_warning,
)
from timesheet_builder.models.catalog import Catalog
from timesheet_builder.models.entry import EDITABLE_FIELDS, TimesheetEntry
from timesheet_builder.models.session import Session
from timesheet_builder.services.entry_collection import EntryCollection
from timesheet_builder.utils.logging_utils import LogContext
from timesheet_builder.validators.validator import entry_errors

logger = logging.getLogger(__name__)

_FIELD_HELP = {
    "date": "Work date (YYYY-MM-DD)",
    "project": "Project code",
    "scope": "Project scope, or '-' for none",
    "service_category": "Service category",
    "service_type": "Service type of the category",
    "start_time": "Start time on the 15-minute grid (HH:MM)",
    "end_time": "End time on the 15-minute grid (HH:MM)",
    "travel_time": "Travel time in decimal hours",
    "comments": "Free text comments",
}


def entry_field_options(func: Callable) -> Callable:
    """Add one ``--<field>`` option per editable entry field."""
    for field in reversed(EDITABLE_FIELDS):
        option_name = "--" + field.replace("_", "-")
        func = click.option(
            option_name, field, type=str, default=None, help=_FIELD_HELP[field]
        )(func)
    return func


def _given_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    return {
        field: values[field]
        for field in EDITABLE_FIELDS
        if values.get(field) is not None
    }


def _resolve(collection: EntryCollection, entry_id: str) -> TimesheetEntry:
    try:
        return collection.find_by_prefix(entry_id)
    except KeyError as e:
        raise DataValidationError(
            e.args[0], recovery_hint="Run 'timesheet-cli list' to see entry ids"
        ) from e


def _apply_changes(
    collection: EntryCollection,
    catalog: Catalog,
    entry: TimesheetEntry,
    changes: Dict[str, Any],
) -> TimesheetEntry:
    """Apply ``changes`` and check the result against the catalog.

    Raises:
        DataValidationError: If a value is malformed or not offered by the catalog
    """
    try:
        updated = collection.update(entry.id, **changes)
    except ValidationError as e:
        raise DataValidationError(describe_validation_error(e)) from e

    unknown = {
        field: message
        for field, message in catalog.membership_errors(updated).items()
        if field in changes
    }
    if unknown:
        raise DataValidationError(
            format_field_errors(unknown),
            recovery_hint="Check the project, scope and service values in the catalog",
        )
    return updated


def _store_entries(
    state: CLIState, session: Session, collection: EntryCollection
) -> None:
    session.entries = collection.entries
    state.save_session(session)


def _echo_entry_errors(
    entry: TimesheetEntry, session: Session, collection: EntryCollection
) -> None:
    errors = entry_errors(
        entry, session.selected_week, collection.for_week(session.selected_week)
    )
    if errors:
        click.echo(format_warning(format_field_errors(errors)))


@click.command(name="add")
@entry_field_options
@pass_state
def add_entry(state: CLIState, **values: Any):
    """Add an entry to the selected week and print its id.

    Example:
        timesheet-cli add --date 2026-01-26 --project PRJ-1001 \\
            --start-time 09:00 --end-time 11:00
    """
    with with_error_handling(state.debug):
        session = state.load_session()
        catalog = state.load_catalog()
        collection = EntryCollection(session.entries)

        with LogContext(engineer=session.engineer, week=session.selected_week):
            try:
                entry = collection.add(session.selected_week)
            except ValueError as e:
                raise DataValidationError(
                    str(e), recovery_hint="Run 'timesheet-cli start' first"
                ) from e

            changes = _given_fields(values)
            if changes:
                entry = _apply_changes(collection, catalog, entry, changes)

            _store_entries(state, session, collection)
            logger.info(f"Added entry {entry.id}")

        click.echo(entry.id)
        _echo_entry_errors(entry, session, collection)


@click.command(name="update")
@click.argument("entry_id")
@entry_field_options
@pass_state
def update_entry(state: CLIState, entry_id: str, **values: Any):
    """Change fields of an entry. ENTRY_ID may be a unique id prefix.

    Pass an empty string to clear a field, e.g. ``--comments ""``.
    """
    with with_error_handling(state.debug):
        session = state.load_session()
        catalog = state.load_catalog()
        collection = EntryCollection(session.entries)
        entry = _resolve(collection, entry_id)

        changes = _given_fields(values)
        if not changes:
            raise click.UsageError("Nothing to update; pass at least one field option")

        with LogContext(engineer=session.engineer, week=session.selected_week):
            entry = _apply_changes(collection, catalog, entry, changes)
            _store_entries(state, session, collection)
            logger.info(f"Updated entry {entry.id}: {', '.join(sorted(changes))}")

        click.echo(format_success(f"Updated entry {entry.id}"))
        _echo_entry_errors(entry, session, collection)


@click.command(name="duplicate")
@click.argument("entry_id")
@pass_state
def duplicate_entry(state: CLIState, entry_id: str):
    """Copy an entry under a fresh id and print the new id."""
    with with_error_handling(state.debug):
        session = state.load_session()
        collection = EntryCollection(session.entries)
        source = _resolve(collection, entry_id)

        with LogContext(engineer=session.engineer, week=session.selected_week):
            copy = collection.duplicate(source.id)
            _store_entries(state, session, collection)
            logger.info(f"Duplicated entry {source.id} as {copy.id}")

        click.echo(copy.id)
        _echo_entry_errors(copy, session, collection)


@click.command(name="delete")
@click.argument("entry_id")
@pass_state
def delete_entry(state: CLIState, entry_id: str):
    """Delete an entry. ENTRY_ID may be a unique id prefix."""
    with with_error_handling(state.debug):
        session = state.load_session()
        collection = EntryCollection(session.entries)
        entry = _resolve(collection, entry_id)

        with LogContext(engineer=session.engineer, week=session.selected_week):
            collection.delete(entry.id)
            _store_entries(state, session, collection)
            logger.info(f"Deleted entry {entry.id}")

        click.echo(format_success(f"Deleted entry {entry.id}"))


@click.command(name="reset")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.option(
    "--all",
    "forget_selection",
    is_flag=True,
    help="Also forget the selected engineer and week",
)
@pass_state
def reset_entries(state: CLIState, yes: bool, forget_selection: bool):
    """Delete the entries of every week."""
    with with_error_handling(state.debug):
        session = state.load_session()
        collection = EntryCollection(session.entries)

        if not yes:
            click.confirm(
                f"Delete all {len(collection)} entries of every week?", abort=True
            )

        with LogContext(engineer=session.engineer, week=session.selected_week):
            removed = collection.reset()
            if forget_selection:
                session.clear()
                session.has_started = False
            _store_entries(state, session, collection)
            logger.info(f"Reset removed {removed} entries")

        click.echo(format_success(f"Removed {removed} entries"))
        if forget_selection:
            click.echo(format_info("Engineer and week selection cleared"))
