"""Timesheet Builder CLI.

This module provides a command-line interface for the weekly timesheet
entry form. It includes commands for selecting the engineer and week,
editing entries, reviewing and validating the week, and exporting it as a
CSV file or an email draft.
"""

from typing import Optional

import click
from pydantic import ValidationError

from timesheet_builder import __version__
from timesheet_builder.cli.commands import (
    add_entry,
    change_week,
    delete_entry,
    duplicate_entry,
    email_draft,
    export_csv,
    list_entries,
    list_weeks,
    reset_entries,
    show_status,
    show_summary,
    start_timesheet,
    update_entry,
    validate_week,
)
from timesheet_builder.cli.error_handlers import (
    ConfigurationError,
    describe_validation_error,
    handle_cli_error,
)
from timesheet_builder.cli.state import CLIState
from timesheet_builder.config.logging_config import LoggingConfig, configure_logging
from timesheet_builder.config.settings import get_config


@click.group(help="Timesheet Builder CLI - Record, review and export weekly timesheets")
@click.version_option(version=__version__)
@click.option(
    "--store",
    type=click.Path(dir_okay=False),
    default=None,
    help="Session file (default: TIMESHEET_STORE_PATH)",
)
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    default=None,
    help="Catalog JSON file (default: TIMESHEET_CATALOG_FILE or built-in)",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Override LOG_LEVEL for this run",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
@click.pass_context
def cli(
    ctx: click.Context,
    store: Optional[str],
    catalog: Optional[str],
    log_level: Optional[str],
    debug: bool,
):
    """Timesheet Builder CLI main entry point."""
    try:
        settings = get_config()
        configure_logging(
            LoggingConfig.from_settings(
                settings, log_level=log_level.upper() if log_level else None
            )
        )
    except ValidationError as e:
        ctx.exit(
            handle_cli_error(
                ConfigurationError(
                    describe_validation_error(e),
                    recovery_hint="Check your environment variables and .env file",
                ),
                debug,
            )
        )
    except ValueError as e:
        ctx.exit(handle_cli_error(ConfigurationError(str(e)), debug))

    ctx.obj = CLIState(settings, store_path=store, catalog_file=catalog, debug=debug)


# Register commands
cli.add_command(start_timesheet)
cli.add_command(show_status)
cli.add_command(list_weeks)
cli.add_command(change_week)
cli.add_command(add_entry)
cli.add_command(update_entry)
cli.add_command(duplicate_entry)
cli.add_command(delete_entry)
cli.add_command(reset_entries)
cli.add_command(list_entries)
cli.add_command(show_summary)
cli.add_command(validate_week)
cli.add_command(export_csv)
cli.add_command(email_draft)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
