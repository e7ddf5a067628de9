"""Validate week command."""

import click

from timesheet_builder.calculators.week_utils import format_week_range
from timesheet_builder.cli.error_handlers import (
    DataValidationError,
    with_error_handling,
)
from timesheet_builder.cli.state import CLIState, pass_state
from timesheet_builder.cli.utils.formatters import (
    format_error,
    format_info,
    format_key_values,
    format_success,
    format_warning,
)
from timesheet_builder.utils.logging_utils import LogContext
from timesheet_builder.validators.validation_report import (
    ValidationIssue,
    ValidationSeverity,
)
from timesheet_builder.validators.validator import TimesheetValidator

MAX_ISSUES_PER_SEVERITY = 20


def _describe_issue(issue: ValidationIssue) -> str:
    if issue.location:
        return f"  {issue.field}: {issue.message} [{issue.location}]"
    return f"  {issue.field}: {issue.message}"


_STYLES = {
    ValidationSeverity.ERROR: format_error,
    ValidationSeverity.WARNING: format_warning,
    ValidationSeverity.INFO: format_info,
}


@click.command(name="validate")
@click.option(
    "--severity",
    type=click.Choice(["error", "warning", "info"], case_sensitive=False),
    default="warning",
    help="Minimum severity level to display (default: warning)",
)
@click.pass_context
@pass_state
def validate_week(state: CLIState, ctx: click.Context, severity: str):
    """Validate the entries of the selected week.

    Checks for:
    - Required fields and time order
    - Travel time and week containment
    - Overlapping entries on the same date
    - Long days (reported as warnings)
    - Travel times that are not numbers (info, counted as 0)

    Exits with code 1 if errors are found.

    Example:
        timesheet-cli validate
        timesheet-cli validate --severity info
    """
    with with_error_handling(state.debug):
        session = state.load_session()
        if not session.selected_week:
            raise DataValidationError(
                "No week selected", recovery_hint="Run 'timesheet-cli start' first"
            )

        severity_level = ValidationSeverity[severity.upper()]
        week_entries = [e for e in session.entries if e.week == session.selected_week]

        click.echo(
            format_info(f"Validating {format_week_range(session.selected_week)}...")
        )
        with LogContext(engineer=session.engineer, week=session.selected_week):
            report = TimesheetValidator().validate_week(
                week_entries, session.selected_week
            )

        click.echo()
        click.echo("=" * 60)
        click.echo("Validation Summary")
        click.echo("=" * 60)
        click.echo(
            format_key_values(
                [
                    ("Entries checked", str(len(week_entries))),
                    ("Errors", str(report.error_count)),
                    ("Warnings", str(report.warning_count)),
                    ("Info", str(report.info_count)),
                ]
            )
        )

        for sev in sorted(ValidationSeverity, reverse=True):
            if sev < severity_level:
                continue
            sev_issues = report.filter(sev, exact=True)
            if not sev_issues:
                continue
            click.echo()
            click.echo(f"{sev.name}S ({len(sev_issues)}):")
            for issue in sev_issues[:MAX_ISSUES_PER_SEVERITY]:
                click.echo(_STYLES[sev](_describe_issue(issue)))
            if len(sev_issues) > MAX_ISSUES_PER_SEVERITY:
                remaining = len(sev_issues) - MAX_ISSUES_PER_SEVERITY
                click.echo(f"  ... and {remaining} more")

        click.echo()
        if report.has_errors():
            click.echo(
                format_error(f"Validation failed with {report.error_count} error(s)")
            )
            ctx.exit(1)
        elif report.warning_count:
            click.echo(
                format_warning(
                    f"Validation completed with {report.warning_count} warning(s)"
                )
            )
        else:
            click.echo(format_success("Validation passed! No issues found."))
