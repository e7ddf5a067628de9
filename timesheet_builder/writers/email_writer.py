"""Email draft generation for timesheet submission.

The body is built for pre-filling a mail client through a ``mailto:`` link,
so its line breaks are the already-escaped ``%0D%0A`` sequence rather than
literal newlines. The same draft can be rendered as plain text for the
clipboard.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, unquote

from timesheet_builder.aggregators.weekly_aggregator import WeeklyTotals
from timesheet_builder.calculators.entry_calculator import format_hours
from timesheet_builder.calculators.week_utils import (
    ISO_YEAR,
    format_week_period,
    get_date_bounds,
)

MAILTO_LINE_BREAK = "%0D%0A"

# Characters encodeURIComponent leaves alone besides letters, digits and "_.-~"
_URI_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class EmailDraft:
    """Subject and ``mailto``-ready body of a timesheet submission email."""

    subject: str = ""
    body: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.subject and not self.body


def build_email_template(
    engineer: Optional[str],
    week_number: Optional[int],
    totals: WeeklyTotals,
) -> EmailDraft:
    """Build the submission email for an engineer's week.

    Args:
        engineer: Selected engineer name
        week_number: Selected ISO week
        totals: Aggregated totals of the week's entries

    Returns:
        EmailDraft; both fields are empty when engineer or week is unset

    Example:
        >>> draft = build_email_template("Jane Doe", 5, totals)
        >>> draft.subject
        'Timesheet Submission - Jane Doe - Week 05 - 2026'
    """
    if not engineer or not week_number:
        return EmailDraft()

    week_label = f"Week {int(week_number):02d}"
    bounds = get_date_bounds(week_number)
    projects = ", ".join(totals.projects) or "N/A"

    subject = f"Timesheet Submission - {engineer} - {week_label} - {ISO_YEAR}"
    lines = [
        "Dear Manager,",
        f"Please find attached my timesheet for {week_label} "
        f"({format_week_period(week_number)}).",
        "",
        "Summary:",
        "",
        f"Total Hours: {format_hours(totals.total_sum)} hours",
        f"Projects: {projects}",
        f"Period: {bounds['min']} to {bounds['max']}",
        f"Week: {week_label} of {ISO_YEAR}",
        "",
        "Best regards,",
        engineer,
    ]
    return EmailDraft(subject=subject, body=MAILTO_LINE_BREAK.join(lines))


def build_mailto_url(draft: EmailDraft) -> str:
    """Build a ``mailto:`` URL with URL-encoded subject and body.

    Each body line is encoded separately and the lines are joined with the
    ``%0D%0A`` break, which must reach the mail client unescaped.
    """
    subject = quote(draft.subject, safe=_URI_COMPONENT_SAFE)
    body = MAILTO_LINE_BREAK.join(
        quote(line, safe=_URI_COMPONENT_SAFE)
        for line in draft.body.split(MAILTO_LINE_BREAK)
    )
    return f"mailto:?subject={subject}&body={body}"


def build_clipboard_text(draft: EmailDraft) -> str:
    """Render the draft as plain text: a subject line, a blank line, the body."""
    body = unquote(draft.body.replace(MAILTO_LINE_BREAK, "\n"))
    return f"Subject: {draft.subject}\n\n{body}"
