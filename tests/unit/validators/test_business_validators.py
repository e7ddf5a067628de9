"""Tests for cross-entry business rules."""

from decimal import Decimal

from timesheet_builder.validators.business_validators import BusinessRuleValidators
from timesheet_builder.validators.validation_report import ValidationReport


class TestOverlap:
    """Tests for overlap detection."""

    def test_partial_overlap_both_ways(self, make_entry):
        """Test [09:00,10:00) and [09:30,10:30) overlap from either side."""
        first = make_entry(start_time="09:00", end_time="10:00")
        second = make_entry(start_time="09:30", end_time="10:30")
        siblings = [first, second]

        assert BusinessRuleValidators.has_overlap(first, siblings)
        assert BusinessRuleValidators.has_overlap(second, siblings)

    def test_touching_intervals_do_not_overlap(self, make_entry):
        """Test [09:00,10:00) and [10:00,11:00) are adjacent, not overlapping."""
        first = make_entry(start_time="09:00", end_time="10:00")
        second = make_entry(start_time="10:00", end_time="11:00")
        siblings = [first, second]

        assert not BusinessRuleValidators.has_overlap(first, siblings)
        assert not BusinessRuleValidators.has_overlap(second, siblings)

    def test_contained_interval(self, make_entry):
        """Test an entry fully inside another one."""
        outer = make_entry(start_time="08:00", end_time="12:00")
        inner = make_entry(start_time="09:00", end_time="10:00")
        assert BusinessRuleValidators.has_overlap(inner, [outer, inner])

    def test_different_dates_never_overlap(self, make_entry):
        """Test that the same times on different dates are fine."""
        first = make_entry(date="2026-01-26")
        second = make_entry(date="2026-01-27")
        assert not BusinessRuleValidators.has_overlap(first, [first, second])

    def test_same_day_written_differently(self, make_entry):
        """Test that an unpadded date still clashes with the padded one."""
        first = make_entry(date="2026-01-26", start_time="09:00", end_time="10:00")
        second = make_entry(date="2026-1-26", start_time="09:30", end_time="10:30")

        assert BusinessRuleValidators.has_overlap(first, [first, second])
        assert BusinessRuleValidators.has_overlap(second, [first, second])

    def test_entry_does_not_overlap_itself(self, make_entry):
        """Test that the entry is skipped by id."""
        entry = make_entry()
        assert not BusinessRuleValidators.has_overlap(entry, [entry])

    def test_entry_without_date(self, make_entry):
        """Test that undated entries are never overlapping."""
        first = make_entry(date="")
        second = make_entry(date="")
        assert not BusinessRuleValidators.has_overlap(first, [first, second])

    def test_unset_start_compares_as_minus_one(self, make_entry):
        """Test that an unset start spans from slot -1 to its end."""
        open_start = make_entry(start_time="", end_time="10:00")
        other = make_entry(start_time="09:00", end_time="09:30")
        assert BusinessRuleValidators.has_overlap(open_start, [open_start, other])

    def test_two_blank_time_ranges(self, make_entry):
        """Test that two entries without times do not overlap."""
        first = make_entry(start_time="", end_time="")
        second = make_entry(start_time="", end_time="")
        assert not BusinessRuleValidators.has_overlap(first, [first, second])


class TestDailyHours:
    """Tests for the long day advisories."""

    def test_long_single_entry(self, make_entry):
        """Test a warning for one entry longer than ten hours."""
        report = ValidationReport()
        entry = make_entry(start_time="07:00", end_time="18:00")

        BusinessRuleValidators.validate_entry_hours(entry, report)

        assert report.is_valid()
        assert report.warning_count == 1
        assert report.issues[0].field == "hours"
        assert report.issues[0].value == Decimal("11.00")

    def test_normal_entry(self, make_entry):
        """Test that a regular entry is not flagged."""
        report = ValidationReport()
        BusinessRuleValidators.validate_entry_hours(make_entry(), report)
        assert report.issues == []

    def test_long_day_over_several_entries(self, make_entry):
        """Test that hours are summed per date."""
        report = ValidationReport()
        entries = [
            make_entry(start_time="06:00", end_time="12:00"),
            make_entry(start_time="12:00", end_time="17:00"),
            make_entry(date="2026-01-27", start_time="09:00", end_time="17:00"),
        ]

        BusinessRuleValidators.validate_daily_hours(entries, report)

        assert report.warning_count == 1
        issue = report.issues[0]
        assert issue.field == "daily_hours"
        assert issue.message == "Long day: more than 10 hours"
        assert issue.date == "2026-01-26"
        assert issue.entry_id is None


class TestTravelTimeText:
    """Tests for the note on travel time that is not a number."""

    def test_unreadable_travel_time(self, make_entry):
        """Test an INFO issue for text that counts as zero."""
        report = ValidationReport()
        entry = make_entry(travel_time="about 1h")

        BusinessRuleValidators.validate_travel_time_text(entry, report)

        assert report.is_valid()
        assert report.info_count == 1
        issue = report.issues[0]
        assert issue.field == "travel_time"
        assert issue.value == "about 1h"
        assert issue.entry_id == entry.id

    def test_numbers_and_blank_are_not_noted(self, make_entry):
        """Test that numeric and empty travel times pass silently."""
        report = ValidationReport()
        for value in ("", "0", "1.5", "-2"):
            BusinessRuleValidators.validate_travel_time_text(
                make_entry(travel_time=value), report
            )
        assert report.issues == []
