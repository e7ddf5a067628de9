"""Tests for field-level validators."""

from timesheet_builder.models.entry import TimesheetEntry
from timesheet_builder.validators.field_validators import (
    REQUIRED_FIELDS,
    FieldValidators,
    validate_entry_fields,
)


class TestRequiredFields:
    """Tests for the required field check."""

    def test_blank_entry_has_exactly_seven_required_errors(self):
        """Test that a blank entry reports every required field and nothing else."""
        errors = validate_entry_fields(TimesheetEntry(week=5), 5)

        assert len(errors) == 7
        assert set(errors) == set(REQUIRED_FIELDS)
        assert set(errors.values()) == {"Required"}

    def test_travel_and_comments_are_optional(self, make_entry):
        """Test that travel time and comments may stay empty."""
        entry = make_entry(travel_time="", comments="")
        assert validate_entry_fields(entry, 5) == {}

    def test_single_missing_field(self, make_entry):
        """Test that only the empty field is reported."""
        errors = {}
        FieldValidators.validate_required(make_entry(scope=""), errors)
        assert errors == {"scope": "Required"}


class TestTimeOrder:
    """Tests for the end-after-start check."""

    def test_equal_times(self, make_entry):
        """Test that equal start and end give only the time order error."""
        entry = make_entry(start_time="09:00", end_time="09:00")
        assert validate_entry_fields(entry, 5) == {
            "end_time": "End must be after start"
        }

    def test_end_before_start(self, make_entry):
        """Test an end time before the start time."""
        entry = make_entry(start_time="10:00", end_time="09:00")
        assert validate_entry_fields(entry, 5)["end_time"] == "End must be after start"

    def test_missing_start_is_only_required(self, make_entry):
        """Test that the order check needs both times."""
        errors = validate_entry_fields(make_entry(start_time=""), 5)
        assert errors == {"start_time": "Required"}

    def test_order_error_replaces_required(self):
        """Test that the later check wins on the same field."""
        entry = TimesheetEntry(week=5, start_time="10:00", end_time="10:00")
        errors = validate_entry_fields(entry, 5)
        assert errors["end_time"] == "End must be after start"
        assert "start_time" not in errors


class TestTravelTime:
    """Tests for the travel time check."""

    def test_negative_travel(self, make_entry):
        """Test that negative travel time is reported."""
        errors = validate_entry_fields(make_entry(travel_time="-1"), 5)
        assert errors == {"travel_time": "Must be >= 0"}

    def test_zero_travel(self, make_entry):
        """Test that zero travel time is valid."""
        assert validate_entry_fields(make_entry(travel_time="0"), 5) == {}

    def test_non_numeric_travel_is_not_an_error(self, make_entry):
        """Test that non-numeric travel counts as zero rather than failing."""
        assert validate_entry_fields(make_entry(travel_time="abc"), 5) == {}


class TestWeekContainment:
    """Tests for the date-in-week check."""

    def test_date_in_next_week(self, make_entry):
        """Test that a date after the week is reported."""
        errors = validate_entry_fields(make_entry(date="2026-02-02"), 5)
        assert errors == {"date": "Date must be inside the week"}

    def test_week_bounds_are_inclusive(self, make_entry):
        """Test Monday and Sunday of the week."""
        assert validate_entry_fields(make_entry(date="2026-01-26"), 5) == {}
        assert validate_entry_fields(make_entry(date="2026-02-01"), 5) == {}

    def test_no_week_selected(self, make_entry):
        """Test that containment is not checked without a week."""
        assert validate_entry_fields(make_entry(date="2026-06-01"), None) == {}
