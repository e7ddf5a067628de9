"""Unit tests for the TimesheetEntry model."""

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from timesheet_builder.models.entry import EDITABLE_FIELDS, TimesheetEntry


class TestTimesheetEntryCreation:
    """Test creating entries."""

    def test_blank_entry(self):
        """Test that a new entry only needs its week."""
        entry = TimesheetEntry(week=5)

        assert entry.week == 5
        assert entry.id
        for field in EDITABLE_FIELDS:
            assert getattr(entry, field) == ""

    def test_ids_are_unique(self):
        """Test that every entry gets its own id."""
        ids = {TimesheetEntry(week=5).id for _ in range(20)}
        assert len(ids) == 20

    def test_full_entry(self, make_entry):
        """Test an entry with every field filled in."""
        entry = make_entry()

        assert entry.date == "2026-01-26"
        assert entry.start_time == "09:00"
        assert entry.travel_time == "0.5"

    @pytest.mark.parametrize("week", [0, 53])
    def test_week_out_of_range(self, week):
        """Test that weeks outside 1-52 are rejected."""
        with pytest.raises(ValidationError):
            TimesheetEntry(week=week)

    def test_week_is_required(self):
        """Test that an entry cannot exist without a week."""
        with pytest.raises(ValidationError):
            TimesheetEntry()

    def test_unknown_field_rejected(self):
        """Test that fields outside the form are rejected."""
        with pytest.raises(ValidationError):
            TimesheetEntry(week=5, location="Paris")


class TestTimesheetEntryDate:
    """Test date coercion."""

    def test_date_object(self):
        """Test that date objects are stored as ISO strings."""
        entry = TimesheetEntry(week=5, date=dt.date(2026, 1, 27))
        assert entry.date == "2026-01-27"

    def test_datetime_object(self):
        """Test that datetimes keep only their date."""
        entry = TimesheetEntry(week=5, date=dt.datetime(2026, 1, 27, 15, 30))
        assert entry.date == "2026-01-27"

    def test_none_date(self):
        """Test that None is treated as not filled in."""
        assert TimesheetEntry(week=5, date=None).date == ""

    def test_date_is_stored_zero_padded(self):
        """Test that one calendar day always has the same text."""
        assert TimesheetEntry(week=5, date="2026-1-26").date == "2026-01-26"
        assert TimesheetEntry(week=5, date=" 2026-01-26 ").date == "2026-01-26"

    @pytest.mark.parametrize("value", ["20260126", "2026-W05-1", "2026-01-26T09:00"])
    def test_other_iso_spellings_rejected(self, value):
        """Test that only the YYYY-MM-DD form is accepted."""
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            TimesheetEntry(week=5, date=value)

    @pytest.mark.parametrize("value", ["27.01.2026", "2026-13-01", "tomorrow"])
    def test_invalid_date(self, value):
        """Test that non-ISO dates are rejected."""
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            TimesheetEntry(week=5, date=value)


class TestTimesheetEntryTimes:
    """Test the 15-minute grid for start and end times."""

    def test_grid_value(self):
        """Test a value on the grid."""
        assert TimesheetEntry(week=5, start_time="08:45").start_time == "08:45"

    def test_time_object(self):
        """Test that time objects are formatted as HH:MM."""
        entry = TimesheetEntry(week=5, end_time=dt.time(17, 30))
        assert entry.end_time == "17:30"

    @pytest.mark.parametrize("value", ["09:10", "9:00", "24:00", "noon"])
    def test_off_grid_time(self, value):
        """Test that values outside the 96 slots are rejected."""
        with pytest.raises(ValidationError, match="15-minute slot"):
            TimesheetEntry(week=5, start_time=value)

    def test_assignment_is_checked(self):
        """Test that editing a time is validated too."""
        entry = TimesheetEntry(week=5)
        with pytest.raises(ValidationError):
            entry.end_time = "10:07"
        assert entry.end_time == ""


class TestTimesheetEntryTravelTime:
    """Test travel time storage."""

    def test_numbers_are_stored_as_text(self):
        """Test that numeric travel time keeps its form text."""
        assert TimesheetEntry(week=5, travel_time=1.5).travel_time == "1.5"
        assert TimesheetEntry(week=5, travel_time=Decimal("2")).travel_time == "2"

    def test_malformed_text_is_kept(self):
        """Test that non-numeric text is stored as entered."""
        assert TimesheetEntry(week=5, travel_time="abc").travel_time == "abc"

    def test_bool_rejected(self):
        """Test that booleans are not a travel time."""
        with pytest.raises(ValidationError):
            TimesheetEntry(week=5, travel_time=True)


class TestTimesheetEntryIdentity:
    """Test id handling and copying."""

    def test_id_is_frozen(self):
        """Test that the id cannot be reassigned."""
        entry = TimesheetEntry(week=5)
        with pytest.raises(ValidationError):
            entry.id = "other"

    def test_copy_with_new_id(self, make_entry):
        """Test that a copy matches field for field except the id."""
        entry = make_entry(date="2026-03-01")
        copy = entry.copy_with_new_id()

        assert copy.id != entry.id
        assert copy.model_dump(exclude={"id"}) == entry.model_dump(exclude={"id"})
