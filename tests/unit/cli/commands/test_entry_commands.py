"""Unit tests for the entry editing commands."""

from timesheet_builder.models.session import Session

FULL_ENTRY_ARGS = [
    "--date",
    "2026-01-28",
    "--project",
    "PRJ-1003",
    "--scope",
    "Inspection",
    "--service-category",
    "Field Services",
    "--service-type",
    "Site Survey",
    "--start-time",
    "13:00",
    "--end-time",
    "16:30",
    "--travel-time",
    "1.25",
    "--comments",
    "Site walk",
]


class TestAddCommand:
    """Test suite for the add command."""

    def test_add_prints_id_first(self, run_cli, store, started):
        """Test that the new id is the first output line."""
        result = run_cli("add", *FULL_ENTRY_ARGS)

        assert result.exit_code == 0
        new_id = result.output.splitlines()[0]
        session = store.load()
        assert len(session.entries) == 3
        entry = session.entries[-1]
        assert entry.id == new_id
        assert entry.week == 5
        assert entry.project == "PRJ-1003"
        assert entry.end_time == "16:30"
        assert entry.travel_time == "1.25"

    def test_add_blank_entry_reports_missing_fields(self, run_cli, store, started):
        """Test that a blank entry is stored and its errors shown."""
        result = run_cli("add")

        assert result.exit_code == 0
        assert "date: Required" in result.output
        assert store.load().entries[-1].date == ""

    def test_add_without_week(self, run_cli, store):
        """Test that adding needs a selected week."""
        store.save(Session(engineer="Jane Doe"))

        result = run_cli("add")

        assert result.exit_code == 3
        assert "Select a week before adding entries" in result.output

    def test_add_off_grid_time(self, run_cli, store, started):
        """Test that times off the 15-minute grid are rejected."""
        result = run_cli("add", "--start-time", "09:07")

        assert result.exit_code == 3
        assert "start_time" in result.output
        assert len(store.load().entries) == 2

    def test_add_unknown_project(self, run_cli, store, started):
        """Test that projects outside the catalog are rejected."""
        result = run_cli("add", "--project", "NOPE")

        assert result.exit_code == 3
        assert "Unknown project: NOPE" in result.output
        assert len(store.load().entries) == 2


class TestUpdateCommand:
    """Test suite for the update command."""

    def test_update_by_prefix(self, run_cli, store, started):
        """Test updating an entry addressed by an id prefix."""
        entry_id = started.entries[0].id

        result = run_cli("update", entry_id[:8], "--comments", "Revised")

        assert result.exit_code == 0
        assert f"Updated entry {entry_id}" in result.output
        assert store.load().entries[0].comments == "Revised"

    def test_update_clears_field(self, run_cli, store, started):
        """Test that an empty string clears a field."""
        result = run_cli("update", started.entries[0].id, "--comments", "")

        assert result.exit_code == 0
        assert store.load().entries[0].comments == ""

    def test_update_requires_a_field(self, run_cli, started):
        """Test that update without options is a usage error."""
        result = run_cli("update", started.entries[0].id)

        assert result.exit_code == 2
        assert "Nothing to update" in result.output

    def test_update_unknown_id(self, run_cli, started):
        """Test that unknown ids exit with the data error code."""
        result = run_cli("update", "zzzz", "--comments", "x")

        assert result.exit_code == 3
        assert "No entry with id" in result.output

    def test_update_scope_not_offered(self, run_cli, store, started):
        """Test that a scope of another project is rejected."""
        result = run_cli("update", started.entries[1].id, "--scope", "Piping")

        assert result.exit_code == 3
        assert "Scope not available for project: Piping" in result.output
        assert store.load().entries[1].scope == "Protection"

    def test_update_reports_time_order(self, run_cli, started):
        """Test that an end before the start is stored but reported."""
        result = run_cli("update", started.entries[0].id, "--end-time", "08:00")

        assert result.exit_code == 0
        assert "end_time: End must be after start" in result.output


class TestDuplicateCommand:
    """Test suite for the duplicate command."""

    def test_duplicate(self, run_cli, store, started):
        """Test that the copy gets a new id and overlaps its source."""
        source = started.entries[0]

        result = run_cli("duplicate", source.id)

        assert result.exit_code == 0
        new_id = result.output.splitlines()[0]
        assert new_id != source.id
        entries = store.load().entries
        assert [e.id for e in entries][-1] == new_id
        assert entries[-1].model_dump(exclude={"id"}) == source.model_dump(
            exclude={"id"}
        )
        assert "Overlapping entry" in result.output


class TestDeleteCommand:
    """Test suite for the delete command."""

    def test_delete(self, run_cli, store, started):
        """Test deleting an entry."""
        entry_id = started.entries[0].id

        result = run_cli("delete", entry_id)

        assert result.exit_code == 0
        assert f"Deleted entry {entry_id}" in result.output
        assert [e.id for e in store.load().entries] == [started.entries[1].id]

    def test_delete_unknown_id(self, run_cli, started):
        """Test deleting an id that does not exist."""
        result = run_cli("delete", "zzzz")
        assert result.exit_code == 3


class TestResetCommand:
    """Test suite for the reset command."""

    def test_reset_with_yes(self, run_cli, store, started):
        """Test that reset removes entries but keeps the selection."""
        result = run_cli("reset", "--yes")

        assert result.exit_code == 0
        assert "Removed 2 entries" in result.output
        session = store.load()
        assert session.entries == []
        assert session.engineer == "Jane Doe"
        assert session.selected_week == 5

    def test_reset_all(self, run_cli, store, started):
        """Test that --all also forgets the selection."""
        result = run_cli("reset", "--yes", "--all")

        assert result.exit_code == 0
        assert store.load() == Session()

    def test_reset_confirmed(self, run_cli, store, started):
        """Test answering yes to the confirmation prompt."""
        result = run_cli("reset", input="y\n")

        assert result.exit_code == 0
        assert store.load().entries == []

    def test_reset_declined(self, run_cli, store, started):
        """Test that declining the prompt keeps the entries."""
        result = run_cli("reset", input="n\n")

        assert result.exit_code == 130
        assert "Operation cancelled by user" in result.output
        assert len(store.load().entries) == 2
