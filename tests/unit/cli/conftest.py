"""Fixtures shared by the CLI tests."""

import pytest
from click.testing import CliRunner

from timesheet_builder.cli import cli
from timesheet_builder.models.session import Session
from timesheet_builder.services.session_store import SessionStore


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store(tmp_path):
    """Session store in a temporary directory."""
    return SessionStore(tmp_path / "session.json")


@pytest.fixture
def run_cli(runner, store, mock_env):
    """Invoke the CLI against the temporary session file."""

    def _run(*args, input=None):
        return runner.invoke(
            cli,
            ["--store", str(store.path), "--log-level", "ERROR", *args],
            input=input,
        )

    return _run


@pytest.fixture
def started(store, sample_entries):
    """Week 5 of Jane Doe with the two sample entries."""
    session = Session(
        engineer="Jane Doe",
        selected_week=5,
        has_started=True,
        entries=sample_entries,
    )
    store.save(session)
    return session


@pytest.fixture
def empty_week(store):
    """Week 5 of Jane Doe without entries."""
    session = Session(engineer="Jane Doe", selected_week=5, has_started=True)
    store.save(session)
    return session
