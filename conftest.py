"""
Global pytest configuration and fixtures.
"""
import os
from typing import Dict, List

import pytest

from timesheet_builder.config import TimesheetConfig, reload_config
from timesheet_builder.config.logging_config import reset_logging
from timesheet_builder.models.entry import TimesheetEntry


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "TIMESHEET_STORE_PATH": "test_session.json",
        "TIMESHEET_EXPORT_DIR": "exports",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("TIMESHEET_CATALOG_FILE", raising=False)

    # Clear the global config to force reload with test values
    import timesheet_builder.config.settings

    timesheet_builder.config.settings._config = None

    yield test_env_vars

    timesheet_builder.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TimesheetConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def make_entry():
    """Factory for week-5 entries; keyword arguments override the defaults."""

    def _make(**overrides) -> TimesheetEntry:
        values = {
            "week": 5,
            "date": "2026-01-26",
            "project": "PRJ-1001",
            "scope": "Structural",
            "service_category": "Engineering",
            "service_type": "Design",
            "start_time": "09:00",
            "end_time": "11:00",
            "travel_time": "0.5",
            "comments": "Kick-off",
        }
        values.update(overrides)
        return TimesheetEntry(**values)

    return _make


@pytest.fixture
def sample_entries(make_entry) -> List[TimesheetEntry]:
    """Two valid entries of week 5 on different days."""
    return [
        make_entry(),
        make_entry(
            date="2026-01-27",
            project="PRJ-1002",
            scope="Protection",
            service_category="Field Services",
            service_type="Inspection",
            start_time="08:00",
            end_time="11:00",
            travel_time="0",
            comments="",
        ),
    ]


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Drop root handlers installed by CLI invocations."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    test_files = ["coverage.xml", ".coverage"]
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "cli: mark test as exercising the CLI")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "tests/unit/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
