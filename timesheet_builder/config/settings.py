"""
Configuration management for the timesheet builder.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimesheetConfig(BaseSettings):
    """Configuration settings for the timesheet builder."""

    # Storage Configuration
    store_path: str = Field(
        default=".timesheet_session.json", alias="TIMESHEET_STORE_PATH"
    )
    catalog_file: Optional[str] = Field(default=None, alias="TIMESHEET_CATALOG_FILE")
    export_dir: str = Field(default=".", alias="TIMESHEET_EXPORT_DIR")

    # Diagnostics
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("store_path", "export_dir")
    @classmethod
    def validate_path_not_empty(cls, v, info):
        """Ensure path settings are not blank."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v.strip()

    @field_validator("catalog_file")
    @classmethod
    def validate_catalog_file(cls, v):
        """Treat a blank catalog path as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


def load_config(env_file: Optional[str] = None) -> TimesheetConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TimesheetConfig()


# Global configuration instance
_config: Optional[TimesheetConfig] = None


def get_config() -> TimesheetConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TimesheetConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
