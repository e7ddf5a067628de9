"""
Configuration module for the timesheet builder.
"""
from .settings import TimesheetConfig, get_config, load_config, reload_config

__all__ = [
    'TimesheetConfig',
    'get_config',
    'load_config',
    'reload_config'
]
