"""Helper utilities for terminal output and user settings."""

from create_c_project.helpers.settings import (
    ConfigError,
    Settings,
    load_settings,
)

__all__ = [
    "ConfigError",
    "Settings",
    "load_settings",
]
