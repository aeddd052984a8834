"""Configuration module for hookpoint."""

from .hooks import HookSettings
from .logging import LoggingSettings, setup_logging_from_settings
from .settings import ConfigurationError, Settings, get_settings


__all__ = [
    "ConfigurationError",
    "HookSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "setup_logging_from_settings",
]
