"""Configuration loading and validation."""

from .settings import ConfigurationError, Settings, log_settings_problems, validate_settings

__all__ = [
    "ConfigurationError",
    "Settings",
    "log_settings_problems",
    "validate_settings",
]
