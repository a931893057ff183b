"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class InvalidConfigurationValueError(ConfigurationError):
    """Raised when a configuration value cannot be parsed or is out of range."""
