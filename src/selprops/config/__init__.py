"""Application configuration helpers."""

from __future__ import annotations

from .env import float_env_var, optional_env_var
from .errors import ConfigurationError, InvalidConfigurationValueError
from .logging import configure_logging, log_level_from_env
from .tolerances import DEFAULT_TOLERANCES, ToleranceConfig, get_tolerance_config

__all__ = [
    "DEFAULT_TOLERANCES",
    "ConfigurationError",
    "InvalidConfigurationValueError",
    "ToleranceConfig",
    "configure_logging",
    "float_env_var",
    "get_tolerance_config",
    "log_level_from_env",
    "optional_env_var",
]
