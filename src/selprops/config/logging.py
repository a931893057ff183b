"""Shared logging helpers for selprops."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import InvalidConfigurationValueError

LOG_LEVEL_ENV = "SELPROPS_LOG_LEVEL"


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``SELPROPS_LOG_LEVEL`` (a level name such as ``DEBUG``) or INFO.
    Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level if level is not None else log_level_from_env(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def log_level_from_env(default: int = logging.INFO) -> int:
    raw = optional_env_var(LOG_LEVEL_ENV)
    if raw is None:
        return default
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise InvalidConfigurationValueError(f"{LOG_LEVEL_ENV} is not a log level: {raw!r}")
    return level
