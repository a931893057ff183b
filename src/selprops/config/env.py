"""Environment variable loaders for configuration."""

from __future__ import annotations

import math
import os

from .errors import InvalidConfigurationValueError


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name`` or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def float_env_var(name: str, default: float, *, minimum: float | None = None) -> float:
    """Return a float environment override or ``default`` when unset."""

    raw = optional_env_var(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidConfigurationValueError(f"{name} must be a number, got {raw!r}") from exc
    if math.isnan(value):
        raise InvalidConfigurationValueError(f"{name} must be a number, got {raw!r}")
    if minimum is not None and value < minimum:
        raise InvalidConfigurationValueError(f"{name} must be >= {minimum}, got {raw!r}")
    return value
