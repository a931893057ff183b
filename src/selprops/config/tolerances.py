"""Numeric tolerances used when deciding whether a selection agrees on a value."""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from typing import Final

from .env import float_env_var

ENV_PREFIX: Final[str] = "SELPROPS_"


@dataclass(frozen=True, slots=True)
class ToleranceConfig:
    """Per-property epsilons for ``|a - b| <= epsilon`` comparisons.

    The defaults absorb floating-point drift from transform composition
    without hiding edits a user can actually see.
    """

    position: float = 1e-3
    rotation: float = 1e-4
    size: float = sys.float_info.epsilon
    opacity: float = 0.01
    padding: float = 0.01
    spacing: float = 0.01
    corner_radius: float = 0.01
    stroke_width: float = 0.01
    font_metrics: float = 0.01

    @classmethod
    def env_name(cls, field_name: str) -> str:
        return f"{ENV_PREFIX}{field_name.upper()}_EPSILON"


DEFAULT_TOLERANCES: Final = ToleranceConfig()


def get_tolerance_config() -> ToleranceConfig:
    """Return tolerances with ``SELPROPS_<NAME>_EPSILON`` overrides applied."""

    values = {
        f.name: float_env_var(
            ToleranceConfig.env_name(f.name),
            getattr(DEFAULT_TOLERANCES, f.name),
            minimum=0.0,
        )
        for f in fields(ToleranceConfig)
    }
    return ToleranceConfig(**values)
