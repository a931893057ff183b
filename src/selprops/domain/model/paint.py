"""Fill and effect value objects.

All of them are frozen so that structural equality is plain ``==``; variables
nested inside compare by identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import EffectType, FillType, StretchMode
from .values import Value


@dataclass(frozen=True, slots=True)
class ColorFill:
    color: Value[str]
    enabled: Value[bool] = True
    type: FillType = FillType.COLOR


@dataclass(frozen=True, slots=True)
class ColorStop:
    position: Value[float]
    color: Value[str]


@dataclass(frozen=True, slots=True)
class GradientFill:
    type: FillType
    stops: tuple[ColorStop, ...]
    center: tuple[float, float] = (0.5, 0.5)
    size: tuple[Value[float], Value[float]] = (1.0, 1.0)
    rotation_degrees: Value[float] = 0.0
    opacity_percent: Value[float] = 100.0
    enabled: Value[bool] = True

    def __post_init__(self) -> None:
        if self.type not in (
            FillType.LINEAR_GRADIENT,
            FillType.RADIAL_GRADIENT,
            FillType.ANGULAR_GRADIENT,
        ):
            raise ValueError(f"not a gradient fill type: {self.type}")


@dataclass(frozen=True, slots=True)
class ImageFill:
    url: Value[str]
    mode: StretchMode = StretchMode.FILL
    opacity_percent: Value[float] = 100.0
    enabled: Value[bool] = True
    type: FillType = FillType.IMAGE


type Fill = ColorFill | GradientFill | ImageFill


@dataclass(frozen=True, slots=True)
class Effect:
    type: EffectType
    enabled: Value[bool] = True
    radius: Value[float] = 0.0
    offset: tuple[Value[float], Value[float]] = (0.0, 0.0)
    spread: Value[float] = 0.0
    color: Value[str] = "#00000040"
