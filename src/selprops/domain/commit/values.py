"""Coercion of raw editor input into typed property values."""

from __future__ import annotations

import math
from functools import cache
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import BeforeValidator, FiniteFloat, StrictStr, TypeAdapter, ValidationError

from .properties import ValueKind

if TYPE_CHECKING:
    from enum import StrEnum


class InvalidValueError(ValueError):
    """Raised when editor input cannot be coerced for a property."""


def _strip(value: object) -> object:
    if isinstance(value, str):
        return value.strip()
    return value


_NUMBER = TypeAdapter(Annotated[FiniteFloat, BeforeValidator(_strip)])
_BOOLEAN = TypeAdapter(Annotated[bool, BeforeValidator(_strip)])
_STRING = TypeAdapter(StrictStr)


@cache
def _enum_adapter(enum_type: type[StrEnum]) -> TypeAdapter[Any]:
    return TypeAdapter(enum_type)


def coerce_value(
    kind: ValueKind,
    raw: object,
    *,
    enum_type: type[StrEnum] | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
) -> object:
    """Validate ``raw`` for ``kind``; angles are converted from degrees to radians.

    Numbers are clamped into ``[minimum, maximum]`` where a bound is given.
    Raises ``InvalidValueError`` for unparseable input, NaN and infinities.
    """

    try:
        match kind:
            case ValueKind.NUMBER:
                return _clamp(_NUMBER.validate_python(raw), minimum, maximum)
            case ValueKind.ANGLE:
                return math.radians(_NUMBER.validate_python(raw))
            case ValueKind.STRING:
                return _STRING.validate_python(raw)
            case ValueKind.BOOLEAN:
                return _BOOLEAN.validate_python(raw)
            case ValueKind.ENUM:
                if enum_type is None:
                    raise InvalidValueError("enum properties need an enum type")
                return _enum_adapter(enum_type).validate_python(raw)
    except ValidationError as exc:
        raise InvalidValueError(f"cannot read {raw!r} as {kind}") from exc


def _clamp(value: float, minimum: float | None, maximum: float | None) -> float:
    if minimum is not None:
        value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    return value
