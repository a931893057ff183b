"""Authored values, indirect references and the sentinels shared by read and write paths."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Literal

from .enums import VariableType

type Theme = Mapping[str, str]
type VariableValue = bool | float | str


class Mixed(Enum):
    """Marker for a field on which the current selection disagrees."""

    MIXED = "Mixed"

    def __repr__(self) -> str:
        return "MIXED"


class Detach(Enum):
    """Commit signal: replace an authored reference with its resolved literal."""

    DETACH = "detach"

    def __repr__(self) -> str:
        return "DETACH"


MIXED: Final = Mixed.MIXED
DETACH: Final = Detach.DETACH

type MixedType = Literal[Mixed.MIXED]
type DetachType = Literal[Detach.DETACH]

_VARIABLE_DEFAULTS: Final[Mapping[VariableType, VariableValue]] = {
    VariableType.BOOLEAN: False,
    VariableType.NUMBER: 0.0,
    VariableType.COLOR: "#000000",
    VariableType.STRING: "",
}


@dataclass(frozen=True, slots=True)
class ThemedValue:
    """One variable value, optionally constrained to a set of theme axes."""

    value: VariableValue
    theme: Theme | None = None

    def matches(self, theme: Theme) -> bool:
        if not self.theme:
            return True
        return all(theme.get(axis) == option for axis, option in self.theme.items())


@dataclass(eq=False, kw_only=True)
class Variable:
    """Indirect reference to an externally resolved value.

    Variables compare by identity: two variables resolving to the same value
    are still different references for editing purposes.
    """

    name: str
    type: VariableType
    values: tuple[ThemedValue, ...] = field(default_factory=tuple)

    @property
    def default_value(self) -> VariableValue:
        return _VARIABLE_DEFAULTS[self.type]

    def resolve(self, theme: Theme | None = None) -> VariableValue:
        """Return the last themed value matching ``theme``, else the type default."""

        active = theme or {}
        for themed in reversed(self.values):
            if themed.matches(active):
                return themed.value
        return self.default_value

    def __repr__(self) -> str:
        return f"Variable({self.name!r})"


type Value[T] = T | Variable


@dataclass(frozen=True, slots=True)
class DualValue[T]:
    """A field seen both as authored (possibly indirect) and fully resolved."""

    authored: Value[T] | tuple[Value[float], ...]
    resolved: T

    @property
    def is_reference(self) -> bool:
        return isinstance(self.authored, Variable)
