"""Variable resolution for authored node properties."""

from __future__ import annotations

from dataclasses import fields, is_dataclass, replace
from typing import TYPE_CHECKING, Any

from selprops.domain.model import NodeProperties, Variable

if TYPE_CHECKING:
    from selprops.domain.model import Theme


def resolve_value(value: Any, theme: Theme | None) -> Any:
    """Replace every variable inside ``value`` with its value under ``theme``.

    Tuples and frozen fill/effect records are walked recursively; anything else
    is returned as is.
    """

    if isinstance(value, Variable):
        return value.resolve(theme)
    if isinstance(value, tuple):
        return tuple(resolve_value(item, theme) for item in value)  # pyright: ignore[reportUnknownVariableType]
    if is_dataclass(value) and not isinstance(value, type):
        changes = {
            f.name: resolve_value(getattr(value, f.name), theme)
            for f in fields(value)
            if f.init
        }
        return replace(value, **changes)
    return value


def resolve_properties(properties: NodeProperties, theme: Theme | None) -> NodeProperties:
    changes = {
        f.name: resolve_value(getattr(properties, f.name), theme) for f in fields(NodeProperties)
    }
    return NodeProperties(**changes)
