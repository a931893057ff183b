"""Turn one property edit into per-node patches.

Planning is a pure function of the edit and the selection: it reads nodes,
never writes them, and returns the instructions the executor applies inside
one transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, assert_never, cast

from selprops.domain.applicability import TEXT_TYPES
from selprops.domain.composite import (
    HORIZONTAL,
    HORIZONTAL_EDGES,
    VERTICAL_EDGES,
    compact_corners,
    compact_edges,
    expand_axes,
    expand_corners,
    expand_edges,
)
from selprops.domain.model import DETACH, MIXED, Axis, SizingBehavior, TextGrowth, Variable

from .properties import (
    PROPERTY_SPECS,
    CompositeShape,
    EditableProperty,
    PropertyCategory,
    PropertySpec,
)
from .values import InvalidValueError, coerce_value

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from selprops.domain.model import Edges
    from selprops.domain.ports import SceneNodeView

log = getLogger(__name__)

# Uniform padding is stored compacted; radii and stroke widths as 4-tuples.
_UNIFORM_COMPACTED: Final = frozenset({"layout_padding"})


@dataclass(frozen=True, slots=True)
class CommitInstruction:
    """One node-scoped patch of authored ``NodeProperties`` fields."""

    target: SceneNodeView
    patch: Mapping[str, object]


def plan(
    prop: EditableProperty | str,
    value: object,
    selection: Iterable[SceneNodeView],
) -> tuple[CommitInstruction, ...]:
    """Plan writing ``value`` to ``prop`` on every applicable node of ``selection``.

    ``value`` is raw editor input, a ``Variable`` to link, ``MIXED`` (no-op) or
    ``DETACH`` (replace the authored value with its resolved literal). Input
    problems are logged and yield no instructions; nothing is raised.
    """

    try:
        prop = EditableProperty(prop)
    except ValueError:
        log.error("Unknown property %r, nothing to commit", prop)  # noqa: TRY400
        return ()

    if value is MIXED:
        log.debug("Mixed value committed to %s, nothing to do", prop)
        return ()

    spec = PROPERTY_SPECS[prop]
    incoming = _incoming_value(prop, spec, value)
    if incoming is None:
        return ()

    nodes = [node for node in selection if spec.applies(node.type)]
    try:
        instructions = tuple(
            CommitInstruction(node, MappingProxyType(_patch(spec, node, incoming)))
            for node in nodes
        )
    except ValueError:
        log.exception("Cannot plan %s: a selected node holds malformed data", prop)
        return ()

    log.debug("Planned %d instruction(s) for %s", len(instructions), prop)
    return instructions


def _incoming_value(prop: EditableProperty, spec: PropertySpec, value: object) -> object | None:
    """Validated value to write, or ``None`` when the edit must be dropped."""

    if value is DETACH or isinstance(value, Variable):
        if spec.references:
            return value
        log.warning("%s holds no variable reference, ignoring %r", prop, value)
        return None
    try:
        return coerce_value(
            spec.kind,
            value,
            enum_type=spec.enum_type,
            minimum=spec.minimum,
            maximum=spec.maximum,
        )
    except InvalidValueError:
        log.warning("Invalid value for %s: %r", prop, value)
        return None


def _patch(spec: PropertySpec, node: SceneNodeView, incoming: object) -> dict[str, object]:
    match spec.category:
        case PropertyCategory.SIZING_TOGGLE:
            sizing = spec.sizing if incoming else SizingBehavior.FIXED
            return {spec.field: sizing, **text_reflow_patch(node, cast("Axis", spec.axis))}
        case PropertyCategory.BOOLEAN | PropertyCategory.SCALAR:
            reflow = text_reflow_patch(node, spec.axis) if spec.axis is not None else {}
            # the edited dimension wins over the size captured by the reflow
            return {**reflow, spec.field: _detached(spec, node) if incoming is DETACH else incoming}
        case PropertyCategory.UNIFORM_COMPOSITE:
            return {spec.field: _uniform_composite(spec, node, incoming)}
        case PropertyCategory.AXIS_COMPOSITE:
            return {spec.field: _axis_composite(spec, node, incoming)}
        case PropertyCategory.EDGE_COMPOSITE:
            return {spec.field: _edge_composite(spec, node, incoming)}
        case PropertyCategory.TEXT_GROWTH:
            bounds = node.local_bounds()
            return {spec.field: incoming, "width": bounds.width, "height": bounds.height}
        case _:
            assert_never(spec.category)


def _detached(spec: PropertySpec, node: SceneNodeView) -> object:
    return getattr(node.resolved, spec.field)


def _expand(spec: PropertySpec, stored: Any) -> Edges[Any]:
    if spec.shape is CompositeShape.CORNERS:
        return expand_corners(stored, 0.0)
    return expand_edges(stored, 0.0)


def _compact(spec: PropertySpec, entries: Edges[Any]) -> object:
    if spec.shape is CompositeShape.CORNERS:
        return compact_corners(entries)
    return compact_edges(entries)


def _uniform_composite(spec: PropertySpec, node: SceneNodeView, incoming: object) -> object:
    if incoming is DETACH:
        return _expand(spec, getattr(node.resolved, spec.field))
    if spec.field in _UNIFORM_COMPACTED:
        return compact_edges((incoming, incoming, incoming, incoming))
    return (incoming, incoming, incoming, incoming)


def _axis_composite(spec: PropertySpec, node: SceneNodeView, incoming: object) -> object:
    """Edit one axis of an edge composite, keeping the stored shape where possible.

    A stored 4-tuple stays a 4-tuple and both edges of the axis are written;
    anything smaller becomes a ``(horizontal, vertical)`` pair.
    """

    authored = getattr(node.properties, spec.field)
    resolved = getattr(node.resolved, spec.field)
    axis_index = cast("int", spec.index)

    if isinstance(authored, tuple) and len(authored) == 4:  # pyright: ignore[reportUnknownArgumentType]
        edges = list(cast("Edges[Any]", authored))
        resolved_edges = expand_edges(resolved, 0.0)
        for edge in HORIZONTAL_EDGES if axis_index == HORIZONTAL else VERTICAL_EDGES:
            edges[edge] = resolved_edges[edge] if incoming is DETACH else incoming
        return tuple(edges)

    pair = list(expand_axes(authored, 0.0))
    pair[axis_index] = expand_axes(resolved, 0.0)[axis_index] if incoming is DETACH else incoming
    return tuple(pair)


def _edge_composite(spec: PropertySpec, node: SceneNodeView, incoming: object) -> object:
    """Overwrite one entry of the canonical 4-tuple; the others keep their authored value.

    The result is written back in its smallest lossless stored shape.
    """

    index = cast("int", spec.index)
    entries = list(_expand(spec, getattr(node.properties, spec.field)))
    if incoming is DETACH:
        entries[index] = _expand(spec, getattr(node.resolved, spec.field))[index]
    else:
        entries[index] = incoming
    return _compact(spec, cast("Edges[Any]", tuple(entries)))


def text_reflow_patch(node: SceneNodeView, axis: Axis) -> dict[str, object]:
    """Pin an auto-growing text node to its current size before a resize.

    Auto (or unset) growth becomes ``fixed_width`` for a horizontal edit and
    ``fixed_width_height`` for a vertical one; ``fixed_width`` only upgrades
    on a vertical edit. Other nodes and growth modes need no change.
    """

    if node.type not in TEXT_TYPES:
        return {}
    growth = node.properties.text_growth
    if growth is None or growth is TextGrowth.AUTO:
        target = (
            TextGrowth.FIXED_WIDTH_HEIGHT if axis is Axis.VERTICAL else TextGrowth.FIXED_WIDTH
        )
    elif growth is TextGrowth.FIXED_WIDTH and axis is Axis.VERTICAL:
        target = TextGrowth.FIXED_WIDTH_HEIGHT
    else:
        return {}
    bounds = node.local_bounds()
    return {"text_growth": target, "width": bounds.width, "height": bounds.height}
