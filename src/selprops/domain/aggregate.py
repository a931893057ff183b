"""Fold a selection into one ``value | MIXED`` per displayable field.

The fold is a single pass over the selection. Each step takes the previous
``Accumulator`` and one node and returns a new accumulator; nothing is
mutated, so the result depends only on the multiset of nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from logging import DEBUG, getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, assert_never

from selprops.config import get_tolerance_config
from selprops.domain.extractors import GroupExtractor, PropertyGroup, build_extractors
from selprops.domain.merge import UNSEEN, merge_span, representative
from selprops.domain.model import MIXED

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from selprops.config import ToleranceConfig
    from selprops.domain.model import (
        AlignItems,
        DualValue,
        Edges,
        Effect,
        Fill,
        JustifyContent,
        LayoutMode,
        MixedType,
        SizingBehavior,
        StrokeAlignment,
        TextAlign,
        TextAlignVertical,
        TextGrowth,
    )
    from selprops.domain.ports import SceneNodeView

log = getLogger(__name__)

type Field[T] = T | MixedType
type FieldState = Mapping[str, Any]


@dataclass(frozen=True, slots=True, kw_only=True)
class PositionSnapshot:
    x: Field[float]
    y: Field[float]
    rotation: Field[float]  # radians


@dataclass(frozen=True, slots=True, kw_only=True)
class DimensionsSnapshot:
    width: Field[float]
    height: Field[float]


@dataclass(frozen=True, slots=True, kw_only=True)
class SizingSnapshot:
    horizontal: Field[SizingBehavior]
    vertical: Field[SizingBehavior]


@dataclass(frozen=True, slots=True, kw_only=True)
class LayoutSnapshot:
    mode: Field[LayoutMode]
    include_stroke: Field[bool]
    child_spacing: Field[DualValue[float]]
    padding: Field[DualValue[Edges[float]]]
    justify_content: Field[JustifyContent]
    align_items: Field[AlignItems]


@dataclass(frozen=True, slots=True, kw_only=True)
class StrokeSnapshot:
    fills: Field[DualValue[tuple[Fill, ...]] | None]
    width: Field[DualValue[Edges[float]]]
    alignment: Field[StrokeAlignment]


@dataclass(frozen=True, slots=True, kw_only=True)
class TextSnapshot:
    font_family: Field[DualValue[str]]
    font_size: Field[DualValue[float]]
    font_weight: Field[DualValue[str]]
    font_style: Field[DualValue[str]]
    line_height: Field[DualValue[float]]
    letter_spacing: Field[DualValue[float]]
    text_align: Field[TextAlign]
    text_align_vertical: Field[TextAlignVertical]
    text_growth: Field[TextGrowth | None]


@dataclass(frozen=True, slots=True, kw_only=True)
class IconFontSnapshot:
    name: Field[str]
    family: Field[str]
    weight: Field[float]


@dataclass(frozen=True, slots=True, kw_only=True)
class SelectionSnapshot:
    """Aggregated view of a selection.

    A group is ``None`` when no node of the selection carries it. ``context``
    and ``metadata`` are only reported for a single-node selection.
    """

    count: int = 0
    position: PositionSnapshot | None = None
    dimensions: DimensionsSnapshot | None = None
    sizing: SizingSnapshot | None = None
    opacity: Field[DualValue[float]] | None = None
    layout: LayoutSnapshot | None = None
    corner_radii: Field[DualValue[Edges[float]]] | None = None
    fills: Field[DualValue[tuple[Fill, ...]] | None] | None = None
    stroke: StrokeSnapshot | None = None
    text: TextSnapshot | None = None
    icon_font: IconFontSnapshot | None = None
    effects: Field[DualValue[tuple[Effect, ...] | None]] | None = None
    theme: Field[Mapping[str, str] | None] | None = None
    layer_name: Field[str] | None = None
    clip: Field[bool] | None = None
    context: Field[str | None] | None = None
    metadata: Field[Mapping[str, Any] | None] | None = None

    def mixed_fields(self) -> tuple[str, ...]:
        """Dotted names of every field on which the selection disagrees."""

        names: list[str] = []
        for group in PropertyGroup:
            value: object = getattr(self, group.value)
            if value is MIXED:
                names.append(group.value)
            elif isinstance(value, _GROUP_SNAPSHOTS):
                names.extend(
                    f"{group.value}.{name}"
                    for name in value.__dataclass_fields__
                    if getattr(value, name) is MIXED
                )
        return tuple(names)


_GROUP_SNAPSHOTS = (
    PositionSnapshot,
    DimensionsSnapshot,
    SizingSnapshot,
    LayoutSnapshot,
    StrokeSnapshot,
    TextSnapshot,
    IconFontSnapshot,
)


@dataclass(frozen=True, slots=True)
class Accumulator:
    """Fold state: nodes seen so far and, per field, the agreeing readings or ``MIXED``.

    A group missing from ``groups`` has not been read from any node yet.
    """

    count: int = 0
    groups: Mapping[PropertyGroup, FieldState] = field(
        default_factory=lambda: MappingProxyType({})
    )


def fold_node(
    acc: Accumulator,
    node: SceneNodeView,
    extractors: Iterable[GroupExtractor],
) -> Accumulator:
    """Return ``acc`` with ``node`` folded into every applicable group."""

    groups = dict(acc.groups)
    for extractor in extractors:
        readings = extractor.extract(node)
        if readings is None:
            continue
        previous = groups.get(extractor.group, {})
        groups[extractor.group] = MappingProxyType(
            {
                name: merge_span(previous.get(name, UNSEEN), readings[name], equal)
                for name, equal in extractor.equalities.items()
            }
        )
    return Accumulator(count=acc.count + 1, groups=MappingProxyType(groups))


def finalize(acc: Accumulator, extractors: Iterable[GroupExtractor]) -> SelectionSnapshot:
    values: dict[str, object] = {}
    for extractor in extractors:
        state = acc.groups.get(extractor.group)
        if state is None:
            continue
        if extractor.single_only and acc.count != 1:
            continue
        common = {
            name: MIXED if span is MIXED else representative(span) for name, span in state.items()
        }
        values[extractor.group.value] = _assemble(extractor.group, common)
    return SelectionSnapshot(count=acc.count, **values)  # pyright: ignore[reportArgumentType]


def _assemble(group: PropertyGroup, state: FieldState) -> object:
    match group:
        case PropertyGroup.POSITION:
            return PositionSnapshot(**state)
        case PropertyGroup.DIMENSIONS:
            return DimensionsSnapshot(**state)
        case PropertyGroup.SIZING:
            return SizingSnapshot(**state)
        case PropertyGroup.LAYOUT:
            return LayoutSnapshot(**state)
        case PropertyGroup.STROKE:
            return StrokeSnapshot(**state)
        case PropertyGroup.TEXT:
            return TextSnapshot(**state)
        case PropertyGroup.ICON_FONT:
            return IconFontSnapshot(**state)
        case (
            PropertyGroup.OPACITY
            | PropertyGroup.CORNER_RADII
            | PropertyGroup.FILLS
            | PropertyGroup.EFFECTS
            | PropertyGroup.THEME
            | PropertyGroup.LAYER_NAME
            | PropertyGroup.CLIP
            | PropertyGroup.CONTEXT
            | PropertyGroup.METADATA
        ):
            # single-field groups are keyed by the group name
            return state[group.value]
        case _:
            assert_never(group)


def compute_all_properties(
    selection: Iterable[SceneNodeView],
    *,
    tolerances: ToleranceConfig | None = None,
) -> SelectionSnapshot:
    """Aggregate every displayable property over ``selection`` in one pass."""

    extractors = build_extractors(tolerances if tolerances is not None else get_tolerance_config())
    acc = reduce(
        lambda state, node: fold_node(state, node, extractors),
        selection,
        Accumulator(),
    )
    snapshot = finalize(acc, extractors)
    if log.isEnabledFor(DEBUG):
        log.debug("Aggregated %d node(s); mixed: %s", snapshot.count, snapshot.mixed_fields())
    return snapshot


__all__ = [
    "Accumulator",
    "DimensionsSnapshot",
    "Field",
    "IconFontSnapshot",
    "LayoutSnapshot",
    "PositionSnapshot",
    "SelectionSnapshot",
    "SizingSnapshot",
    "StrokeSnapshot",
    "TextSnapshot",
    "compute_all_properties",
    "finalize",
    "fold_node",
]
