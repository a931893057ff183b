"""Per-group readers turning one scene node into comparable readings.

Each ``PropertyGroup`` owns one ``GroupExtractor``. The extractor declares the
node types it applies to, reads every field of the group in one go, and names
the equality predicate the aggregator folds that field with.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from functools import cache
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from selprops.config import DEFAULT_TOLERANCES, ToleranceConfig
from selprops.domain.applicability import (
    CLIP_TYPES,
    CORNER_RADIUS_TYPES,
    FILL_TYPES,
    ICON_FONT_TYPES,
    LAYOUT_TYPES,
    STROKE_TYPES,
    TEXT_TYPES,
)
from selprops.domain.composite import expand_corners, expand_edges
from selprops.domain.merge import (
    Equality,
    composite_equal,
    dual_equal,
    dual_structural_equal,
    nearly_equal,
    structural_equal,
)
from selprops.domain.model import DualValue, NodeType, SizingBehavior, StrokeAlignment

if TYPE_CHECKING:
    from selprops.domain.ports import SceneNodeView

log = getLogger(__name__)

DEFAULT_ICON_FONT_NAME: Final = "search"
DEFAULT_ICON_FONT_FAMILY: Final = "Material Symbols Rounded"
DEFAULT_ICON_FONT_WEIGHT: Final = 200.0

type Readings = Mapping[str, Any]


class PropertyGroup(StrEnum):
    POSITION = "position"
    DIMENSIONS = "dimensions"
    SIZING = "sizing"
    OPACITY = "opacity"
    LAYOUT = "layout"
    CORNER_RADII = "corner_radii"
    FILLS = "fills"
    STROKE = "stroke"
    TEXT = "text"
    ICON_FONT = "icon_font"
    EFFECTS = "effects"
    THEME = "theme"
    LAYER_NAME = "layer_name"
    CLIP = "clip"
    CONTEXT = "context"
    METADATA = "metadata"


@dataclass(frozen=True, slots=True, kw_only=True)
class GroupExtractor:
    """Reader for one property group.

    ``read`` returns one reading per field name in ``equalities``; a field
    without an explicit predicate folds with ``==``.
    """

    group: PropertyGroup
    read: Callable[[SceneNodeView], Readings]
    equalities: Mapping[str, Equality[Any] | None]
    applies_to: frozenset[NodeType] | None = None
    single_only: bool = False

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self.equalities)

    def applies(self, node: SceneNodeView) -> bool:
        return self.applies_to is None or node.type in self.applies_to

    def extract(self, node: SceneNodeView) -> Readings | None:
        """Read the group from ``node``; ``None`` if the node is skipped.

        A node is skipped when the group does not apply to its type or when
        its stored data cannot be read (for instance a malformed composite).
        """

        if not self.applies(node):
            return None
        try:
            return self.read(node)
        except ValueError:
            log.exception("Skipping %r for group %s: unreadable property data", node, self.group)
            return None


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------


def _read_position(node: SceneNodeView) -> Readings:
    bounds = node.get_world_bounds()
    x, y = bounds.left, bounds.top
    if node.parent is not None:
        parent_bounds = node.parent.get_world_bounds()
        x -= parent_bounds.left
        y -= parent_bounds.top
    return {"x": x, "y": y, "rotation": node.get_world_matrix().rotation}


def _read_dimensions(node: SceneNodeView) -> Readings:
    bounds = node.local_bounds()
    return {"width": bounds.width, "height": bounds.height}


def _read_sizing(node: SceneNodeView) -> Readings:
    props = node.properties
    return {
        "horizontal": props.horizontal_sizing or SizingBehavior.FIXED,
        "vertical": props.vertical_sizing or SizingBehavior.FIXED,
    }


def _read_opacity(node: SceneNodeView) -> Readings:
    return {"opacity": DualValue(node.properties.opacity, node.resolved.opacity)}


def _read_layout(node: SceneNodeView) -> Readings:
    props, resolved = node.properties, node.resolved
    spacing = DualValue(
        props.layout_child_spacing if props.layout_child_spacing is not None else 0.0,
        resolved.layout_child_spacing if resolved.layout_child_spacing is not None else 0.0,
    )
    padding = DualValue(
        expand_edges(props.layout_padding, 0.0),
        expand_edges(resolved.layout_padding, 0.0),
    )
    return {
        "mode": props.layout_mode,
        "include_stroke": bool(props.layout_include_stroke),
        "child_spacing": spacing,
        "padding": padding,
        "justify_content": props.layout_justify_content,
        "align_items": props.layout_align_items,
    }


def _read_corner_radii(node: SceneNodeView) -> Readings:
    radii = DualValue(
        expand_corners(node.properties.corner_radius, 0.0),
        expand_corners(node.resolved.corner_radius, 0.0),
    )
    return {"corner_radii": radii}


def _read_fills(node: SceneNodeView) -> Readings:
    if not node.properties.fills:
        return {"fills": None}
    return {"fills": DualValue(node.properties.fills, node.resolved.fills)}


def _read_stroke(node: SceneNodeView) -> Readings:
    props, resolved = node.properties, node.resolved
    fills = DualValue(props.stroke_fills, resolved.stroke_fills) if props.stroke_fills else None
    return {
        "fills": fills,
        "width": DualValue(
            expand_edges(props.stroke_width, 0.0),
            expand_edges(resolved.stroke_width, 0.0),
        ),
        "alignment": props.stroke_alignment or StrokeAlignment.INSIDE,
    }


def _read_text(node: SceneNodeView) -> Readings:
    props, resolved = node.properties, node.resolved
    return {
        "font_family": DualValue(props.font_family, resolved.font_family),
        "font_size": DualValue(props.font_size, resolved.font_size),
        "font_weight": DualValue(props.font_weight, resolved.font_weight),
        "font_style": DualValue(props.font_style, resolved.font_style),
        "line_height": DualValue(props.line_height, resolved.line_height),
        "letter_spacing": DualValue(props.letter_spacing, resolved.letter_spacing),
        "text_align": props.text_align,
        "text_align_vertical": props.text_align_vertical,
        "text_growth": props.text_growth,
    }


def _read_icon_font(node: SceneNodeView) -> Readings:
    resolved = node.resolved
    return {
        "name": resolved.icon_font_name or DEFAULT_ICON_FONT_NAME,
        "family": resolved.icon_font_family or DEFAULT_ICON_FONT_FAMILY,
        "weight": (
            resolved.icon_font_weight
            if resolved.icon_font_weight is not None
            else DEFAULT_ICON_FONT_WEIGHT
        ),
    }


def _read_effects(node: SceneNodeView) -> Readings:
    return {"effects": DualValue(node.properties.effects, node.resolved.effects)}


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Read-only copy, so a snapshot never aliases the node's own mapping."""

    return MappingProxyType(dict(mapping)) if mapping is not None else None


def _read_theme(node: SceneNodeView) -> Readings:
    return {"theme": _frozen(node.properties.theme)}


def layer_name(node: SceneNodeView) -> str:
    """Display name of ``node``, falling back to its capitalized type."""

    if node.properties.name:
        return node.properties.name
    return node.type.value.replace("_", " ").capitalize()


def _read_layer_name(node: SceneNodeView) -> Readings:
    return {"layer_name": layer_name(node)}


def _read_clip(node: SceneNodeView) -> Readings:
    return {"clip": bool(node.resolved.clip)}


def _read_context(node: SceneNodeView) -> Readings:
    return {"context": node.properties.context}


def _read_metadata(node: SceneNodeView) -> Readings:
    return {"metadata": _frozen(node.properties.metadata)}


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@cache
def build_extractors(
    tolerances: ToleranceConfig = DEFAULT_TOLERANCES,
) -> tuple[GroupExtractor, ...]:
    """One extractor per ``PropertyGroup``, in declaration order."""

    font_metric = dual_equal(nearly_equal(tolerances.font_metrics))
    exact = dual_equal(operator.eq)

    extractors = (
        GroupExtractor(
            group=PropertyGroup.POSITION,
            read=_read_position,
            equalities={
                "x": nearly_equal(tolerances.position),
                "y": nearly_equal(tolerances.position),
                "rotation": nearly_equal(tolerances.rotation),
            },
        ),
        GroupExtractor(
            group=PropertyGroup.DIMENSIONS,
            read=_read_dimensions,
            equalities={
                "width": nearly_equal(tolerances.size),
                "height": nearly_equal(tolerances.size),
            },
        ),
        GroupExtractor(
            group=PropertyGroup.SIZING,
            read=_read_sizing,
            equalities={"horizontal": None, "vertical": None},
        ),
        GroupExtractor(
            group=PropertyGroup.OPACITY,
            read=_read_opacity,
            equalities={"opacity": dual_equal(nearly_equal(tolerances.opacity))},
        ),
        GroupExtractor(
            group=PropertyGroup.LAYOUT,
            read=_read_layout,
            applies_to=LAYOUT_TYPES,
            equalities={
                "mode": None,
                "include_stroke": None,
                "child_spacing": dual_equal(nearly_equal(tolerances.spacing)),
                "padding": dual_equal(composite_equal(tolerances.padding)),
                "justify_content": None,
                "align_items": None,
            },
        ),
        GroupExtractor(
            group=PropertyGroup.CORNER_RADII,
            read=_read_corner_radii,
            applies_to=CORNER_RADIUS_TYPES,
            equalities={"corner_radii": dual_equal(composite_equal(tolerances.corner_radius))},
        ),
        GroupExtractor(
            group=PropertyGroup.FILLS,
            read=_read_fills,
            applies_to=FILL_TYPES,
            equalities={"fills": _optional_dual_structural_equal},
        ),
        GroupExtractor(
            group=PropertyGroup.STROKE,
            read=_read_stroke,
            applies_to=STROKE_TYPES,
            equalities={
                "fills": _optional_dual_structural_equal,
                "width": dual_equal(composite_equal(tolerances.stroke_width)),
                "alignment": None,
            },
        ),
        GroupExtractor(
            group=PropertyGroup.TEXT,
            read=_read_text,
            applies_to=TEXT_TYPES,
            equalities={
                "font_family": exact,
                "font_size": font_metric,
                "font_weight": exact,
                "font_style": exact,
                "line_height": font_metric,
                "letter_spacing": font_metric,
                "text_align": None,
                "text_align_vertical": None,
                "text_growth": None,
            },
        ),
        GroupExtractor(
            group=PropertyGroup.ICON_FONT,
            read=_read_icon_font,
            applies_to=ICON_FONT_TYPES,
            equalities={"name": None, "family": None, "weight": None},
        ),
        GroupExtractor(
            group=PropertyGroup.EFFECTS,
            read=_read_effects,
            equalities={"effects": dual_structural_equal},
        ),
        GroupExtractor(
            group=PropertyGroup.THEME,
            read=_read_theme,
            equalities={"theme": structural_equal},
        ),
        GroupExtractor(
            group=PropertyGroup.LAYER_NAME,
            read=_read_layer_name,
            equalities={"layer_name": None},
        ),
        GroupExtractor(
            group=PropertyGroup.CLIP,
            read=_read_clip,
            applies_to=CLIP_TYPES,
            equalities={"clip": None},
        ),
        GroupExtractor(
            group=PropertyGroup.CONTEXT,
            read=_read_context,
            single_only=True,
            equalities={"context": None},
        ),
        GroupExtractor(
            group=PropertyGroup.METADATA,
            read=_read_metadata,
            single_only=True,
            equalities={"metadata": structural_equal},
        ),
    )
    if {extractor.group for extractor in extractors} != set(PropertyGroup):
        raise RuntimeError("every property group needs an extractor")
    return extractors


def _optional_dual_structural_equal(
    a: DualValue[object] | None,
    b: DualValue[object] | None,
) -> bool:
    if a is None or b is None:
        return a is b
    return dual_structural_equal(a, b)
