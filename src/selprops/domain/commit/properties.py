"""Catalogue of editable properties and how each one is written back."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from selprops.domain.applicability import (
    CLIP_TYPES,
    CORNER_RADIUS_TYPES,
    ICON_FONT_TYPES,
    LAYOUT_TYPES,
    STROKE_TYPES,
    TEXT_BEARING_TYPES,
    TEXT_TYPES,
)
from selprops.domain.composite import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    HORIZONTAL,
    LEFT,
    RIGHT,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
    VERTICAL,
)
from selprops.domain.model import (
    AlignItems,
    Axis,
    JustifyContent,
    LayoutMode,
    SizingBehavior,
    StrokeAlignment,
    TextAlign,
    TextAlignVertical,
    TextGrowth,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from selprops.domain.model import NodeType


class EditableProperty(StrEnum):
    HUG_WIDTH = "hug_width"
    HUG_HEIGHT = "hug_height"
    FILL_CONTAINER_WIDTH = "fill_container_width"
    FILL_CONTAINER_HEIGHT = "fill_container_height"
    CLIP = "clip"

    PADDING = "padding"
    PADDING_HORIZONTAL = "padding_horizontal"
    PADDING_VERTICAL = "padding_vertical"
    PADDING_TOP = "padding_top"
    PADDING_RIGHT = "padding_right"
    PADDING_BOTTOM = "padding_bottom"
    PADDING_LEFT = "padding_left"

    CORNER_RADII = "corner_radii"
    CORNER_RADIUS_TOP_LEFT = "corner_radius_top_left"
    CORNER_RADIUS_TOP_RIGHT = "corner_radius_top_right"
    CORNER_RADIUS_BOTTOM_RIGHT = "corner_radius_bottom_right"
    CORNER_RADIUS_BOTTOM_LEFT = "corner_radius_bottom_left"

    STROKE_WIDTHS = "stroke_widths"
    STROKE_WIDTH_TOP = "stroke_width_top"
    STROKE_WIDTH_RIGHT = "stroke_width_right"
    STROKE_WIDTH_BOTTOM = "stroke_width_bottom"
    STROKE_WIDTH_LEFT = "stroke_width_left"

    CHILD_SPACING = "child_spacing"
    OPACITY = "opacity"
    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"
    ROTATION = "rotation"

    FONT_FAMILY = "font_family"
    FONT_SIZE = "font_size"
    FONT_WEIGHT = "font_weight"
    FONT_STYLE = "font_style"
    LINE_HEIGHT = "line_height"
    LETTER_SPACING = "letter_spacing"
    TEXT_ALIGN = "text_align"
    TEXT_ALIGN_VERTICAL = "text_align_vertical"
    TEXT_GROWTH = "text_growth"

    STROKE_ALIGNMENT = "stroke_alignment"
    LAYOUT_MODE = "layout_mode"
    JUSTIFY_CONTENT = "justify_content"
    ALIGN_ITEMS = "align_items"

    ICON_FONT_NAME = "icon_font_name"
    ICON_FONT_FAMILY = "icon_font_family"
    ICON_FONT_WEIGHT = "icon_font_weight"

    LAYER_NAME = "layer_name"


class PropertyCategory(StrEnum):
    SIZING_TOGGLE = "sizing_toggle"
    BOOLEAN = "boolean"
    UNIFORM_COMPOSITE = "uniform_composite"
    AXIS_COMPOSITE = "axis_composite"
    EDGE_COMPOSITE = "edge_composite"
    SCALAR = "scalar"
    TEXT_GROWTH = "text_growth"


class ValueKind(StrEnum):
    NUMBER = "number"
    ANGLE = "angle"  # degrees in, radians out
    STRING = "string"
    BOOLEAN = "boolean"
    ENUM = "enum"


class CompositeShape(StrEnum):
    EDGES = "edges"
    CORNERS = "corners"


@dataclass(frozen=True, slots=True, kw_only=True)
class PropertySpec:
    """How one editable property maps onto a ``NodeProperties`` field.

    ``applies_to`` of ``None`` means every node type. ``axis`` marks edits
    that resize a node along that axis (and therefore reflow text).
    ``references`` is false for fields that never hold a variable. Numeric
    input is clamped to ``minimum`` and ``maximum`` when they are set.
    """

    category: PropertyCategory
    field: str
    kind: ValueKind = ValueKind.NUMBER
    applies_to: frozenset[NodeType] | None = None
    enum_type: type[StrEnum] | None = None
    shape: CompositeShape | None = None
    index: int | None = None
    axis: Axis | None = None
    sizing: SizingBehavior | None = None
    references: bool = True
    minimum: float | None = None
    maximum: float | None = None

    def applies(self, node_type: NodeType) -> bool:
        return self.applies_to is None or node_type in self.applies_to


def _toggle(field: str, axis: Axis, sizing: SizingBehavior) -> PropertySpec:
    return PropertySpec(
        category=PropertyCategory.SIZING_TOGGLE,
        field=field,
        kind=ValueKind.BOOLEAN,
        axis=axis,
        sizing=sizing,
        references=False,
    )


def _composite(
    category: PropertyCategory,
    field: str,
    shape: CompositeShape,
    applies_to: frozenset[NodeType],
    index: int | None = None,
) -> PropertySpec:
    return PropertySpec(
        category=category,
        field=field,
        applies_to=applies_to,
        shape=shape,
        index=index,
        minimum=0.0,
    )


def _padding(category: PropertyCategory, index: int | None = None) -> PropertySpec:
    return _composite(category, "layout_padding", CompositeShape.EDGES, LAYOUT_TYPES, index)


def _radius(category: PropertyCategory, index: int | None = None) -> PropertySpec:
    return _composite(
        category, "corner_radius", CompositeShape.CORNERS, CORNER_RADIUS_TYPES, index
    )


def _stroke_width(category: PropertyCategory, index: int | None = None) -> PropertySpec:
    return _composite(category, "stroke_width", CompositeShape.EDGES, STROKE_TYPES, index)


def _scalar(
    field: str,
    kind: ValueKind = ValueKind.NUMBER,
    applies_to: frozenset[NodeType] | None = None,
    *,
    enum_type: type[StrEnum] | None = None,
    axis: Axis | None = None,
    references: bool = True,
    minimum: float | None = None,
    maximum: float | None = None,
) -> PropertySpec:
    return PropertySpec(
        category=PropertyCategory.SCALAR,
        field=field,
        kind=kind,
        applies_to=applies_to,
        enum_type=enum_type,
        axis=axis,
        references=references and kind is not ValueKind.ENUM,
        minimum=minimum,
        maximum=maximum,
    )


_UNIFORM = PropertyCategory.UNIFORM_COMPOSITE
_AXIS = PropertyCategory.AXIS_COMPOSITE
_EDGE = PropertyCategory.EDGE_COMPOSITE
_STRING = ValueKind.STRING
_ENUM = ValueKind.ENUM

PROPERTY_SPECS: Final[Mapping[EditableProperty, PropertySpec]] = {
    EditableProperty.HUG_WIDTH: _toggle(
        "horizontal_sizing", Axis.HORIZONTAL, SizingBehavior.FIT_CONTENT
    ),
    EditableProperty.HUG_HEIGHT: _toggle(
        "vertical_sizing", Axis.VERTICAL, SizingBehavior.FIT_CONTENT
    ),
    EditableProperty.FILL_CONTAINER_WIDTH: _toggle(
        "horizontal_sizing", Axis.HORIZONTAL, SizingBehavior.FILL_CONTAINER
    ),
    EditableProperty.FILL_CONTAINER_HEIGHT: _toggle(
        "vertical_sizing", Axis.VERTICAL, SizingBehavior.FILL_CONTAINER
    ),
    EditableProperty.CLIP: PropertySpec(
        category=PropertyCategory.BOOLEAN,
        field="clip",
        kind=ValueKind.BOOLEAN,
        applies_to=CLIP_TYPES,
    ),
    EditableProperty.PADDING: _padding(_UNIFORM),
    EditableProperty.PADDING_HORIZONTAL: _padding(_AXIS, HORIZONTAL),
    EditableProperty.PADDING_VERTICAL: _padding(_AXIS, VERTICAL),
    EditableProperty.PADDING_TOP: _padding(_EDGE, TOP),
    EditableProperty.PADDING_RIGHT: _padding(_EDGE, RIGHT),
    EditableProperty.PADDING_BOTTOM: _padding(_EDGE, BOTTOM),
    EditableProperty.PADDING_LEFT: _padding(_EDGE, LEFT),
    EditableProperty.CORNER_RADII: _radius(_UNIFORM),
    EditableProperty.CORNER_RADIUS_TOP_LEFT: _radius(_EDGE, TOP_LEFT),
    EditableProperty.CORNER_RADIUS_TOP_RIGHT: _radius(_EDGE, TOP_RIGHT),
    EditableProperty.CORNER_RADIUS_BOTTOM_RIGHT: _radius(_EDGE, BOTTOM_RIGHT),
    EditableProperty.CORNER_RADIUS_BOTTOM_LEFT: _radius(_EDGE, BOTTOM_LEFT),
    EditableProperty.STROKE_WIDTHS: _stroke_width(_UNIFORM),
    EditableProperty.STROKE_WIDTH_TOP: _stroke_width(_EDGE, TOP),
    EditableProperty.STROKE_WIDTH_RIGHT: _stroke_width(_EDGE, RIGHT),
    EditableProperty.STROKE_WIDTH_BOTTOM: _stroke_width(_EDGE, BOTTOM),
    EditableProperty.STROKE_WIDTH_LEFT: _stroke_width(_EDGE, LEFT),
    EditableProperty.CHILD_SPACING: _scalar(
        "layout_child_spacing", applies_to=LAYOUT_TYPES, minimum=0.0
    ),
    EditableProperty.OPACITY: _scalar("opacity", minimum=0.0, maximum=1.0),
    EditableProperty.X: _scalar("x", references=False),
    EditableProperty.Y: _scalar("y", references=False),
    EditableProperty.WIDTH: _scalar(
        "width", axis=Axis.HORIZONTAL, references=False, minimum=0.0
    ),
    EditableProperty.HEIGHT: _scalar(
        "height", axis=Axis.VERTICAL, references=False, minimum=0.0
    ),
    EditableProperty.ROTATION: _scalar("rotation", ValueKind.ANGLE),
    EditableProperty.FONT_FAMILY: _scalar("font_family", _STRING, TEXT_TYPES),
    EditableProperty.FONT_SIZE: _scalar("font_size", applies_to=TEXT_BEARING_TYPES),
    EditableProperty.FONT_WEIGHT: _scalar("font_weight", _STRING, TEXT_TYPES),
    EditableProperty.FONT_STYLE: _scalar("font_style", _STRING, TEXT_TYPES),
    EditableProperty.LINE_HEIGHT: _scalar("line_height", applies_to=TEXT_TYPES),
    EditableProperty.LETTER_SPACING: _scalar("letter_spacing", applies_to=TEXT_TYPES),
    EditableProperty.TEXT_ALIGN: _scalar("text_align", _ENUM, TEXT_TYPES, enum_type=TextAlign),
    EditableProperty.TEXT_ALIGN_VERTICAL: _scalar(
        "text_align_vertical", _ENUM, TEXT_TYPES, enum_type=TextAlignVertical
    ),
    EditableProperty.TEXT_GROWTH: PropertySpec(
        category=PropertyCategory.TEXT_GROWTH,
        field="text_growth",
        kind=_ENUM,
        applies_to=TEXT_TYPES,
        enum_type=TextGrowth,
        references=False,
    ),
    EditableProperty.STROKE_ALIGNMENT: _scalar(
        "stroke_alignment", _ENUM, STROKE_TYPES, enum_type=StrokeAlignment
    ),
    EditableProperty.LAYOUT_MODE: _scalar(
        "layout_mode", _ENUM, LAYOUT_TYPES, enum_type=LayoutMode
    ),
    EditableProperty.JUSTIFY_CONTENT: _scalar(
        "layout_justify_content", _ENUM, LAYOUT_TYPES, enum_type=JustifyContent
    ),
    EditableProperty.ALIGN_ITEMS: _scalar(
        "layout_align_items", _ENUM, LAYOUT_TYPES, enum_type=AlignItems
    ),
    EditableProperty.ICON_FONT_NAME: _scalar("icon_font_name", _STRING, ICON_FONT_TYPES),
    EditableProperty.ICON_FONT_FAMILY: _scalar("icon_font_family", _STRING, ICON_FONT_TYPES),
    EditableProperty.ICON_FONT_WEIGHT: _scalar("icon_font_weight", applies_to=ICON_FONT_TYPES),
    EditableProperty.LAYER_NAME: _scalar("name", _STRING, references=False),
}
