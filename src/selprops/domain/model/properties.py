"""Node property record.

The same record shape holds authored properties (fields may be ``Variable``
references) and resolved properties (every field concrete).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Final

from .enums import (
    AlignItems,
    JustifyContent,
    LayoutMode,
    SizingBehavior,
    StrokeAlignment,
    TextAlign,
    TextAlignVertical,
    TextGrowth,
)
from .paint import Effect, Fill
from .values import Value

type Composite[T] = T | tuple[T, T] | tuple[T, T, T, T]
type Edges[T] = tuple[T, T, T, T]


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeProperties:
    name: str | None = None
    context: str | None = None
    theme: Mapping[str, str] | None = None
    metadata: Mapping[str, Any] | None = None
    enabled: Value[bool] = True

    # Transform (local, relative to parent)
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rotation: Value[float] = 0.0
    flip_x: Value[bool] = False
    flip_y: Value[bool] = False

    opacity: Value[float] = 1.0
    clip: Value[bool] = False
    fills: tuple[Fill, ...] | None = None
    effects: tuple[Effect, ...] | None = None

    # Stroke
    stroke_fills: tuple[Fill, ...] | None = None
    stroke_width: Composite[Value[float]] | None = None
    stroke_alignment: StrokeAlignment | None = None

    corner_radius: Composite[Value[float]] | None = None

    # Text
    text_content: str | None = None
    text_align: TextAlign = TextAlign.LEFT
    text_align_vertical: TextAlignVertical = TextAlignVertical.TOP
    text_growth: TextGrowth | None = None
    font_size: Value[float] = 14.0
    letter_spacing: Value[float] = 0.0
    line_height: Value[float] = 0.0  # 0 means automatic
    font_family: Value[str] = "Inter"
    font_weight: Value[str] = "400"
    font_style: Value[str] = "normal"

    # Icon font
    icon_font_name: Value[str] | None = None
    icon_font_family: Value[str] | None = None
    icon_font_weight: Value[float] | None = None

    # Layout
    layout_mode: LayoutMode = LayoutMode.NONE
    layout_include_stroke: bool | None = None
    layout_child_spacing: Value[float] | None = None
    layout_padding: Composite[Value[float]] | None = None
    layout_justify_content: JustifyContent = JustifyContent.START
    layout_align_items: AlignItems = AlignItems.START
    horizontal_sizing: SizingBehavior | None = None
    vertical_sizing: SizingBehavior | None = None


PROPERTY_NAMES: Final[frozenset[str]] = frozenset(f.name for f in fields(NodeProperties))
