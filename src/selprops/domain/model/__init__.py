"""Public domain model surface."""

from __future__ import annotations

from selprops.domain.model.enums import (
    AlignItems,
    Axis,
    EffectType,
    FillType,
    JustifyContent,
    LayoutMode,
    NodeType,
    SizingBehavior,
    StretchMode,
    StrokeAlignment,
    TextAlign,
    TextAlignVertical,
    TextGrowth,
    VariableType,
)
from selprops.domain.model.geometry import Bounds, Matrix
from selprops.domain.model.node import SceneNode
from selprops.domain.model.paint import (
    ColorFill,
    ColorStop,
    Effect,
    Fill,
    GradientFill,
    ImageFill,
)
from selprops.domain.model.properties import (
    PROPERTY_NAMES,
    Composite,
    Edges,
    NodeProperties,
)
from selprops.domain.model.values import (
    DETACH,
    MIXED,
    Detach,
    DetachType,
    DualValue,
    Mixed,
    MixedType,
    Theme,
    ThemedValue,
    Value,
    Variable,
    VariableValue,
)

__all__ = [  # noqa: RUF022
    # enums
    "AlignItems",
    "Axis",
    "EffectType",
    "FillType",
    "JustifyContent",
    "LayoutMode",
    "NodeType",
    "SizingBehavior",
    "StretchMode",
    "StrokeAlignment",
    "TextAlign",
    "TextAlignVertical",
    "TextGrowth",
    "VariableType",
    # values and sentinels
    "DETACH",
    "MIXED",
    "Detach",
    "DetachType",
    "DualValue",
    "Mixed",
    "MixedType",
    "Theme",
    "ThemedValue",
    "Value",
    "Variable",
    "VariableValue",
    # paint
    "ColorFill",
    "ColorStop",
    "Effect",
    "Fill",
    "GradientFill",
    "ImageFill",
    # properties
    "PROPERTY_NAMES",
    "Composite",
    "Edges",
    "NodeProperties",
    # geometry and nodes
    "Bounds",
    "Matrix",
    "SceneNode",
]
