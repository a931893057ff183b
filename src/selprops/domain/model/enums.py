"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class NodeType(StrEnum):
    """Discriminator for scene nodes."""

    FRAME = "frame"
    GROUP = "group"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYGON = "polygon"
    PATH = "path"
    TEXT = "text"

    # Annotation nodes that carry typography but no text layout:
    NOTE = "note"
    PROMPT = "prompt"
    CONTEXT = "context"

    ICON_FONT = "icon_font"


class Axis(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LayoutMode(StrEnum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SizingBehavior(StrEnum):
    FIXED = "fixed"
    FIT_CONTENT = "fit_content"
    FILL_CONTAINER = "fill_container"


class JustifyContent(StrEnum):
    START = "start"
    CENTER = "center"
    SPACE_BETWEEN = "space_between"
    SPACE_AROUND = "space_around"
    END = "end"


class AlignItems(StrEnum):
    START = "start"
    CENTER = "center"
    END = "end"


class StrokeAlignment(StrEnum):
    INSIDE = "inside"
    CENTER = "center"
    OUTSIDE = "outside"


class TextAlign(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class TextAlignVertical(StrEnum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class TextGrowth(StrEnum):
    """How a text node sizes itself around its content."""

    AUTO = "auto"
    FIXED_WIDTH = "fixed_width"
    FIXED_WIDTH_HEIGHT = "fixed_width_height"


class VariableType(StrEnum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    COLOR = "color"
    STRING = "string"


class FillType(StrEnum):
    COLOR = "color"
    IMAGE = "image"
    LINEAR_GRADIENT = "linear_gradient"
    RADIAL_GRADIENT = "radial_gradient"
    ANGULAR_GRADIENT = "angular_gradient"


class StretchMode(StrEnum):
    STRETCH = "stretch"
    FILL = "fill"
    FIT = "fit"


class EffectType(StrEnum):
    DROP_SHADOW = "drop_shadow"
    INNER_SHADOW = "inner_shadow"
    LAYER_BLUR = "layer_blur"
    BACKGROUND_BLUR = "background_blur"
