"""Which node types carry which property groups."""

from __future__ import annotations

from typing import Final

from selprops.domain.model import NodeType

LAYOUT_TYPES: Final = frozenset({NodeType.FRAME, NodeType.GROUP})
CORNER_RADIUS_TYPES: Final = frozenset({NodeType.FRAME, NodeType.RECTANGLE})
STROKE_TYPES: Final = frozenset(
    {
        NodeType.FRAME,
        NodeType.RECTANGLE,
        NodeType.PATH,
        NodeType.ELLIPSE,
        NodeType.LINE,
        NodeType.POLYGON,
    }
)
FILL_TYPES: Final = STROKE_TYPES | {NodeType.TEXT, NodeType.ICON_FONT}
TEXT_TYPES: Final = frozenset({NodeType.TEXT})
TEXT_BEARING_TYPES: Final = frozenset(
    {NodeType.TEXT, NodeType.NOTE, NodeType.PROMPT, NodeType.CONTEXT}
)
ICON_FONT_TYPES: Final = frozenset({NodeType.ICON_FONT})
CLIP_TYPES: Final = frozenset({NodeType.FRAME})
