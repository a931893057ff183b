"""Conversions between the stored shapes of composite fields.

Composite fields (padding, stroke width, corner radii) are stored as a
scalar, a 2-tuple or a 4-tuple depending on how uniformly they were authored.

Canonical orders:
- edges: ``(top, right, bottom, left)``; a stored pair is ``(horizontal, vertical)``
- corners: ``(top_left, top_right, bottom_right, bottom_left)``; a stored pair is
  ``(top_left/bottom_right, top_right/bottom_left)``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from selprops.domain.model import Composite, Edges

TOP: Final = 0
RIGHT: Final = 1
BOTTOM: Final = 2
LEFT: Final = 3

TOP_LEFT: Final = 0
TOP_RIGHT: Final = 1
BOTTOM_RIGHT: Final = 2
BOTTOM_LEFT: Final = 3

HORIZONTAL: Final = 0
VERTICAL: Final = 1

HORIZONTAL_EDGES: Final = (RIGHT, LEFT)
VERTICAL_EDGES: Final = (TOP, BOTTOM)


def expand_edges[T](value: Composite[T] | None, default: T) -> Edges[T]:
    """Expand a stored edge value to ``(top, right, bottom, left)``."""

    if value is None:
        return (default, default, default, default)
    if not isinstance(value, tuple):
        return (value, value, value, value)
    match value:
        case (horizontal, vertical):
            return (vertical, horizontal, vertical, horizontal)
        case (top, right, bottom, left):
            return (top, right, bottom, left)
        case _:
            raise ValueError(f"edge value must have 1, 2 or 4 entries, got {len(value)}")


def expand_corners[T](value: Composite[T] | None, default: T) -> Edges[T]:
    """Expand a stored corner value to ``(top_left, top_right, bottom_right, bottom_left)``."""

    if value is None:
        return (default, default, default, default)
    if not isinstance(value, tuple):
        return (value, value, value, value)
    match value:
        case (diagonal, anti_diagonal):
            return (diagonal, anti_diagonal, diagonal, anti_diagonal)
        case (top_left, top_right, bottom_right, bottom_left):
            return (top_left, top_right, bottom_right, bottom_left)
        case _:
            raise ValueError(f"corner value must have 1, 2 or 4 entries, got {len(value)}")


def expand_axes[T](value: Composite[T] | None, default: T) -> tuple[T, T]:
    """Expand a stored edge value to ``(horizontal, vertical)``.

    A 4-tuple is only representable when opposite edges agree.
    """

    if value is None:
        return (default, default)
    if not isinstance(value, tuple):
        return (value, value)
    match value:
        case (horizontal, vertical):
            return (horizontal, vertical)
        case (top, right, bottom, left) if top == bottom and right == left:
            return (right, top)
        case (_, _, _, _):
            raise ValueError("edge value is not axis-symmetric")
        case _:
            raise ValueError(f"edge value must have 1, 2 or 4 entries, got {len(value)}")


def compact_edges[T](edges: Edges[T]) -> Composite[T]:
    """Smallest stored shape that expands back to ``edges``."""

    top, right, bottom, left = edges
    if top == right == bottom == left:
        return top
    if top == bottom and right == left:
        return (right, top)
    return edges


def compact_corners[T](corners: Edges[T]) -> Composite[T]:
    """Smallest stored shape that expands back to ``corners``."""

    top_left, top_right, bottom_right, bottom_left = corners
    if top_left == top_right == bottom_right == bottom_left:
        return top_left
    if top_left == bottom_right and top_right == bottom_left:
        return (top_left, top_right)
    return corners
