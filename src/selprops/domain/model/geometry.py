"""Minimal 2D affine geometry used for position and rotation derivation."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Matrix:
    """Affine transform ``[a c tx; b d ty; 0 0 1]``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def from_transform(cls, *, x: float, y: float, rotation: float) -> Matrix:
        """Translate to ``(x, y)`` then rotate by ``rotation`` radians around that origin."""

        cos = math.cos(rotation)
        sin = math.sin(rotation)
        return cls(a=cos, b=sin, c=-sin, d=cos, tx=x, ty=y)

    def multiply(self, other: Matrix) -> Matrix:
        """Return ``self @ other`` (``other`` applied first)."""

        return Matrix(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            tx=self.a * other.tx + self.c * other.ty + self.tx,
            ty=self.b * other.tx + self.d * other.ty + self.ty,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty)

    @property
    def rotation(self) -> float:
        return math.atan2(self.b, self.a)


@dataclass(frozen=True, slots=True)
class Bounds:
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_size(cls, width: float, height: float) -> Bounds:
        return cls(left=0.0, top=0.0, right=width, bottom=height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def transformed(self, matrix: Matrix) -> Bounds:
        """Axis-aligned bounds of this rectangle after ``matrix``."""

        corners = (
            matrix.apply(self.left, self.top),
            matrix.apply(self.right, self.top),
            matrix.apply(self.right, self.bottom),
            matrix.apply(self.left, self.bottom),
        )
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        return Bounds(left=min(xs), top=min(ys), right=max(xs), bottom=max(ys))
