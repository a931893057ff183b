"""Scene node record consumed by the aggregation and commit paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast
from uuid import UUID, uuid4

from .geometry import Bounds, Matrix

if TYPE_CHECKING:
    from .enums import NodeType
    from .properties import NodeProperties


@dataclass(eq=False, kw_only=True)
class SceneNode:
    """A node of the scene graph.

    ``properties`` is the authored record, ``resolved`` the same record with
    every variable reference concretized. Both are replaced wholesale by the
    owning engine; this subsystem never assigns them directly.
    """

    type: NodeType
    properties: NodeProperties
    resolved: NodeProperties
    parent: SceneNode | None = None
    id: UUID = field(default_factory=uuid4)

    def local_matrix(self) -> Matrix:
        rotation = cast("float", self.resolved.rotation)
        return Matrix.from_transform(x=self.resolved.x, y=self.resolved.y, rotation=rotation)

    def get_world_matrix(self) -> Matrix:
        local = self.local_matrix()
        if self.parent is None:
            return local
        return self.parent.get_world_matrix().multiply(local)

    def local_bounds(self) -> Bounds:
        return Bounds.from_size(self.resolved.width, self.resolved.height)

    def get_world_bounds(self) -> Bounds:
        return self.local_bounds().transformed(self.get_world_matrix())

    def __repr__(self) -> str:
        label = self.properties.name or self.type.value
        return f"SceneNode({label!r}, id={str(self.id)[:8]})"
