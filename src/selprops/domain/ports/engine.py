"""Scene engine abstractions consumed by the aggregation and commit paths."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from selprops.domain.model import Bounds, Matrix, NodeProperties, NodeType


@runtime_checkable
class SceneNodeView(Protocol):
    """Read-only view of a scene node."""

    @property
    def type(self) -> NodeType: ...

    @property
    def properties(self) -> NodeProperties: ...  # authored, may hold variables

    @property
    def resolved(self) -> NodeProperties: ...

    @property
    def parent(self) -> SceneNodeView | None: ...

    def get_world_matrix(self) -> Matrix: ...

    def get_world_bounds(self) -> Bounds: ...

    def local_bounds(self) -> Bounds: ...


@runtime_checkable
class TransactionScope(Protocol):
    """One open update block. Every update inside it lands as one undo step."""

    def update(self, node: SceneNodeView, patch: Mapping[str, object]) -> None: ...

    def commit(self, *, undo: bool) -> None: ...

    def rollback(self) -> None: ...


@runtime_checkable
class SceneEngine(Protocol):
    """The owning scene engine: selection and transactional writes."""

    @property
    def selected_nodes(self) -> Sequence[SceneNodeView]: ...

    def begin_update(self) -> TransactionScope: ...
