"""In-memory scene engine implementing the domain ports.

Each node keeps its authored ``NodeProperties`` and a resolved copy computed
against the node's effective theme (its own theme layered over its
ancestors'). Writes go through ``InMemoryTransaction``; a committed
transaction becomes one step on the undo stack.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from selprops.domain.model import PROPERTY_NAMES, NodeProperties, SceneNode

from .errors import InvalidPatchError, TransactionError
from .resolver import resolve_properties

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from uuid import UUID

    from selprops.domain.model import NodeType, Theme
    from selprops.domain.ports import SceneNodeView

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UndoStep:
    """Authored properties of every node touched by one committed transaction."""

    before: tuple[tuple[SceneNode, NodeProperties], ...]


class InMemoryScene:
    """Reference ``SceneEngine``: a flat node list with a selection and undo stack."""

    def __init__(self) -> None:
        self._nodes: dict[UUID, SceneNode] = {}
        self._selection: list[SceneNode] = []
        self._undo_stack: list[UndoStep] = []
        self._active: InMemoryTransaction | None = None

    # -- scene graph ---------------------------------------------------------

    def add(
        self,
        node_type: NodeType,
        properties: NodeProperties | None = None,
        *,
        parent: SceneNode | None = None,
    ) -> SceneNode:
        if parent is not None and parent.id not in self._nodes:
            raise InvalidPatchError(f"{parent!r} does not belong to this scene")
        authored = properties or NodeProperties()
        node = SceneNode(
            type=node_type,
            properties=authored,
            resolved=authored,
            parent=parent,
        )
        self._nodes[node.id] = node
        node.resolved = resolve_properties(authored, self.effective_theme(node))
        return node

    @property
    def nodes(self) -> tuple[SceneNode, ...]:
        return tuple(self._nodes.values())

    def children(self, node: SceneNode) -> tuple[SceneNode, ...]:
        return tuple(child for child in self._nodes.values() if child.parent is node)

    def effective_theme(self, node: SceneNode) -> Theme:
        chain: list[SceneNode] = []
        current: SceneNode | None = node
        while current is not None:
            chain.append(current)
            current = current.parent
        theme: dict[str, str] = {}
        for ancestor in reversed(chain):
            theme.update(ancestor.properties.theme or {})
        return theme

    # -- selection -----------------------------------------------------------

    def select(self, *nodes: SceneNode) -> None:
        for node in nodes:
            self._own(node)
        self._selection = list(nodes)

    @property
    def selected_nodes(self) -> tuple[SceneNode, ...]:
        return tuple(self._selection)

    # -- transactions --------------------------------------------------------

    def begin_update(self) -> InMemoryTransaction:
        if self._active is not None:
            raise TransactionError("an update block is already open")
        self._active = InMemoryTransaction(self)
        return self._active

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    def undo(self) -> bool:
        """Revert the most recent committed transaction; ``False`` if there is none."""

        if self._active is not None:
            raise TransactionError("cannot undo while an update block is open")
        if not self._undo_stack:
            return False
        step = self._undo_stack.pop()
        for node, before in reversed(step.before):
            self._write(node, before)
        log.debug("Undid update of %d node(s)", len(step.before))
        return True

    # -- internals used by InMemoryTransaction -------------------------------

    def _own(self, node: SceneNodeView) -> SceneNode:
        owned = self._nodes.get(node.id) if isinstance(node, SceneNode) else None
        if owned is None or owned is not node:
            raise InvalidPatchError(f"{node!r} does not belong to this scene")
        return owned

    def _write(self, node: SceneNode, properties: NodeProperties) -> None:
        node.properties = properties
        self._refresh(node)

    def _refresh(self, node: SceneNode) -> None:
        # theme changes cascade to descendants
        node.resolved = resolve_properties(node.properties, self.effective_theme(node))
        for child in self.children(node):
            self._refresh(child)

    def _close(self, transaction: InMemoryTransaction, step: UndoStep | None) -> None:
        if self._active is not transaction:
            raise TransactionError("transaction is not the active update block")
        self._active = None
        if step is not None:
            self._undo_stack.append(step)


class InMemoryTransaction:
    """One open update block of an ``InMemoryScene``."""

    def __init__(self, scene: InMemoryScene) -> None:
        self._scene = scene
        self._before: dict[UUID, tuple[SceneNode, NodeProperties]] = {}
        self._closed = False

    def update(self, node: SceneNodeView, patch: Mapping[str, object]) -> None:
        self._ensure_open()
        unknown = sorted(set(patch) - PROPERTY_NAMES)
        if unknown:
            raise InvalidPatchError(f"unknown property field(s): {', '.join(unknown)}")
        owned = self._scene._own(node)  # noqa: SLF001
        self._before.setdefault(owned.id, (owned, owned.properties))
        self._scene._write(owned, replace(owned.properties, **patch))  # noqa: SLF001  # pyright: ignore[reportArgumentType]

    def commit(self, *, undo: bool) -> None:
        self._ensure_open()
        self._closed = True
        step = UndoStep(tuple(self._before.values())) if undo and self._before else None
        self._scene._close(self, step)  # noqa: SLF001
        log.debug("Committed update of %d node(s) (undo=%s)", len(self._before), undo)

    def rollback(self) -> None:
        self._ensure_open()
        self._closed = True
        for node, before in reversed(list(self._before.values())):
            self._scene._write(node, before)  # noqa: SLF001
        self._scene._close(self, None)  # noqa: SLF001
        log.debug("Rolled back update of %d node(s)", len(self._before))

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransactionError("update block is already closed")


def build_scene(nodes: Iterable[tuple[NodeType, NodeProperties]]) -> InMemoryScene:
    """Scene with top-level ``nodes``, all of them selected."""

    scene = InMemoryScene()
    scene.select(*(scene.add(node_type, properties) for node_type, properties in nodes))
    return scene
