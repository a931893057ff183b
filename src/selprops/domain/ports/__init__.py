"""Domain port definitions for adapters."""

from __future__ import annotations

from .engine import SceneEngine, SceneNodeView, TransactionScope

__all__ = [
    "SceneEngine",
    "SceneNodeView",
    "TransactionScope",
]
