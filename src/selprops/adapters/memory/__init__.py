"""In-memory scene engine used as the reference implementation of the ports."""

from __future__ import annotations

from .errors import InvalidPatchError, TransactionError
from .resolver import resolve_properties, resolve_value
from .scene import InMemoryScene, InMemoryTransaction, UndoStep, build_scene

__all__ = [
    "InMemoryScene",
    "InMemoryTransaction",
    "InvalidPatchError",
    "TransactionError",
    "UndoStep",
    "build_scene",
    "resolve_properties",
    "resolve_value",
]
