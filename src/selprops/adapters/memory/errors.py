"""Errors raised by the in-memory scene engine."""

from __future__ import annotations


class TransactionError(RuntimeError):
    """Raised when an update block is used out of order or opened twice."""


class InvalidPatchError(ValueError):
    """Raised when a patch names unknown fields or targets a foreign node."""
