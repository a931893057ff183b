"""Write path: plan property edits and apply them transactionally."""

from __future__ import annotations

from .execute import ExecutionResult, execute, transaction
from .plan import CommitInstruction, plan, text_reflow_patch
from .properties import (
    PROPERTY_SPECS,
    CompositeShape,
    EditableProperty,
    PropertyCategory,
    PropertySpec,
    ValueKind,
)
from .values import InvalidValueError, coerce_value

__all__ = [
    "PROPERTY_SPECS",
    "CommitInstruction",
    "CompositeShape",
    "EditableProperty",
    "ExecutionResult",
    "InvalidValueError",
    "PropertyCategory",
    "PropertySpec",
    "ValueKind",
    "coerce_value",
    "execute",
    "plan",
    "text_reflow_patch",
]
