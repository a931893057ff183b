"""Merge rules that fold per-node readings into ``value | MIXED``.

A fold starts from ``UNSEEN`` (no node seen yet), adopts the first reading and
turns ``MIXED`` as soon as one reading disagrees under the field's equality
predicate. ``MIXED`` is absorbing.

Tolerance predicates are not transitive, so the aggregator folds with
``merge_span`` instead: every distinct reading is kept as a witness and a new
reading must agree with all of them. Whether a field is ``MIXED`` then depends
only on the set of readings, never on the order they arrive in.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Literal, cast

from selprops.domain.model import MIXED, Variable

if TYPE_CHECKING:
    from selprops.domain.model import DualValue, MixedType

type Equality[T] = Callable[[T, T], bool]


class Unseen(Enum):
    """Fold start: no applicable node has been visited yet."""

    UNSEEN = "unseen"

    def __repr__(self) -> str:
        return "UNSEEN"


UNSEEN: Final = Unseen.UNSEEN

type UnseenType = Literal[Unseen.UNSEEN]


def merge[T](
    common: T | MixedType | UnseenType,
    current: T,
    equal: Equality[T] | None = None,
) -> T | MixedType:
    """Fold ``current`` into the accumulator ``common``."""

    if common is UNSEEN:
        return current
    if common is MIXED:
        return MIXED
    same = equal(common, current) if equal is not None else common == current
    return common if same else MIXED


type Span[T] = tuple[T, ...]


def merge_span[T](
    span: Span[T] | MixedType | UnseenType,
    current: T,
    equal: Equality[T] | None = None,
) -> Span[T] | MixedType:
    """Fold ``current`` into a span of pairwise agreeing readings."""

    if span is UNSEEN:
        return (current,)
    if span is MIXED:
        return MIXED
    if any(merge(witness, current, equal) is MIXED for witness in span):
        return MIXED
    if current in span:
        return span
    return (*span, current)


def representative[T](span: Span[T]) -> T:
    """The reading reported for an agreeing span, chosen independently of fold order."""

    if len(span) == 1:
        return span[0]
    return min(span, key=repr)


def compare_values_with_resolved[T](
    a: DualValue[T],
    b: DualValue[T],
    resolved_compare: Equality[T],
) -> bool:
    """Compare two dual values, giving reference identity precedence.

    If either authored side is a variable, both must hold the very same
    variable, and then they are equal whatever it resolves to. Composites are
    compared entry by entry: shared references match by identity and only the
    literal entries are compared through ``resolved_compare``.
    """

    if not _references_match(a.authored, b.authored):
        return False
    if not _holds_reference(a.authored):
        return resolved_compare(a.resolved, b.resolved)
    if a.is_reference:
        return True
    return resolved_compare(a.resolved, _mask_references(a, b))


def _mask_references[T](a: DualValue[T], b: DualValue[T]) -> T:
    """``b.resolved`` with every referenced entry replaced by ``a``'s resolution."""

    authored = cast("tuple[object, ...]", a.authored)
    a_resolved = cast("tuple[object, ...]", a.resolved)
    b_resolved = cast("tuple[object, ...]", b.resolved)
    if not (len(authored) == len(a_resolved) == len(b_resolved)):
        return b.resolved
    masked = tuple(
        mine if _holds_reference(entry) else theirs
        for entry, mine, theirs in zip(authored, a_resolved, b_resolved, strict=True)
    )
    return cast("T", masked)


def _references_match(a: object, b: object) -> bool:
    if isinstance(a, Variable) or isinstance(b, Variable):
        return a is b
    if isinstance(a, tuple) and isinstance(b, tuple) and len(a) == len(b):  # pyright: ignore[reportUnknownArgumentType]
        return all(_references_match(x, y) for x, y in zip(a, b, strict=True))  # pyright: ignore[reportUnknownArgumentType, reportUnknownVariableType]
    return not (_holds_reference(a) or _holds_reference(b))


def _holds_reference(value: object) -> bool:
    if isinstance(value, Variable):
        return True
    return isinstance(value, tuple) and any(_holds_reference(item) for item in value)  # pyright: ignore[reportUnknownVariableType]


def nearly_equal(epsilon: float) -> Equality[float]:
    def _equal(a: float, b: float) -> bool:
        return abs(a - b) <= epsilon

    return _equal


def composite_equal(epsilon: float) -> Equality[float | Sequence[float]]:
    """Element-wise tolerance equality; sequences of different length never match."""

    def _equal(a: float | Sequence[float], b: float | Sequence[float]) -> bool:
        a_seq = isinstance(a, Sequence)
        b_seq = isinstance(b, Sequence)
        if a_seq and b_seq:
            if len(a) != len(b):
                return False
            return all(abs(x - y) <= epsilon for x, y in zip(a, b, strict=True))
        if a_seq or b_seq:
            return False
        return abs(a - b) <= epsilon  # pyright: ignore[reportOperatorIssue]

    return _equal


def structural_equal(a: object, b: object) -> bool:
    """Deep structural equality over frozen values, tuples and mappings."""

    return a == b


def dual_equal[T](resolved_compare: Equality[T]) -> Equality[DualValue[T]]:
    def _equal(a: DualValue[T], b: DualValue[T]) -> bool:
        return compare_values_with_resolved(a, b, resolved_compare)

    return _equal


def dual_structural_equal[T](a: DualValue[T], b: DualValue[T]) -> bool:
    """Structural equality of dual values holding nested records (fills, effects).

    When either authored side references a variable anywhere inside it, the
    authored records decide: variables compare by identity, so a shared
    reference agrees whatever it resolves to under each node's theme. Literal
    records compare on their resolved form.
    """

    if _contains_reference(a.authored) or _contains_reference(b.authored):
        return a.authored == b.authored
    return a.resolved == b.resolved


def _contains_reference(value: object) -> bool:
    if isinstance(value, Variable):
        return True
    if isinstance(value, tuple):
        return any(_contains_reference(item) for item in value)  # pyright: ignore[reportUnknownVariableType]
    if is_dataclass(value) and not isinstance(value, type):
        return any(_contains_reference(getattr(value, f.name)) for f in fields(value))
    return False
