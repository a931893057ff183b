from __future__ import annotations

from typing import Any

import pytest

from selprops.domain.composite import (
    compact_corners,
    compact_edges,
    expand_axes,
    expand_corners,
    expand_edges,
)


def test_expand_edges_broadcasts_scalar() -> None:
    assert expand_edges(4.0, 0.0) == (4.0, 4.0, 4.0, 4.0)


def test_expand_edges_defaults_when_unset() -> None:
    assert expand_edges(None, 0.0) == (0.0, 0.0, 0.0, 0.0)


def test_expand_edges_pair_is_horizontal_then_vertical() -> None:
    # (horizontal, vertical) -> (top, right, bottom, left)
    assert expand_edges((10.0, 20.0), 0.0) == (20.0, 10.0, 20.0, 10.0)


def test_expand_corners_pair_alternates() -> None:
    assert expand_corners((1.0, 2.0), 0.0) == (1.0, 2.0, 1.0, 2.0)


def test_expand_axes_accepts_symmetric_edges() -> None:
    assert expand_axes((20.0, 10.0, 20.0, 10.0), 0.0) == (10.0, 20.0)
    assert expand_axes(5.0, 0.0) == (5.0, 5.0)
    assert expand_axes((1.0, 2.0), 0.0) == (1.0, 2.0)


def test_expand_axes_rejects_asymmetric_edges() -> None:
    with pytest.raises(ValueError, match="not axis-symmetric"):
        expand_axes((1.0, 2.0, 3.0, 4.0), 0.0)


@pytest.mark.parametrize("expand", [expand_edges, expand_corners, expand_axes])
def test_malformed_tuple_is_rejected(expand: Any) -> None:
    with pytest.raises(ValueError, match="1, 2 or 4 entries"):
        expand((1.0, 2.0, 3.0), 0.0)


@pytest.mark.parametrize(
    "edges",
    [
        (1.0, 1.0, 1.0, 1.0),
        (2.0, 1.0, 2.0, 1.0),
        (1.0, 2.0, 3.0, 4.0),
        (0.0, 0.0, 5.0, 0.0),
    ],
)
def test_edges_survive_compaction(edges: tuple[float, float, float, float]) -> None:
    assert expand_edges(compact_edges(edges), 0.0) == edges


@pytest.mark.parametrize(
    "corners",
    [
        (3.0, 3.0, 3.0, 3.0),
        (1.0, 2.0, 1.0, 2.0),
        (1.0, 2.0, 3.0, 4.0),
    ],
)
def test_corners_survive_compaction(corners: tuple[float, float, float, float]) -> None:
    assert expand_corners(compact_corners(corners), 0.0) == corners


@pytest.mark.parametrize(
    ("stored", "smallest"),
    [
        (4.0, 4.0),
        ((4.0, 4.0), 4.0),
        ((10.0, 20.0), (10.0, 20.0)),
        ((20.0, 10.0, 20.0, 10.0), (10.0, 20.0)),
        ((1.0, 2.0, 3.0, 4.0), (1.0, 2.0, 3.0, 4.0)),
    ],
)
def test_compaction_finds_smallest_edge_shape(stored: Any, smallest: Any) -> None:
    assert compact_edges(expand_edges(stored, 0.0)) == smallest
