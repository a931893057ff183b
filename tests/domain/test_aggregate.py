from __future__ import annotations

import math
from itertools import permutations

import pytest

from selprops.adapters.memory import InMemoryScene
from selprops.config import ToleranceConfig
from selprops.domain.aggregate import (
    Accumulator,
    SelectionSnapshot,
    compute_all_properties,
    finalize,
    fold_node,
)
from selprops.domain.extractors import PropertyGroup, build_extractors
from selprops.domain.model import (
    MIXED,
    ColorFill,
    DualValue,
    Effect,
    EffectType,
    NodeType,
    SceneNode,
    SizingBehavior,
)
from tests.helpers.scene import add_node, color_variable, number_variable


def test_empty_selection_yields_empty_snapshot() -> None:
    assert compute_all_properties([]) == SelectionSnapshot()


def test_single_node_reports_its_values(scene: InMemoryScene) -> None:
    node = add_node(
        scene,
        x=10.0,
        y=20.0,
        width=100.0,
        height=50.0,
        opacity=0.5,
        corner_radius=4.0,
        name="Card",
    )

    snapshot = compute_all_properties([node])

    assert snapshot.count == 1
    assert snapshot.position is not None
    assert snapshot.position.x == pytest.approx(10.0)
    assert snapshot.position.y == pytest.approx(20.0)
    assert snapshot.dimensions is not None
    assert snapshot.dimensions.width == 100.0
    assert snapshot.opacity == DualValue(0.5, 0.5)
    assert snapshot.corner_radii == DualValue((4.0, 4.0, 4.0, 4.0), (4.0, 4.0, 4.0, 4.0))
    assert snapshot.layer_name == "Card"
    assert snapshot.layout is None
    assert snapshot.text is None
    assert snapshot.mixed_fields() == ()


def test_disagreement_is_reported_per_field(scene: InMemoryScene) -> None:
    a = add_node(scene, width=100.0, height=50.0)
    b = add_node(scene, width=120.0, height=50.0)

    snapshot = compute_all_properties([a, b])

    assert snapshot.dimensions is not None
    assert snapshot.dimensions.width is MIXED
    assert snapshot.dimensions.height == 50.0
    assert snapshot.layer_name == "Rectangle"
    assert "dimensions.width" in snapshot.mixed_fields()


def test_fold_is_order_independent(scene: InMemoryScene) -> None:
    brand = color_variable("brand", "#ff0000")
    nodes = [
        add_node(scene, NodeType.FRAME, width=10.0, fills=(ColorFill(brand),), opacity=0.6),
        add_node(scene, NodeType.TEXT, width=10.0, fills=(ColorFill(brand),), opacity=0.6),
        add_node(scene, NodeType.ELLIPSE, width=12.0, opacity=0.6, stroke_width=(1.0, 2.0)),
        add_node(scene, NodeType.FRAME, width=10.0, corner_radius=(1.0, 2.0, 3.0, 4.0)),
    ]

    first, *others = (compute_all_properties(list(order)) for order in permutations(nodes))

    assert all(snapshot == first for snapshot in others)


def test_mixed_is_monotonic(scene: InMemoryScene, tolerances: ToleranceConfig) -> None:
    extractors = build_extractors(tolerances)
    nodes = [add_node(scene, opacity=value) for value in (0.2, 0.8, 0.2, 0.2)]

    acc = Accumulator()
    seen_mixed = False
    for node in nodes:
        acc = fold_node(acc, node, extractors)
        opacity = finalize(acc, extractors).opacity
        seen_mixed = seen_mixed or opacity is MIXED
        if seen_mixed:
            assert opacity is MIXED


def test_fold_does_not_mutate_previous_accumulator(
    scene: InMemoryScene, tolerances: ToleranceConfig
) -> None:
    extractors = build_extractors(tolerances)
    first = fold_node(Accumulator(), add_node(scene, opacity=0.2), extractors)
    fold_node(first, add_node(scene, opacity=0.9), extractors)

    assert first.count == 1
    assert finalize(first, extractors).opacity == DualValue(0.2, 0.2)


def test_inapplicable_node_is_not_a_disagreement(scene: InMemoryScene) -> None:
    rectangle = add_node(scene, NodeType.RECTANGLE, corner_radius=6.0)
    ellipse = add_node(scene, NodeType.ELLIPSE)

    snapshot = compute_all_properties([rectangle, ellipse])

    assert snapshot.corner_radii == DualValue((6.0, 6.0, 6.0, 6.0), (6.0, 6.0, 6.0, 6.0))
    assert snapshot.layout is None


def test_text_group_ignores_non_text_nodes(scene: InMemoryScene) -> None:
    text = add_node(scene, NodeType.TEXT, font_size=18.0)
    frame = add_node(scene, NodeType.FRAME, layout_child_spacing=8.0)

    snapshot = compute_all_properties([text, frame])

    assert snapshot.text is not None
    assert snapshot.text.font_size == DualValue(18.0, 18.0)
    assert snapshot.layout is not None
    assert snapshot.layout.child_spacing == DualValue(8.0, 8.0)


@pytest.mark.parametrize(
    ("first", "second", "mixed"),
    [
        (0.601, 0.599, False),
        (0.60, 0.65, True),
    ],
)
def test_opacity_tolerance(scene: InMemoryScene, first: float, second: float, mixed: bool) -> None:
    nodes = [add_node(scene, opacity=first), add_node(scene, opacity=second)]

    snapshot = compute_all_properties(nodes)

    assert (snapshot.opacity is MIXED) is mixed


def test_shared_reference_is_not_mixed(scene: InMemoryScene) -> None:
    radius = number_variable("radius", 8.0, dark=6.0)
    light = add_node(scene, corner_radius=radius)
    dark_frame = add_node(scene, NodeType.FRAME, theme={"mode": "dark"})
    dark = add_node(scene, parent=dark_frame, corner_radius=radius)

    snapshot = compute_all_properties([light, dark])

    assert snapshot.corner_radii is not MIXED
    assert snapshot.corner_radii is not None


def test_distinct_references_with_equal_values_are_mixed(scene: InMemoryScene) -> None:
    a = add_node(scene, opacity=number_variable("fade", 0.5))
    b = add_node(scene, opacity=number_variable("dim", 0.5))

    assert compute_all_properties([a, b]).opacity is MIXED


def test_reference_versus_literal_is_mixed(scene: InMemoryScene) -> None:
    a = add_node(scene, opacity=number_variable("fade", 0.5))
    b = add_node(scene, opacity=0.5)

    assert compute_all_properties([a, b]).opacity is MIXED


def test_fills_compare_structurally(scene: InMemoryScene) -> None:
    a = add_node(scene, fills=(ColorFill("#ffffff"),))
    b = add_node(scene, fills=(ColorFill("#ffffff"),))
    c = add_node(scene, fills=(ColorFill("#000000"),))

    assert compute_all_properties([a, b]).fills == DualValue(
        (ColorFill("#ffffff"),), (ColorFill("#ffffff"),)
    )
    assert compute_all_properties([a, c]).fills is MIXED


def test_context_and_metadata_are_single_selection_only(scene: InMemoryScene) -> None:
    a = add_node(scene, context="hero image", metadata={"source": "import"})
    b = add_node(scene, context="hero image", metadata={"source": "import"})

    single = compute_all_properties([a])
    multiple = compute_all_properties([a, b])

    assert single.context == "hero image"
    assert single.metadata == {"source": "import"}
    assert multiple.context is None
    assert multiple.metadata is None


def test_sizing_and_rotation_aggregate(scene: InMemoryScene) -> None:
    a = add_node(scene, horizontal_sizing=SizingBehavior.FIT_CONTENT, rotation=math.pi / 4)
    b = add_node(scene, rotation=math.pi / 4 + 5e-5)

    snapshot = compute_all_properties([a, b])

    assert snapshot.sizing is not None
    assert snapshot.sizing.horizontal is MIXED
    assert snapshot.sizing.vertical is SizingBehavior.FIXED
    assert snapshot.position is not None
    assert snapshot.position.rotation == pytest.approx(math.pi / 4)


def test_malformed_node_is_skipped_for_its_group(scene: InMemoryScene) -> None:
    good = add_node(scene, NodeType.FRAME, layout_padding=4.0)
    broken = add_node(scene, NodeType.FRAME, layout_padding=(1.0, 2.0, 3.0))

    snapshot = compute_all_properties([good, broken])

    assert snapshot.layout is not None
    assert snapshot.layout.padding == DualValue((4.0, 4.0, 4.0, 4.0), (4.0, 4.0, 4.0, 4.0))
    assert snapshot.count == 2


def test_custom_tolerances_are_honoured(scene: InMemoryScene) -> None:
    a = add_node(scene, opacity=0.60)
    b = add_node(scene, opacity=0.65)

    loose = ToleranceConfig(opacity=0.1)

    assert compute_all_properties([a, b], tolerances=loose).opacity == DualValue(0.60, 0.60)


def test_every_group_maps_to_a_snapshot_field() -> None:
    names = set(SelectionSnapshot.__dataclass_fields__)
    assert {group.value for group in PropertyGroup} <= names


@pytest.mark.parametrize("order", list(permutations([0.0, 0.008, 0.016])))
def test_tolerance_chains_are_mixed_in_every_order(
    scene: InMemoryScene, order: tuple[float, ...]
) -> None:
    nodes = [add_node(scene, opacity=value) for value in order]

    assert compute_all_properties(nodes).opacity is MIXED


def test_agreeing_readings_report_the_same_value_in_every_order(scene: InMemoryScene) -> None:
    nodes = [add_node(scene, opacity=value) for value in (0.5, 0.504, 0.508)]

    results = {compute_all_properties(list(order)).opacity for order in permutations(nodes)}

    assert len(results) == 1
    assert MIXED not in results


def _themed_pair(scene: InMemoryScene, **properties: object) -> list[SceneNode]:
    light = add_node(scene, **properties)
    dark_frame = add_node(scene, NodeType.FRAME, theme={"mode": "dark"})
    dark = add_node(scene, parent=dark_frame, **properties)
    return [light, dark]


def test_shared_fill_variable_across_themes_is_not_mixed(scene: InMemoryScene) -> None:
    brand = color_variable("brand", "#ff0000", dark="#990000")
    fills = (ColorFill(brand),)
    nodes = _themed_pair(scene, fills=fills)
    assert nodes[0].resolved.fills != nodes[1].resolved.fills

    snapshot = compute_all_properties(nodes)

    assert snapshot.fills is not MIXED
    assert snapshot.fills is not None
    assert snapshot.fills.authored == fills


def test_shared_stroke_fill_variable_across_themes_is_not_mixed(scene: InMemoryScene) -> None:
    brand = color_variable("brand", "#ff0000", dark="#990000")
    nodes = _themed_pair(scene, stroke_fills=(ColorFill(brand),))

    stroke = compute_all_properties(nodes).stroke

    assert stroke is not None
    assert stroke.fills is not MIXED
    assert stroke.fills is not None
    assert stroke.fills.resolved in {(ColorFill("#ff0000"),), (ColorFill("#990000"),)}


def test_shared_effect_variable_across_themes_is_not_mixed(scene: InMemoryScene) -> None:
    shadow = color_variable("shadow", "#00000040", dark="#ffffff40")
    nodes = _themed_pair(scene, effects=(Effect(EffectType.DROP_SHADOW, color=shadow),))

    assert compute_all_properties(nodes).effects is not MIXED


def test_stroke_fills_report_resolved_colours(scene: InMemoryScene) -> None:
    brand = color_variable("brand", "#336699")
    node = add_node(scene, stroke_fills=(ColorFill(brand),))

    stroke = compute_all_properties([node]).stroke

    assert stroke is not None
    assert stroke.fills == DualValue((ColorFill(brand),), (ColorFill("#336699"),))


def test_literal_fills_with_different_colours_are_mixed(scene: InMemoryScene) -> None:
    a = add_node(scene, stroke_fills=(ColorFill("#ffffff"),))
    b = add_node(scene, stroke_fills=(ColorFill("#000000"),))

    stroke = compute_all_properties([a, b]).stroke

    assert stroke is not None
    assert stroke.fills is MIXED


def test_snapshot_does_not_alias_node_mappings(scene: InMemoryScene) -> None:
    theme = {"mode": "dark"}
    metadata = {"source": "import"}
    node = add_node(scene, NodeType.FRAME, theme=theme, metadata=metadata)

    snapshot = compute_all_properties([node])
    theme["mode"] = "light"
    metadata["source"] = "manual"

    assert snapshot.theme == {"mode": "dark"}
    assert snapshot.metadata == {"source": "import"}
    with pytest.raises(TypeError):
        snapshot.theme["mode"] = "light"  # pyright: ignore[reportIndexIssue, reportOptionalSubscript]
