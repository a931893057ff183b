"""Builders for scenes, nodes and variables used across tests."""

from __future__ import annotations

from typing import Any

from selprops.adapters.memory import InMemoryScene
from selprops.domain.model import (
    NodeProperties,
    NodeType,
    SceneNode,
    ThemedValue,
    Variable,
    VariableType,
)


def add_node(
    scene: InMemoryScene,
    node_type: NodeType = NodeType.RECTANGLE,
    *,
    parent: SceneNode | None = None,
    **properties: Any,
) -> SceneNode:
    """Add a node with the given authored properties to ``scene``."""

    return scene.add(node_type, NodeProperties(**properties), parent=parent)


def selected_scene(*nodes: tuple[NodeType, dict[str, Any]]) -> InMemoryScene:
    """Scene holding ``nodes`` at the top level, all selected."""

    scene = InMemoryScene()
    scene.select(*(add_node(scene, node_type, **props) for node_type, props in nodes))
    return scene


def number_variable(name: str, value: float, **themed: float) -> Variable:
    """Number variable resolving to ``value``; ``themed`` adds ``mode=<key>`` overrides."""

    values = [ThemedValue(value)]
    values.extend(ThemedValue(v, {"mode": mode}) for mode, v in themed.items())
    return Variable(name=name, type=VariableType.NUMBER, values=tuple(values))


def color_variable(name: str, value: str, **themed: str) -> Variable:
    values = [ThemedValue(value)]
    values.extend(ThemedValue(v, {"mode": mode}) for mode, v in themed.items())
    return Variable(name=name, type=VariableType.COLOR, values=tuple(values))
