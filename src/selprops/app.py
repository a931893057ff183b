"""Application entry points for the property panel."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from selprops.domain.aggregate import SelectionSnapshot
from selprops.domain.aggregate import compute_all_properties as aggregate_selection
from selprops.domain.commit import execute, plan, transaction

if TYPE_CHECKING:
    from collections.abc import Iterable

    from selprops.config import ToleranceConfig
    from selprops.domain.commit import EditableProperty
    from selprops.domain.ports import SceneEngine, SceneNodeView, TransactionScope

BlockUpdateFn = Callable[["TransactionScope", "SceneNodeView"], None]


log = getLogger(__name__)


def compute_all_properties(
    selection: Iterable[SceneNodeView],
    *,
    tolerances: ToleranceConfig | None = None,
) -> SelectionSnapshot:
    """Aggregate the properties shown for ``selection``."""

    return aggregate_selection(selection, tolerances=tolerances)


def commit_property(engine: SceneEngine, prop: EditableProperty | str, value: object) -> None:
    """Write one property edit to every selected node as a single undo step."""

    selection = engine.selected_nodes
    if not selection:
        return
    instructions = plan(prop, value, selection)
    result = execute(instructions, engine)
    log.info(f"Committed {prop}: {result.applied} of {len(selection)} node(s) updated")


def block_update(engine: SceneEngine, fn: BlockUpdateFn) -> None:
    """Run ``fn(scope, node)`` for every selected node inside one transaction.

    Editors that change several related fields at once (a gradient's stop
    list, for instance) use this instead of ``commit_property``.
    """

    selection = engine.selected_nodes
    if not selection:
        return
    with transaction(engine) as scope:
        for node in selection:
            fn(scope, node)
    log.info(f"Block update over {len(selection)} node(s) committed")
