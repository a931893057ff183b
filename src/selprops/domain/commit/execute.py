"""Apply planned instructions inside one engine transaction."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from selprops.domain.ports import SceneEngine, TransactionScope

    from .plan import CommitInstruction

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    applied: int = 0


@contextmanager
def transaction(engine: SceneEngine) -> Iterator[TransactionScope]:
    """Open one update block and commit it as a single undo step.

    If the body raises, the engine is asked to roll the block back and the
    original exception propagates unchanged.
    """

    scope = engine.begin_update()
    try:
        yield scope
    except BaseException:
        log.debug("Rolling back update block after failure")
        scope.rollback()
        raise
    scope.commit(undo=True)


def execute(instructions: Sequence[CommitInstruction], engine: SceneEngine) -> ExecutionResult:
    """Apply every instruction in one transaction.

    Instructions target disjoint nodes, so the order they are applied in does
    not change the result. An empty batch opens no transaction.
    """

    if not instructions:
        return ExecutionResult()
    with transaction(engine) as scope:
        for instruction in instructions:
            scope.update(instruction.target, instruction.patch)
    log.debug("Committed %d instruction(s)", len(instructions))
    return ExecutionResult(applied=len(instructions))
