"""
Reconciler — positional reconciliation of a state sequence against its spec.

Pure mechanical component. The caller owns both sequences; `state` is
mutated in place and `spec` is only read.

Phases:
- RemoveStale:  delete assigned values that left the spec, one at a time
- FixGaps:      ask the planner for one edit, apply it, repeat
- TrimSurplus:  drop placeholders while the state is longer than the spec
- Post-check:   the state must match positionally before reporting success

Rules:
- Only placeholder slots are inserted or removed, plus stale values
- A still-valid assigned value is never removed or rewritten
- Failures are returned, never raised; the state is left in its last
  valid intermediate form
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, MutableSequence, Optional, Sequence

from seqsync.domain.services.mutator import (
    PLACEHOLDER,
    DeleteAt,
    Edit,
    NoEdit,
    apply_edit,
    describe_edits,
)
from seqsync.domain.services.patch_planner import plan_fix
from seqsync.domain.services.position_resolver import anchors, locate
from seqsync.domain.services.stale_filter import find_stale
from seqsync.domain.services.trace import TraceEventKind, TraceSink, emit
from seqsync.observability.logging import ContextLogger, get_logger


class ReconcileStatus(str, Enum):
    CONVERGED = "converged"
    FAILED = "failed"


class FailureKind(str, Enum):
    """Why a reconciliation stopped short."""
    STALE_UNRESOLVABLE = "stale_unresolvable"
    NO_PROGRESS = "no_progress"
    INVARIANT_VIOLATION = "invariant_violation"


@dataclass
class ReconcileResult:
    """Outcome of one reconcile() call."""
    status: ReconcileStatus
    failure: Optional[FailureKind] = None
    reason: str = ""
    edits: List[Edit] = field(default_factory=list)
    stale_removed: List[int] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.status == ReconcileStatus.CONVERGED

    @property
    def edit_count(self) -> int:
        return len(self.edits)

    @property
    def summary(self) -> Dict[str, object]:
        return {
            "status": self.status.value,
            "failure": self.failure.value if self.failure else None,
            "reason": self.reason,
            "edits": describe_edits(self.edits),
            "stale_removed": list(self.stale_removed),
        }


def sequences_match(spec: Sequence[int], state: Sequence[int]) -> bool:
    """Same length, and every slot is a placeholder or the spec's value."""
    if len(spec) != len(state):
        return False
    return all(value == PLACEHOLDER or value == wanted for wanted, value in zip(spec, state))


def reconcile(
    spec: Sequence[int],
    state: MutableSequence[int],
    trace: Optional[TraceSink] = None,
) -> ReconcileResult:
    """Bring `state` back into positional agreement with `spec`.

    Args:
        spec: Ascending, unique, positive identifiers.
        state: Placeholders (0) and assigned identifiers. Mutated in place.
        trace: Optional sink for structured trace events.

    Returns:
        ReconcileResult; on failure `state` holds every edit applied so far.
    """
    result = ReconcileResult(status=ReconcileStatus.CONVERGED)
    log = get_logger(__name__, spec_length=len(spec), state_length=len(state))

    if sequences_match(spec, state):
        log.debug("Sequences already match; nothing to do")
        return result

    # RemoveStale
    stale = find_stale(state, spec)
    while stale:
        value = stale[0]
        position = locate(value, state)
        if position is None:
            return _fail(
                log,
                result,
                FailureKind.STALE_UNRESOLVABLE,
                f"stale value {value} could not be located in state",
            )
        _apply(state, DeleteAt(position), result, trace, log)
        result.stale_removed.append(value)
        emit(trace, TraceEventKind.STALE_REMOVED, value=value)
        stale = find_stale(state, spec)

    if sequences_match(spec, state):
        return _finish(log, result, spec, state)

    assigned = [a.value for a in anchors(spec, state)]
    if any(later <= earlier for earlier, later in zip(assigned, assigned[1:])):
        return _fail(
            log,
            result,
            FailureKind.NO_PROGRESS,
            f"assigned values {assigned} are out of specification order",
        )

    # FixGaps
    budget = 2 * (len(spec) + len(state)) + 2
    while True:
        edit = plan_fix(spec, state, trace)
        if isinstance(edit, NoEdit):
            break
        if budget <= 0:
            return _fail(
                log, result, FailureKind.NO_PROGRESS, "gap fixing exceeded its edit budget"
            )
        if isinstance(edit, DeleteAt) and state[edit.position - 1] != PLACEHOLDER:
            return _fail(
                log,
                result,
                FailureKind.NO_PROGRESS,
                f"planned delete at {edit.position} would drop assigned value "
                f"{state[edit.position - 1]}",
            )
        _apply(state, edit, result, trace, log)
        budget -= 1

    if len(state) <= len(spec) and not sequences_match(spec, state):
        return _fail(
            log,
            result,
            FailureKind.NO_PROGRESS,
            "no edit found but state still disagrees with the specification",
        )

    # TrimSurplus
    while len(state) > len(spec):
        position = _surplus_position(spec, state)
        if state[position - 1] != PLACEHOLDER:
            return _fail(
                log,
                result,
                FailureKind.NO_PROGRESS,
                f"no removable placeholder found (slot {position} holds {state[position - 1]})",
            )
        _apply(state, DeleteAt(position), result, trace, log)

    return _finish(log, result, spec, state)


def _surplus_position(spec: Sequence[int], state: Sequence[int]) -> int:
    """Placeholder to drop: just before the first drifted anchor, else the last slot."""
    for anchor in anchors(spec, state):
        if anchor.drift > 0:
            return anchor.pos_in_state - 1
    return len(state)


def _apply(
    state: MutableSequence[int],
    edit: Edit,
    result: ReconcileResult,
    trace: Optional[TraceSink],
    log: ContextLogger,
) -> None:
    apply_edit(state, edit)
    result.edits.append(edit)
    emit(trace, TraceEventKind.EDIT_APPLIED, action=edit.action, position=edit.position)
    log.debug(f"Applied {edit.action} at {edit.position}; state now {list(state)}")


def _finish(
    log: ContextLogger,
    result: ReconcileResult,
    spec: Sequence[int],
    state: Sequence[int],
) -> ReconcileResult:
    if not sequences_match(spec, state):
        return _fail(
            log,
            result,
            FailureKind.INVARIANT_VIOLATION,
            f"state {list(state)} does not match specification {list(spec)}",
        )
    log.debug(f"Converged after {result.edit_count} edit(s)", edits=result.edit_count)
    return result


def _fail(
    log: ContextLogger,
    result: ReconcileResult,
    failure: FailureKind,
    reason: str,
) -> ReconcileResult:
    result.status = ReconcileStatus.FAILED
    result.failure = failure
    result.reason = reason
    log.warning(
        f"Reconciliation failed ({failure.value}): {reason}",
        failure=failure.value,
        edits=result.edit_count,
    )
    return result
