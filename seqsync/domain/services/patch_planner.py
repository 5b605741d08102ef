"""
PatchPlanner — decides the next single corrective edit.

Call only after stale values have been removed from the state. Each
not-found run must be realized as a run of placeholders of the same
width, measured between the anchors that bound it:

- LEADING:    run starts at position 1; the state must open with exactly
              as many placeholders as the run is long.
- TRAILING:   run ends at the last position; the state must close with
              exactly as many slots after the before-anchor as the spec.
- SANDWICHED: the distance between the two anchors must be the same in
              the state as in the spec.

The first unsatisfied run yields one edit. The caller applies it and
asks again until NoEdit comes back.

Runs are maximal, so the spec values bounding a run always occur in the
state and every anchor lookup below succeeds.
"""

import logging
from typing import Optional, Sequence

from seqsync.domain.services.gap_analyzer import (
    NotFoundRun,
    RunKind,
    classify_run,
    find_not_found_runs,
)
from seqsync.domain.services.mutator import DeleteAt, Edit, InsertAt, NoEdit, PlanResult
from seqsync.domain.services.position_resolver import locate, locate_last
from seqsync.domain.services.trace import TraceEventKind, TraceSink, emit

logger = logging.getLogger(__name__)


def plan_fix(
    spec: Sequence[int],
    state: Sequence[int],
    trace: Optional[TraceSink] = None,
) -> PlanResult:
    """Return the next edit for `state`, or NoEdit when every run is satisfied."""
    runs = find_not_found_runs(spec, state)
    if not runs:
        return NoEdit()

    for run in runs:
        kind = classify_run(run, len(spec))
        emit(trace, TraceEventKind.RUN_DETECTED, start=run.start, end=run.end, kind=kind.value)

        if kind == RunKind.LEADING:
            edit = _plan_leading(run, spec, state)
        elif kind == RunKind.TRAILING:
            edit = _plan_trailing(run, spec, state)
        else:
            edit = _plan_sandwiched(run, spec, state)

        if edit is None:
            continue
        logger.debug(f"Run {run.start}-{run.end} ({kind.value}) needs {edit}")
        return edit

    return NoEdit()


def _plan_leading(run: NotFoundRun, spec: Sequence[int], state: Sequence[int]) -> Optional[Edit]:
    if run.spans(len(spec)):
        # Whole spec missing: state must be placeholders of the same length
        if len(state) == len(spec):
            return None
        if len(state) < len(spec):
            return InsertAt(0)
        return DeleteAt(1)

    after_pos_spec = run.end + 1
    after_pos_state = locate(spec[after_pos_spec - 1], state)
    if after_pos_state == after_pos_spec:
        return None
    if after_pos_state < after_pos_spec:
        return InsertAt(0)
    return DeleteAt(1)


def _plan_trailing(run: NotFoundRun, spec: Sequence[int], state: Sequence[int]) -> Optional[Edit]:
    before_pos_spec = run.start - 1
    before_pos_state = locate_last(spec[before_pos_spec - 1], state)
    from_end_spec = len(spec) - before_pos_spec
    from_end_state = len(state) - before_pos_state
    if from_end_spec == from_end_state:
        return None
    if from_end_state < from_end_spec:
        return InsertAt(len(state))
    return DeleteAt(len(state))


def _plan_sandwiched(run: NotFoundRun, spec: Sequence[int], state: Sequence[int]) -> Optional[Edit]:
    before_pos_spec = run.start - 1
    after_pos_spec = run.end + 1
    before_pos_state = locate(spec[before_pos_spec - 1], state)
    after_pos_state = locate(spec[after_pos_spec - 1], state)
    required = after_pos_spec - before_pos_spec
    actual = after_pos_state - before_pos_state
    if actual == required:
        return None
    if actual < required:
        return InsertAt(before_pos_state)
    return DeleteAt(before_pos_state + 1)
