"""
Gap analysis between a specification sequence and a state sequence.

Finds the maximal runs of specification identifiers that appear nowhere
in the state sequence. Membership is a full scan of the state, not a
positional comparison: assigned identifiers may have drifted.

All functions are pure — no side effects, same input always produces
same output.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence


class RunKind(str, Enum):
    """Where a not-found run sits relative to the specification."""
    LEADING = "leading"
    TRAILING = "trailing"
    SANDWICHED = "sandwiched"


@dataclass(frozen=True)
class NotFoundRun:
    """Maximal run of specification positions absent from the state (1-based, inclusive)."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def spans(self, spec_length: int) -> bool:
        """True when the run covers the whole specification."""
        return self.start == 1 and self.end == spec_length


def find_not_found_runs(spec: Sequence[int], state: Sequence[int]) -> List[NotFoundRun]:
    """
    Return the runs of `spec` positions whose identifiers are missing from `state`.

    Consecutive missing positions merge into one run. Runs are ordered
    by start position.
    """
    present = set(state)
    runs: List[NotFoundRun] = []
    run_start = 0

    for pos, value in enumerate(spec, start=1):
        if value in present:
            if run_start:
                runs.append(NotFoundRun(start=run_start, end=pos - 1))
                run_start = 0
        elif not run_start:
            run_start = pos

    if run_start:
        runs.append(NotFoundRun(start=run_start, end=len(spec)))

    return runs


def classify_run(run: NotFoundRun, spec_length: int) -> RunKind:
    """Leading wins over trailing when a run touches both ends."""
    if run.start == 1:
        return RunKind.LEADING
    if run.end == spec_length:
        return RunKind.TRAILING
    return RunKind.SANDWICHED
