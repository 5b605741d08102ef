"""
Tier-1 tests for patch_planner.py.

Pure in-memory. Each case asserts the single edit plan_fix proposes for
a stale-free state.
"""

from itertools import product

from seqsync.domain.services.mutator import DeleteAt, InsertAt, NoEdit
from seqsync.domain.services.patch_planner import plan_fix
from seqsync.domain.services.trace import TraceEventKind, TraceRecorder


class TestNoRuns:

    def test_everything_present(self):
        assert plan_fix([5, 10], [5, 10]) == NoEdit()

    def test_empty_pair(self):
        assert plan_fix([], []) == NoEdit()

    def test_surplus_placeholders_are_not_the_planners_job(self):
        """With no missing identifiers, extra zeros are left for trimming."""
        assert plan_fix([5, 10], [0, 5, 10]) == NoEdit()


class TestLeadingRun:

    def test_whole_span_already_right_length(self):
        assert plan_fix([18], [0]) == NoEdit()

    def test_whole_span_too_short(self):
        assert plan_fix([3, 13, 23], []) == InsertAt(0)
        assert plan_fix([3, 13, 23], [0, 0]) == InsertAt(0)

    def test_whole_span_too_long(self):
        assert plan_fix([5, 10, 15, 20], [0, 0, 0, 0, 0]) == DeleteAt(1)

    def test_too_few_leading_placeholders(self):
        # 5 missing; 10 should sit at position 2
        assert plan_fix([5, 10, 15, 20], [10, 15]) == InsertAt(0)

    def test_too_many_leading_placeholders(self):
        # 1 missing; 8 sits at 3 but belongs at 2
        assert plan_fix([1, 8, 9, 10], [0, 0, 8, 0]) == DeleteAt(1)

    def test_satisfied_leading_moves_on(self):
        # Leading run fine, trailing run short by one
        assert plan_fix([1, 8, 9, 10], [0, 8, 0]) == InsertAt(3)


class TestTrailingRun:

    def test_too_few_trailing_slots(self):
        assert plan_fix([1, 2, 3], [1, 0]) == InsertAt(2)

    def test_append_on_empty_tail(self):
        assert plan_fix([5, 10, 15, 20], [5, 10, 15]) == InsertAt(3)

    def test_too_many_trailing_slots(self):
        assert plan_fix([5, 10, 15, 20], [5, 0, 0, 0, 0]) == DeleteAt(5)

    def test_satisfied(self):
        assert plan_fix([5, 10, 15, 20], [5, 0, 0, 0]) == NoEdit()


class TestSandwichedRun:

    def test_gap_too_narrow(self):
        assert plan_fix([1, 2, 3], [1, 3]) == InsertAt(1)

    def test_gap_too_narrow_later_in_state(self):
        assert plan_fix([5, 10, 15, 16, 20, 25], [0, 10, 15, 20, 25]) == InsertAt(3)

    def test_gap_too_wide(self):
        # 10 missing between 5 and 15; gap in state is 3, needs 2
        assert plan_fix([5, 10, 15], [5, 0, 0, 15]) == DeleteAt(2)

    def test_gap_satisfied(self):
        assert plan_fix([5, 10, 15], [5, 0, 15]) == NoEdit()


class TestFirstRunWins:

    def test_only_one_edit_per_call(self):
        # Leading, sandwiched and trailing runs all unsatisfied
        assert plan_fix([1, 5, 10, 15, 20], [5, 15]) == InsertAt(0)

    def test_later_run_after_earlier_satisfied(self):
        assert plan_fix([1, 5, 10, 15, 20], [0, 5, 15]) == InsertAt(2)

    def test_does_not_mutate(self):
        state = [0, 0, 8, 0]
        plan_fix([1, 8, 9, 10], state)
        assert state == [0, 0, 8, 0]


class TestRunTrace:

    def test_emits_run_detected_for_examined_runs(self):
        recorder = TraceRecorder()
        plan_fix([1, 8, 9, 10], [0, 8, 0], trace=recorder)
        events = recorder.of_kind(TraceEventKind.RUN_DETECTED)
        assert [e.data for e in events] == [
            {"start": 1, "end": 1, "kind": "leading"},
            {"start": 3, "end": 4, "kind": "trailing"},
        ]

    def test_stops_reporting_after_first_unsatisfied_run(self):
        recorder = TraceRecorder()
        plan_fix([1, 5, 10, 15, 20], [5, 15], trace=recorder)
        assert len(recorder.of_kind(TraceEventKind.RUN_DETECTED)) == 1


class TestAnchorLookup:

    def test_bounding_anchors_always_found(self):
        """Every small state over the spec's values plans without a missing anchor."""
        spec = [2, 4, 6]
        for length in range(5):
            for state in product([0, 2, 4, 6, 9], repeat=length):
                edit = plan_fix(spec, list(state))
                assert isinstance(edit, (InsertAt, DeleteAt, NoEdit))

    def test_unsatisfied_runs_never_yield_no_edit(self):
        assert plan_fix([1, 5, 10], [5, 10]) == InsertAt(0)
        assert plan_fix([5, 10, 15], [5]) == InsertAt(1)
        assert plan_fix([5, 10, 15], [5, 15]) == InsertAt(1)
