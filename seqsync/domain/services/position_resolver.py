"""
Position lookups shared by the planner and the surplus trimmer.

Positions are 1-based throughout, matching the edit vocabulary.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class Anchor:
    """A value known to exist in both sequences, with its position in each."""
    value: int
    pos_in_spec: int
    pos_in_state: int

    @property
    def drift(self) -> int:
        """How many slots later the value sits in the state than in the spec."""
        return self.pos_in_state - self.pos_in_spec


def locate(value: int, sequence: Sequence[int]) -> Optional[int]:
    """1-based position of the first occurrence of `value`, or None."""
    for pos, item in enumerate(sequence, start=1):
        if item == value:
            return pos
    return None


def locate_last(value: int, sequence: Sequence[int]) -> Optional[int]:
    """1-based position of the last occurrence of `value`, scanning from the tail."""
    for pos in range(len(sequence), 0, -1):
        if sequence[pos - 1] == value:
            return pos
    return None


def nearest_anchor_after(
    start: int,
    spec: Sequence[int],
    state: Sequence[int],
) -> Optional[Anchor]:
    """
    First non-zero state value at or after 0-based offset `start`, paired
    with its position in `spec`.

    Returns None when no such value exists, or when the value found is
    not part of the specification (callers remove stale values first).
    """
    for offset in range(start, len(state)):
        value = state[offset]
        if value == 0:
            continue
        pos_in_spec = locate(value, spec)
        if pos_in_spec is None:
            return None
        return Anchor(value=value, pos_in_spec=pos_in_spec, pos_in_state=offset + 1)
    return None


def anchors(spec: Sequence[int], state: Sequence[int]) -> List[Anchor]:
    """Every assigned state value, in state order, with its positions."""
    found: List[Anchor] = []
    start = 0
    while True:
        anchor = nearest_anchor_after(start, spec, state)
        if anchor is None:
            return found
        found.append(anchor)
        start = anchor.pos_in_state
