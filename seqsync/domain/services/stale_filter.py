"""
Stale value detection.

A stale value is an assigned (non-zero) state entry whose identifier no
longer appears in the specification.
"""

from typing import List, Sequence


def find_stale(state: Sequence[int], spec: Sequence[int]) -> List[int]:
    """All non-zero values of `state` absent from `spec`, in state order."""
    wanted = set(spec)
    return [value for value in state if value != 0 and value not in wanted]
