"""
Edit vocabulary and the two primitive state mutations.

Positions are 1-based. An insert position names the slot the new
placeholder goes after (0 prepends, len(state) appends); a delete
position names the slot removed.
"""

from dataclasses import dataclass
from typing import List, MutableSequence, Union


PLACEHOLDER = 0


@dataclass(frozen=True)
class InsertAt:
    """Insert a placeholder after `position`."""
    position: int

    @property
    def action(self) -> str:
        return "insert"


@dataclass(frozen=True)
class DeleteAt:
    """Remove the slot at `position`."""
    position: int

    @property
    def action(self) -> str:
        return "delete"


@dataclass(frozen=True)
class NoEdit:
    """Nothing left for the planner to fix."""


Edit = Union[InsertAt, DeleteAt]
PlanResult = Union[InsertAt, DeleteAt, NoEdit]


def insert_placeholder(state: MutableSequence[int], position: int) -> None:
    """Insert a placeholder so that it follows the slot at `position`."""
    if position < 0 or position > len(state):
        raise IndexError(
            f"insert position {position} out of range for sequence of length {len(state)}"
        )
    state.insert(position, PLACEHOLDER)


def delete_at(state: MutableSequence[int], position: int) -> int:
    """Remove and return the element at 1-based `position`."""
    if position < 1 or position > len(state):
        raise IndexError(
            f"delete position {position} out of range for sequence of length {len(state)}"
        )
    removed = state[position - 1]
    del state[position - 1]
    return removed


def apply_edit(state: MutableSequence[int], edit: Edit) -> None:
    if isinstance(edit, InsertAt):
        insert_placeholder(state, edit.position)
    elif isinstance(edit, DeleteAt):
        delete_at(state, edit.position)
    else:
        raise TypeError(f"Cannot apply {edit!r}")


def describe_edits(edits: List[Edit]) -> List[str]:
    """Human-readable form, e.g. ["insert@0", "delete@3"]."""
    return [f"{edit.action}@{edit.position}" for edit in edits]
