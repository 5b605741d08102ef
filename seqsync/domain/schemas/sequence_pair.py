"""Validated input pair for reconciliation."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class SequencePair(BaseModel):
    """A specification sequence and the state sequence that shadows it."""

    spec: List[int] = Field(default_factory=list, description="Ascending, unique, positive identifiers")
    state: List[int] = Field(default_factory=list, description="Placeholders (0) and assigned identifiers")

    @field_validator("spec")
    @classmethod
    def spec_ascending_positive(cls, v: List[int]) -> List[int]:
        for value in v:
            if value <= 0:
                raise ValueError(f"specification identifiers must be positive, got {value}")
        for earlier, later in zip(v, v[1:]):
            if later <= earlier:
                raise ValueError(
                    f"specification must be strictly ascending, {later} follows {earlier}"
                )
        return v

    @field_validator("state")
    @classmethod
    def state_non_negative(cls, v: List[int]) -> List[int]:
        for value in v:
            if value < 0:
                raise ValueError(f"state values must be non-negative, got {value}")
        return v
