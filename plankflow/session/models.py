"""Session data types.

A session is the ordered list of timed segments recorded during one workout
attempt. Segments are immutable once closed; a session is immutable once
sealed by the recorder.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Side = Literal["front", "left", "right"]


class Segment(BaseModel):
    """One continuously timed hold on one side of the body."""

    model_config = ConfigDict(frozen=True)

    side: Side
    duration_ms: int = Field(ge=0)


class Session(BaseModel):
    """A sealed workout session."""

    model_config = ConfigDict(frozen=True)

    segments: tuple[Segment, ...] = ()

    @property
    def total_ms(self) -> int:
        return sum(segment.duration_ms for segment in self.segments)


class SessionSummary(BaseModel):
    """Reportable metrics for a finished session.

    Attributes:
        total_plank_ms: Sum of all segment durations
        longest_hold_ms: Longest single segment (0 when there are none)
        calories: Estimated calories, None when body weight is unknown
    """

    model_config = ConfigDict(frozen=True)

    total_plank_ms: int = Field(ge=0)
    longest_hold_ms: int = Field(ge=0)
    calories: int | None = None
