"""Difficulty levels and their workout timings.

Levels are ordinal (0 = Beginner ... 4 = Expert). Harder levels hold longer
and rest less. The mapping is table-driven, not formulaic.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from plankflow.workouts.errors import InvalidLevelError, InvalidTimeScaleError

Level = int

DEFAULT_LEVEL: Level = 2

LEVEL_LABELS: tuple[str, ...] = (
    "Beginner",
    "Novice",
    "Intermediate",
    "Advanced",
    "Expert",
)

# Seconds, indexed by level
EXERCISE_BY_LEVEL: tuple[int, ...] = (35, 40, 45, 60, 70)
SHORT_BREAK_BY_LEVEL: tuple[int, ...] = (20, 18, 15, 12, 10)
LONG_BREAK_BY_LEVEL: tuple[int, ...] = (70, 65, 60, 50, 45)

COUNTDOWN_SECONDS = 10

# One tick before halfway, one past it, and the tick that reaches 0
MIN_EXERCISE_TICKS = 3


def to_ticks(seconds: float, time_scale: float = 1.0) -> int:
    """Convert a configured duration into whole clock ticks.

    Rounds up so a scaled interval never ends early.
    """
    return math.ceil(seconds * time_scale)


class WorkoutConfig(BaseModel):
    """Timings for one workout, all in seconds before scaling.

    Attributes:
        exercise_duration: Hold time per exercise
        short_break: Rest between exercises
        long_break: Rest before the final exercise
        time_scale: Multiplier applied to every duration when converting to ticks
        countdown: Get-into-position countdown before the first exercise
    """

    model_config = ConfigDict(frozen=True)

    exercise_duration: int = Field(gt=0)
    short_break: int = Field(ge=0)
    long_break: int = Field(ge=0)
    time_scale: float = Field(default=1.0, gt=0)
    countdown: int = Field(default=COUNTDOWN_SECONDS, ge=0)

    @model_validator(mode="after")
    def check_exercise_ticks(self) -> "WorkoutConfig":
        if self.exercise_ticks < MIN_EXERCISE_TICKS:
            raise ValueError(
                f"exercise of {self.exercise_duration}s at time_scale={self.time_scale} "
                f"is {self.exercise_ticks} ticks, at least {MIN_EXERCISE_TICKS} are needed"
            )
        return self

    @property
    def exercise_ticks(self) -> int:
        return to_ticks(self.exercise_duration, self.time_scale)

    @property
    def countdown_ticks(self) -> int:
        return to_ticks(self.countdown, self.time_scale)

    def break_duration(self, index: int, exercise_count: int) -> int:
        """Rest (seconds) following the exercise at `index`.

        The long break only precedes the final exercise.
        """
        if index == exercise_count - 2:
            return self.long_break
        return self.short_break

    def break_ticks(self, index: int, exercise_count: int) -> int:
        return to_ticks(self.break_duration(index, exercise_count), self.time_scale)


def validate_level(level: int) -> Level:
    if not 0 <= level < len(LEVEL_LABELS):
        raise InvalidLevelError(level)
    return level


def validate_time_scale(time_scale: float, exercise_duration: int = min(EXERCISE_BY_LEVEL)) -> float:
    """Check that an exercise keeps enough ticks at this scale to switch sides.

    Defaults to the shortest exercise of any level.

    Raises:
        InvalidTimeScaleError: If the scale is not positive or too small
    """
    if time_scale <= 0 or to_ticks(exercise_duration, time_scale) < MIN_EXERCISE_TICKS:
        raise InvalidTimeScaleError(time_scale, MIN_EXERCISE_TICKS)
    return time_scale


def level_label(level: Level) -> str:
    return LEVEL_LABELS[validate_level(level)]


def config_from_level(
    level: Level,
    time_scale: float = 1.0,
    countdown: int = COUNTDOWN_SECONDS,
) -> WorkoutConfig:
    """Build the workout timings for a difficulty level.

    Args:
        level: Difficulty level (0-4)
        time_scale: Duration multiplier (1.0 for real time)
        countdown: Countdown seconds before the first exercise

    Returns:
        WorkoutConfig for the level

    Raises:
        InvalidLevelError: If level is outside 0-4
        ValidationError: If the scaled exercise is shorter than MIN_EXERCISE_TICKS
    """
    validate_level(level)
    return WorkoutConfig(
        exercise_duration=EXERCISE_BY_LEVEL[level],
        short_break=SHORT_BREAK_BY_LEVEL[level],
        long_break=LONG_BREAK_BY_LEVEL[level],
        time_scale=time_scale,
        countdown=countdown,
    )
