"""Error types for the workouts module.

Only raised at input boundaries (settings, CLI, catalog construction).
A running workout never raises: invalid commands are no-ops.
"""


class WorkoutError(Exception):
    """Base exception for workout errors."""

    pass


class InvalidLevelError(WorkoutError, ValueError):
    """Raised when a difficulty level is outside the supported range.

    Attributes:
        level: The rejected level value
    """

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(f"Level must be between 0 and 4, got {level}")


class EmptyCatalogError(WorkoutError, ValueError):
    """Raised when a workout is built from a catalog with no exercises."""

    pass


class InvalidTimeScaleError(WorkoutError, ValueError):
    """Raised when a time scale leaves too few ticks per exercise for a side switch.

    Attributes:
        time_scale: The rejected scale
        minimum_ticks: Ticks an exercise needs at least
    """

    def __init__(self, time_scale: float, minimum_ticks: int) -> None:
        self.time_scale = time_scale
        self.minimum_ticks = minimum_ticks
        super().__init__(f"Time scale {time_scale} leaves fewer than {minimum_ticks} ticks per exercise")
