"""Workout flow: exercise catalog, difficulty levels and the phase state machine.

The runner and clock driver live in their own modules
(plankflow.workouts.runner, plankflow.workouts.clock) and are not re-exported
here to keep this package importable from the feedback layer.
"""

from plankflow.workouts.catalog import WORKOUT, Exercise
from plankflow.workouts.levels import LEVEL_LABELS, WorkoutConfig, config_from_level
from plankflow.workouts.state_machine import WorkoutState, initial_state, transition

__all__ = [
    "LEVEL_LABELS",
    "WORKOUT",
    "Exercise",
    "WorkoutConfig",
    "WorkoutState",
    "config_from_level",
    "initial_state",
    "transition",
]
