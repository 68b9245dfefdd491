"""Derived values for presenting a workout state.

Nothing here changes state; these are read-only views used by the CLI.
"""

from plankflow.workouts.catalog import Catalog, Exercise
from plankflow.workouts.state_machine import ENDING_CUE_SECONDS, WorkoutState


def display_exercise(state: WorkoutState, catalog: Catalog) -> Exercise | None:
    """Exercise to show: the first one during countdown, the upcoming one during a break."""
    if state.phase == "countdown":
        return catalog[0]
    if state.phase == "break":
        next_index = state.current_index + 1
        return catalog[next_index] if next_index < len(catalog) else None
    return catalog[state.current_index]


def phase_total_ticks(state: WorkoutState, catalog: Catalog) -> int:
    if state.phase == "exercise":
        return state.config.exercise_ticks
    if state.phase == "break":
        return state.config.break_ticks(state.current_index, len(catalog))
    return state.config.countdown_ticks


def phase_progress(state: WorkoutState, catalog: Catalog) -> float:
    """Fraction of the current phase elapsed, in [0, 1]. Inactive phases report 1."""
    if not state.is_active:
        return 1.0
    total = phase_total_ticks(state, catalog)
    if total <= 0:
        return 1.0
    return min(1.0, max(0.0, 1 - state.time_left / total))


def is_past_halfway(state: WorkoutState) -> bool:
    if state.phase != "exercise":
        return False
    total = state.config.exercise_ticks
    return 2 * (total - state.time_left) > total


def is_ending(state: WorkoutState) -> bool:
    return state.phase == "exercise" and 0 < state.time_left <= ENDING_CUE_SECONDS


def format_clock(seconds: int) -> str:
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes:02d}:{secs:02d}"
