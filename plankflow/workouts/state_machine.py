"""Workout phase state machine.

Pure transition function over an immutable state:

    transition(state, event, catalog) -> (new_state, effects)

Nothing here touches the clock, the recorder or the feedback sink. Side
effects are returned as an ordered list of effect values and executed by the
runner (see plankflow.workouts.runner). Commands that are not valid in the current
phase return the state unchanged with no effects.

Phases:
    idle -> config -> countdown -> exercise -> (break -> exercise)* -> finished

Time-driven transitions fire only on the tick that brings `time_left` to
exactly 0 while not paused.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Literal, Union

from loguru import logger

from plankflow.session.models import Side
from plankflow.workouts.catalog import Catalog, Exercise
from plankflow.workouts.levels import DEFAULT_LEVEL, Level, WorkoutConfig, config_from_level

Phase = Literal["idle", "config", "countdown", "exercise", "break", "finished"]

ACTIVE_PHASES: frozenset[str] = frozenset({"countdown", "exercise", "break"})

IDLE_TIME_LEFT = 5
ENDING_CUE_SECONDS = 5

VibrationPattern = int | tuple[int, ...]


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WorkoutState:
    """Immutable workout state.

    Attributes:
        level: Selected difficulty level
        config: Timings derived from the level
        phase: Current phase
        current_index: Index of the current exercise in the catalog
        time_left: Ticks left in the current phase
        is_paused: Ticks are ignored while paused
        confirm_abort: First abort request received, waiting for confirmation
        last_switched_index: Exercise index for which the side switch already fired
    """

    level: Level = DEFAULT_LEVEL
    config: WorkoutConfig = field(default_factory=lambda: config_from_level(DEFAULT_LEVEL))
    phase: Phase = "idle"
    current_index: int = 0
    time_left: int = IDLE_TIME_LEFT
    is_paused: bool = False
    confirm_abort: bool = False
    last_switched_index: int | None = None

    @property
    def is_active(self) -> bool:
        return self.phase in ACTIVE_PHASES

    def replace(self, **changes: object) -> "WorkoutState":
        """Create a new state instance with updated fields."""
        return replace(self, **changes)


def initial_state(
    level: Level = DEFAULT_LEVEL,
    time_scale: float = 1.0,
    countdown: int | None = None,
) -> WorkoutState:
    """Build an idle state for a level.

    Raises:
        InvalidLevelError: If level is outside 0-4
        ValidationError: If time_scale leaves an exercise fewer than MIN_EXERCISE_TICKS ticks
    """
    if countdown is None:
        config = config_from_level(level, time_scale)
    else:
        config = config_from_level(level, time_scale, countdown)
    return WorkoutState(level=level, config=config)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Tick:
    """One clock interval elapsed."""


@dataclass(frozen=True)
class OpenConfig:
    """Open the workout setup (from idle, or restart from finished)."""


@dataclass(frozen=True)
class BackToIdle:
    """Leave the setup without starting."""


@dataclass(frozen=True)
class SelectLevel:
    level: Level


@dataclass(frozen=True)
class Begin:
    """Start the workout countdown."""


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Skip:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Abort:
    """Abort request. Needs to be sent twice in a row to take effect."""


@dataclass(frozen=True)
class CancelAbort:
    pass


Event = Union[Tick, OpenConfig, BackToIdle, SelectLevel, Begin, TogglePause, Skip, Back, Abort, CancelAbort]


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StartSession:
    pass


@dataclass(frozen=True)
class StartSegment:
    side: Side


@dataclass(frozen=True)
class EndSegment:
    pass


@dataclass(frozen=True)
class EndSession:
    """Close the open segment and seal the session."""


@dataclass(frozen=True)
class DiscardSession:
    pass


@dataclass(frozen=True)
class PauseRecording:
    pass


@dataclass(frozen=True)
class ResumeRecording:
    pass


@dataclass(frozen=True)
class Feedback:
    """Fire-and-forget audio/vibration cue.

    Attributes:
        cue: Sound identifier ("play", "pause", "success", "switch"), None for vibration only
        vibration: Pulse length in ms, or alternating on/off durations in ms
    """

    cue: str | None = None
    vibration: VibrationPattern | None = None


Effect = Union[
    StartSession,
    StartSegment,
    EndSegment,
    EndSession,
    DiscardSession,
    PauseRecording,
    ResumeRecording,
    Feedback,
]

Transition = tuple[WorkoutState, list[Effect]]

EXERCISE_START_FEEDBACK = Feedback(cue="play", vibration=100)
FINISHED_FEEDBACK = Feedback(cue="success", vibration=(100, 50, 100))
SIDE_SWITCH_FEEDBACK = Feedback(cue="switch", vibration=(80, 40, 80))
ENDING_FEEDBACK = Feedback(vibration=40)
PAUSE_FEEDBACK = Feedback(cue="pause", vibration=50)
RESUME_FEEDBACK = Feedback(cue="play", vibration=30)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def opening_side(exercise: Exercise) -> Side:
    """Side of the first segment of an exercise."""
    return "left" if exercise.can_mirror else "front"


def is_last_exercise(state: WorkoutState, catalog: Catalog) -> bool:
    return state.current_index == len(catalog) - 1


def _unchanged(state: WorkoutState) -> Transition:
    return state, []


def _enter_exercise(state: WorkoutState, catalog: Catalog, index: int) -> Transition:
    new_state = state.replace(
        phase="exercise",
        current_index=index,
        time_left=state.config.exercise_ticks,
        last_switched_index=None,
    )
    return new_state, [StartSegment(side=opening_side(catalog[index]))]


# ---------------------------------------------------------------------------
# Time-driven transitions
# ---------------------------------------------------------------------------


def _advance(state: WorkoutState, catalog: Catalog) -> Transition:
    """Leave the current phase after its time ran out."""
    if state.phase == "countdown":
        new_state, effects = _enter_exercise(state, catalog, state.current_index)
        return new_state, [*effects, EXERCISE_START_FEEDBACK]

    if state.phase == "exercise":
        if is_last_exercise(state, catalog):
            return state.replace(phase="finished"), [EndSegment(), EndSession(), FINISHED_FEEDBACK]
        rest = state.config.break_ticks(state.current_index, len(catalog))
        return state.replace(phase="break", time_left=rest), [EndSegment()]

    # break
    return _enter_exercise(state, catalog, state.current_index + 1)


def _side_switch(state: WorkoutState, catalog: Catalog) -> Transition:
    """Split a mirrorable exercise once its elapsed time passes the halfway point."""
    if not catalog[state.current_index].can_mirror:
        return _unchanged(state)
    if state.last_switched_index == state.current_index:
        return _unchanged(state)

    total = state.config.exercise_ticks
    elapsed = total - state.time_left
    if 2 * elapsed <= total:
        return _unchanged(state)

    new_state = state.replace(last_switched_index=state.current_index)
    return new_state, [EndSegment(), StartSegment(side="right"), SIDE_SWITCH_FEEDBACK]


def _on_tick(state: WorkoutState, event: Tick, catalog: Catalog) -> Transition:
    if not state.is_active or state.is_paused:
        return _unchanged(state)

    ticked = state.replace(time_left=max(state.time_left - 1, 0))
    if ticked.time_left == 0:
        return _advance(ticked, catalog)

    if ticked.phase != "exercise":
        return _unchanged(ticked)

    new_state, effects = _side_switch(ticked, catalog)
    if new_state.time_left <= ENDING_CUE_SECONDS:
        effects = [*effects, ENDING_FEEDBACK]
    return new_state, effects


# ---------------------------------------------------------------------------
# User commands
# ---------------------------------------------------------------------------


def _on_open_config(state: WorkoutState, event: OpenConfig, catalog: Catalog) -> Transition:
    if state.phase not in ("idle", "finished"):
        return _unchanged(state)
    return state.replace(phase="config", confirm_abort=False), []


def _on_back_to_idle(state: WorkoutState, event: BackToIdle, catalog: Catalog) -> Transition:
    if state.phase != "config":
        return _unchanged(state)
    return state.replace(phase="idle"), []


def _on_select_level(state: WorkoutState, event: SelectLevel, catalog: Catalog) -> Transition:
    if state.phase not in ("idle", "config"):
        return _unchanged(state)
    try:
        config = config_from_level(event.level, state.config.time_scale, state.config.countdown)
    except ValueError as e:
        logger.debug(f"Ignoring level selection: {e}")
        return _unchanged(state)
    return state.replace(level=event.level, config=config), []


def _on_begin(state: WorkoutState, event: Begin, catalog: Catalog) -> Transition:
    if state.phase != "config":
        return _unchanged(state)
    new_state = state.replace(
        phase="countdown",
        current_index=0,
        time_left=state.config.countdown_ticks,
        is_paused=False,
        confirm_abort=False,
        last_switched_index=None,
    )
    return new_state, [StartSession()]


def _on_toggle_pause(state: WorkoutState, event: TogglePause, catalog: Catalog) -> Transition:
    if not state.is_active:
        return _unchanged(state)
    paused = not state.is_paused
    new_state = state.replace(is_paused=paused, confirm_abort=False)
    if paused:
        return new_state, [PauseRecording(), PAUSE_FEEDBACK]
    return new_state, [ResumeRecording(), RESUME_FEEDBACK]


def _jump_to(state: WorkoutState, catalog: Catalog, index: int) -> Transition:
    """Manual skip/back: close whatever is being held and start the target exercise."""
    effects: list[Effect] = [EndSegment()] if state.phase == "exercise" else []
    new_state, enter_effects = _enter_exercise(state.replace(confirm_abort=False), catalog, index)
    return new_state, [*effects, *enter_effects]


def _on_skip(state: WorkoutState, event: Skip, catalog: Catalog) -> Transition:
    if not state.is_active or is_last_exercise(state, catalog):
        return _unchanged(state)
    return _jump_to(state, catalog, state.current_index + 1)


def _on_back(state: WorkoutState, event: Back, catalog: Catalog) -> Transition:
    if not state.is_active or state.current_index == 0:
        return _unchanged(state)
    return _jump_to(state, catalog, state.current_index - 1)


def _on_abort(state: WorkoutState, event: Abort, catalog: Catalog) -> Transition:
    if not state.is_active:
        return _unchanged(state)
    if not state.confirm_abort:
        return state.replace(confirm_abort=True), []
    new_state = state.replace(
        phase="idle",
        current_index=0,
        time_left=IDLE_TIME_LEFT,
        is_paused=False,
        confirm_abort=False,
        last_switched_index=None,
    )
    return new_state, [DiscardSession()]


def _on_cancel_abort(state: WorkoutState, event: CancelAbort, catalog: Catalog) -> Transition:
    if not state.confirm_abort:
        return _unchanged(state)
    return state.replace(confirm_abort=False), []


_HANDLERS: dict[type, Callable[[WorkoutState, Event, Catalog], Transition]] = {
    Tick: _on_tick,
    OpenConfig: _on_open_config,
    BackToIdle: _on_back_to_idle,
    SelectLevel: _on_select_level,
    Begin: _on_begin,
    TogglePause: _on_toggle_pause,
    Skip: _on_skip,
    Back: _on_back,
    Abort: _on_abort,
    CancelAbort: _on_cancel_abort,
}


def transition(state: WorkoutState, event: Event, catalog: Catalog) -> Transition:
    """Apply one event to the workout state.

    Args:
        state: Current state
        event: Tick or user command
        catalog: Ordered exercise sequence (must be non-empty)

    Returns:
        Tuple of (new state, ordered effects to execute)
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        logger.debug(f"Ignoring unknown event {event!r}")
        return _unchanged(state)

    new_state, effects = handler(state, event, catalog)
    if new_state is state and not isinstance(event, Tick):
        logger.debug(f"{type(event).__name__} is a no-op in phase '{state.phase}'")
    return new_state, effects
