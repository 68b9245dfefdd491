"""Workout runner.

Imperative shell around the pure state machine. It owns the current state,
the session recorder and the feedback sink, feeds events through
`transition`, and executes the returned effects in order. When the workout
reaches `finished` the sealed session is reduced into a SessionSummary.
"""

import asyncio
from collections.abc import Callable, Sequence

from loguru import logger

from plankflow.config.settings import Settings
from plankflow.feedback.sink import FeedbackSink, NullFeedbackSink, emit_feedback
from plankflow.preferences.store import InMemoryPreferencesStore, PreferencesStore
from plankflow.session.models import SessionSummary
from plankflow.session.recorder import SessionRecorder
from plankflow.session.summary import compute_session_summary
from plankflow.workouts.catalog import WORKOUT, Exercise, ensure_catalog
from plankflow.workouts.clock import ClockDriver
from plankflow.workouts.levels import Level
from plankflow.workouts.state_machine import (
    Abort,
    Back,
    BackToIdle,
    Begin,
    CancelAbort,
    DiscardSession,
    Effect,
    EndSegment,
    EndSession,
    Event,
    Feedback,
    OpenConfig,
    PauseRecording,
    ResumeRecording,
    SelectLevel,
    Skip,
    StartSegment,
    StartSession,
    Tick,
    TogglePause,
    WorkoutState,
    initial_state,
    transition,
)

SummaryHandler = Callable[[SessionSummary], None]
StateListener = Callable[[WorkoutState, WorkoutState], None]


class WorkoutRunner:
    """Drives one workout at a time.

    Args:
        catalog: Ordered exercises (defaults to the built-in plank workout)
        state: Starting state (defaults to idle at the default level)
        preferences: Preferences store, read on every summary and cue
        recorder: Session recorder
        feedback: Feedback sink
        on_finished: Called with the summary once the workout finishes
        on_state_change: Called with (previous, current) after every state change
    """

    def __init__(
        self,
        catalog: Sequence[Exercise] = WORKOUT,
        state: WorkoutState | None = None,
        preferences: PreferencesStore | None = None,
        recorder: SessionRecorder | None = None,
        feedback: FeedbackSink | None = None,
        on_finished: SummaryHandler | None = None,
        on_state_change: StateListener | None = None,
    ) -> None:
        self.catalog = ensure_catalog(catalog)
        self._state = state or WorkoutState()
        self.preferences = preferences or InMemoryPreferencesStore()
        self.recorder = recorder or SessionRecorder()
        self.feedback = feedback or NullFeedbackSink()
        self.on_finished = on_finished
        self.on_state_change = on_state_change
        self._summary: SessionSummary | None = None
        self._done: asyncio.Event | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: object) -> "WorkoutRunner":
        """Build a runner preconfigured with the level, scale and countdown from settings."""
        state = initial_state(
            level=settings.default_level,
            time_scale=settings.time_scale,
            countdown=settings.countdown_seconds,
        )
        return cls(state=state, **kwargs)

    @property
    def state(self) -> WorkoutState:
        return self._state

    @property
    def summary(self) -> SessionSummary | None:
        """Summary of the last finished workout, None until one finishes."""
        return self._summary

    @property
    def current_exercise(self) -> Exercise:
        return self.catalog[self._state.current_index]

    def dispatch(self, event: Event) -> WorkoutState:
        """Apply an event and execute its effects."""
        previous = self._state
        new_state, effects = transition(previous, event, self.catalog)
        self._state = new_state

        if new_state.phase != previous.phase:
            logger.info(
                f"Phase {previous.phase} -> {new_state.phase} "
                f"(exercise {new_state.current_index + 1}/{len(self.catalog)}, time_left={new_state.time_left})"
            )

        try:
            for effect in effects:
                self._execute(effect)

            if new_state is not previous and self.on_state_change is not None:
                self._notify(self.on_state_change, previous, new_state)
        finally:
            if self._done is not None and previous.is_active and not new_state.is_active:
                self._done.set()
        return new_state

    def tick(self) -> WorkoutState:
        return self.dispatch(Tick())

    def open_config(self) -> WorkoutState:
        return self.dispatch(OpenConfig())

    def back_to_idle(self) -> WorkoutState:
        return self.dispatch(BackToIdle())

    def select_level(self, level: Level) -> WorkoutState:
        return self.dispatch(SelectLevel(level=level))

    def begin(self) -> WorkoutState:
        return self.dispatch(Begin())

    def toggle_pause(self) -> WorkoutState:
        return self.dispatch(TogglePause())

    def skip(self) -> WorkoutState:
        return self.dispatch(Skip())

    def back(self) -> WorkoutState:
        return self.dispatch(Back())

    def abort(self) -> WorkoutState:
        return self.dispatch(Abort())

    def cancel_abort(self) -> WorkoutState:
        return self.dispatch(CancelAbort())

    async def run(self, interval_seconds: float = 1.0) -> SessionSummary | None:
        """Begin the workout and tick it on the event loop until it finishes or is aborted.

        Returns:
            The summary, or None if the workout was aborted
        """
        if self._state.phase in ("idle", "finished"):
            self.open_config()
        self._done = asyncio.Event()
        clock = ClockDriver(self.tick, interval_seconds)
        self.begin()
        clock.start()
        try:
            await self._done.wait()
        finally:
            await clock.stop()
            self._done = None
        return self._summary if self._state.phase == "finished" else None

    def _execute(self, effect: Effect) -> None:
        if isinstance(effect, StartSession):
            self._summary = None
            self.recorder.start_session()
        elif isinstance(effect, StartSegment):
            self.recorder.start_segment(effect.side)
        elif isinstance(effect, EndSegment):
            self.recorder.end_segment()
        elif isinstance(effect, EndSession):
            self._finish()
        elif isinstance(effect, DiscardSession):
            self.recorder.discard_session()
            logger.info("Workout aborted")
        elif isinstance(effect, PauseRecording):
            self.recorder.pause()
        elif isinstance(effect, ResumeRecording):
            self.recorder.resume()
        elif isinstance(effect, Feedback):
            emit_feedback(self.feedback, effect, self.preferences.load())
        else:
            logger.warning(f"Unhandled effect {effect!r}")

    def _finish(self) -> None:
        session = self.recorder.end_session()
        if session is None:
            logger.warning("Workout finished without a recorded session, nothing to summarize")
            return

        preferences = self.preferences.load()
        if preferences.weight_kg is None:
            logger.info("Body weight not set, calories omitted from summary")
        self._summary = compute_session_summary(session, preferences, self._state.level)
        logger.info(
            f"Workout finished: total={self._summary.total_plank_ms}ms "
            f"longest={self._summary.longest_hold_ms}ms calories={self._summary.calories}"
        )
        if self.on_finished is not None:
            self._notify(self.on_finished, self._summary)

    @staticmethod
    def _notify(callback: Callable[..., None], *args: object) -> None:
        try:
            callback(*args)
        except Exception:
            # Listener failures are logged, the workout keeps its state
            logger.exception(f"Workout listener {callback!r} failed")
