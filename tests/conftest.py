"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import pytest

from plankflow.preferences.models import Preferences
from plankflow.preferences.store import InMemoryPreferencesStore
from plankflow.session.recorder import SessionRecorder
from plankflow.workouts.catalog import Exercise
from plankflow.workouts.runner import WorkoutRunner
from plankflow.workouts.state_machine import initial_state


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start_ms: int = 1_000_000) -> None:
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


class RecordingFeedbackSink:
    """Feedback sink that remembers every call."""

    def __init__(self) -> None:
        self.sounds: list[str] = []
        self.vibrations: list[int | tuple[int, ...]] = []

    def play(self, cue: str) -> None:
        self.sounds.append(cue)

    def vibrate(self, pattern: int | tuple[int, ...]) -> None:
        self.vibrations.append(pattern)


def make_catalog(*mirror_flags: bool) -> tuple[Exercise, ...]:
    """Build a catalog with one exercise per flag (True = mirrorable)."""
    return tuple(
        Exercise(id=i + 1, name=f"Exercise {i + 1}", can_mirror=flag)
        for i, flag in enumerate(mirror_flags)
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recorder(fake_clock: FakeClock) -> SessionRecorder:
    return SessionRecorder(clock=fake_clock)


@pytest.fixture
def feedback_sink() -> RecordingFeedbackSink:
    return RecordingFeedbackSink()


@pytest.fixture
def preferences_store() -> InMemoryPreferencesStore:
    return InMemoryPreferencesStore(Preferences(weight_kg=70))


@pytest.fixture
def make_runner(fake_clock, recorder, feedback_sink, preferences_store):
    """Factory for runners whose clock advances one second per tick."""

    def _make(catalog, level: int = 2, time_scale: float = 1.0) -> WorkoutRunner:
        runner = WorkoutRunner(
            catalog=catalog,
            state=initial_state(level=level, time_scale=time_scale),
            preferences=preferences_store,
            recorder=recorder,
            feedback=feedback_sink,
        )
        original_tick = runner.tick

        def tick():
            fake_clock.advance(1000)
            return original_tick()

        runner.tick = tick
        return runner

    return _make


@pytest.fixture
def catalog_factory():
    return make_catalog
