"""Audio/vibration feedback.

Feedback is fire-and-forget: sink failures are logged and swallowed, and the
user's sound/vibration toggles decide which half of a cue is delivered.
"""

from typing import Protocol

from loguru import logger
from rich.console import Console

from plankflow.preferences.models import Preferences
from plankflow.workouts.state_machine import Feedback, VibrationPattern


class FeedbackSink(Protocol):
    def play(self, cue: str) -> None: ...

    def vibrate(self, pattern: VibrationPattern) -> None: ...


class NullFeedbackSink:
    """Discards every cue."""

    def play(self, cue: str) -> None:
        pass

    def vibrate(self, pattern: VibrationPattern) -> None:
        pass


class TerminalFeedbackSink:
    """Rings the terminal bell for sounds and prints vibration patterns dimmed."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def play(self, cue: str) -> None:
        self._console.bell()
        self._console.print(f"[dim]♪ {cue}[/dim]")

    def vibrate(self, pattern: VibrationPattern) -> None:
        self._console.print(f"[dim]~ vibrate {pattern}[/dim]")


def emit_feedback(sink: FeedbackSink, feedback: Feedback, preferences: Preferences) -> None:
    """Deliver a cue through the sink, honoring the sound/vibration toggles.

    Args:
        sink: Feedback sink
        feedback: Cue to deliver
        preferences: User preferences
    """
    if feedback.cue is not None and preferences.sound_enabled:
        try:
            sink.play(feedback.cue)
        except Exception as e:
            logger.warning(f"Failed to play cue '{feedback.cue}': {e}")
            # Don't raise - feedback is optional

    if feedback.vibration is not None and preferences.vibration_enabled:
        try:
            sink.vibrate(feedback.vibration)
        except Exception as e:
            logger.warning(f"Failed to vibrate {feedback.vibration}: {e}")
            # Don't raise - feedback is optional
