"""Session summary computation.

Pure reducer from a sealed session to reportable metrics. Calorie estimate
uses a MET-based formula:

    calories = MET * difficulty multiplier * weight (kg) * hours held
"""

from plankflow.core.rounding import round_half_up
from plankflow.preferences.models import Preferences
from plankflow.session.models import Session, SessionSummary

BASE_MET = 3.3

MS_PER_HOUR = 3_600_000

# Keyed by level; levels missing from the table use DEFAULT_MULTIPLIER
DIFFICULTY_MULTIPLIER: dict[int, float] = {
    1: 0.8,
    2: 0.9,
    3: 1.0,
    4: 1.15,
    5: 1.3,
}

DEFAULT_MULTIPLIER = 1.0


def difficulty_multiplier(level: int) -> float:
    return DIFFICULTY_MULTIPLIER.get(level, DEFAULT_MULTIPLIER)


def estimate_calories(total_ms: int, weight_kg: float, level: int) -> int:
    hours = total_ms / MS_PER_HOUR
    return round_half_up(BASE_MET * difficulty_multiplier(level) * weight_kg * hours)


def compute_session_summary(session: Session, preferences: Preferences, level: int) -> SessionSummary:
    """Reduce a sealed session into total hold, longest hold and calories.

    Args:
        session: Sealed session
        preferences: User preferences (only weight_kg is read)
        level: Difficulty level the session was performed at

    Returns:
        SessionSummary. `calories` is None when the body weight is unknown.
    """
    durations = [segment.duration_ms for segment in session.segments]
    total_ms = sum(durations)
    longest_ms = max(durations, default=0)

    calories = None
    if preferences.weight_kg is not None:
        calories = estimate_calories(total_ms, preferences.weight_kg, level)

    return SessionSummary(
        total_plank_ms=total_ms,
        longest_hold_ms=longest_ms,
        calories=calories,
    )


def format_duration_ms(duration_ms: int) -> str:
    """Format milliseconds as m:ss (rounded down to whole seconds)."""
    total_seconds = max(duration_ms, 0) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"
