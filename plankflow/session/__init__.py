"""Session recording and summary.

Segments are recorded against a monotonic clock while a workout runs, and the
sealed session is reduced into total hold time, longest hold and calories.
"""

from plankflow.session.models import Segment, Session, SessionSummary
from plankflow.session.recorder import SessionRecorder
from plankflow.session.summary import compute_session_summary

__all__ = [
    "Segment",
    "Session",
    "SessionRecorder",
    "SessionSummary",
    "compute_session_summary",
]
