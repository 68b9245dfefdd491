"""Session recorder.

Accumulates a workout session as an ordered list of timed segments. Segment
durations come from an injectable monotonic millisecond clock, so they are
independent of the state machine's whole-second countdown. Paused time is
excluded as long as the recorder is told about pause boundaries.

Misuse (closing when nothing is open, opening twice) never raises: the call is
a no-op that returns False/None and logs a warning.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from plankflow.session.models import Segment, Session, Side

MillisecondClock = Callable[[], int]


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


@dataclass
class _OpenSegment:
    side: Side
    accrued_ms: int = 0
    running_since_ms: int | None = None

    def elapsed_ms(self, now_ms: int) -> int:
        if self.running_since_ms is None:
            return self.accrued_ms
        return self.accrued_ms + max(now_ms - self.running_since_ms, 0)


class SessionRecorder:
    """Records one session at a time.

    Args:
        clock: Monotonic millisecond clock (defaults to time.monotonic_ns based)
    """

    def __init__(self, clock: MillisecondClock | None = None) -> None:
        self._clock = clock or monotonic_ms
        self._segments: list[Segment] | None = None
        self._open: _OpenSegment | None = None
        self._paused = False

    @property
    def is_recording(self) -> bool:
        return self._segments is not None

    @property
    def has_open_segment(self) -> bool:
        return self._open is not None

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Closed segments of the in-progress session."""
        return tuple(self._segments or ())

    def start_session(self) -> bool:
        if self._segments is not None:
            logger.warning("start_session ignored: a session is already being recorded")
            return False
        self._segments = []
        self._open = None
        self._paused = False
        logger.debug("Session recording started")
        return True

    def start_segment(self, side: Side) -> bool:
        if self._segments is None:
            logger.warning(f"start_segment({side}) ignored: no session is being recorded")
            return False
        if self._open is not None:
            logger.warning(f"start_segment({side}) ignored: segment '{self._open.side}' is still open")
            return False

        running_since = None if self._paused else self._clock()
        self._open = _OpenSegment(side=side, running_since_ms=running_since)
        logger.debug(f"Segment '{side}' opened")
        return True

    def end_segment(self) -> Segment | None:
        """Close the open segment.

        Returns:
            The closed Segment, or None if no segment was open
        """
        if self._open is None or self._segments is None:
            return None

        segment = Segment(side=self._open.side, duration_ms=self._open.elapsed_ms(self._clock()))
        self._segments.append(segment)
        self._open = None
        logger.debug(f"Segment '{segment.side}' closed after {segment.duration_ms}ms")
        return segment

    def pause(self) -> None:
        """Freeze accrual of the open segment (and of any segment opened while paused)."""
        if self._paused:
            return
        self._paused = True
        if self._open is not None and self._open.running_since_ms is not None:
            self._open.accrued_ms = self._open.elapsed_ms(self._clock())
            self._open.running_since_ms = None

    def resume(self) -> None:
        if not self._paused:
            return
        self._paused = False
        if self._open is not None:
            self._open.running_since_ms = self._clock()

    def end_session(self) -> Session | None:
        """Close any open segment and seal the session.

        Returns:
            The sealed Session, or None if no session was being recorded
        """
        if self._segments is None:
            logger.info("end_session: nothing to summarize, no session was being recorded")
            return None

        self.end_segment()
        session = Session(segments=tuple(self._segments))
        self._reset()
        logger.debug(f"Session sealed with {len(session.segments)} segments, {session.total_ms}ms total")
        return session

    def discard_session(self) -> None:
        if self._segments is not None:
            logger.info(f"Discarding in-progress session ({len(self._segments)} closed segments)")
        self._reset()

    def _reset(self) -> None:
        self._segments = None
        self._open = None
        self._paused = False
