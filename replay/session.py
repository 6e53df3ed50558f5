"""
Race session: the loaded data plus the playback cursor(s).

The session is owned by the render loop and mutated only from there, so
it holds no locks. Every frame the loop calls ``tick(now)`` and then
``frame(width, height)``.
"""
from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence

from replay.clock import PlaybackClock
from replay.engine import Frame, MatchPolicy, render_frame
from replay.model import Track

logger = logging.getLogger(__name__)

READOUT_PLACEHOLDER = "--:--:--.---"


class PlaybackMode(Enum):
    LOCKSTEP = "lockstep"          # one cursor, timed by the reference track
    INDEPENDENT = "independent"    # one cursor per track, own delays


def format_clock(ts: datetime) -> str:
    """HH:MM:SS.mmm"""
    return ts.strftime("%H:%M:%S.") + f"{ts.microsecond // 1000:03d}"


class RaceSession:
    """
    Aggregate of the coordinate store, the tracks, their colors and the
    playback clock(s).

    In LOCKSTEP mode every track shares the reference track's cursor (the
    first track). In INDEPENDENT mode each track has its own clock.
    """

    def __init__(
        self,
        store,
        tracks: Sequence[Track],
        colors: Sequence,
        mode: PlaybackMode = PlaybackMode.LOCKSTEP,
        match_policy: MatchPolicy = MatchPolicy.TRAIL,
        tolerance: float = 0.0,
    ):
        if len(colors) < len(tracks):
            raise ValueError(f"{len(tracks)} tracks but only {len(colors)} colors")

        self.store = store
        self.tracks: List[Track] = list(tracks)
        self.colors = list(colors)
        self.mode = mode
        self.match_policy = match_policy
        self.tolerance = tolerance

        if mode is PlaybackMode.INDEPENDENT:
            self._clocks = [PlaybackClock(t.delays) for t in self.tracks]
        else:
            reference = self.tracks[0].delays if self.tracks else ()
            self._clocks = [PlaybackClock(reference)]

        self._started = False
        # guards the one-shot "end of data" log line
        self._end_logged = False

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #

    @property
    def reference(self) -> Optional[Track]:
        return self.tracks[0] if self.tracks else None

    @property
    def started(self) -> bool:
        return self._started

    @property
    def current_index(self) -> int:
        """Cursor of the reference track."""
        return self._clocks[0].index if self._clocks else 0

    def cursors(self) -> List[int]:
        """Cursor applied to each track, index-aligned with ``tracks``."""
        if self.mode is PlaybackMode.INDEPENDENT:
            return [c.index for c in self._clocks]
        return [self.current_index] * len(self.tracks)

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def start(self, now: float) -> None:
        for clock in self._clocks:
            clock.start(now)
        self._started = True
        self._end_logged = False
        logger.info("START: %d tracks, mode=%s", len(self.tracks), self.mode.value)

    def stop(self) -> None:
        for clock in self._clocks:
            clock.stop()
        self._started = False
        self._end_logged = False
        logger.info("STOP")

    def tick(self, now: float) -> bool:
        """One render-loop step. Returns True if any cursor moved."""
        advanced = False
        for clock in self._clocks:
            if clock.tick(now):
                advanced = True

        if advanced and not self._end_logged and all(c.finished for c in self._clocks):
            self._end_logged = True
            logger.info("End of recorded data reached at index %d", self.current_index)
        return advanced

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #

    def readout(self) -> Optional[str]:
        """Reference track timestamp at the cursor, or None past the end."""
        ref = self.reference
        if ref is None:
            return None
        sample = ref.get(self.current_index)
        if sample is None:
            return None
        return format_clock(sample.timestamp)

    def elapsed(self, now: float) -> float:
        return self._clocks[0].elapsed(now) if self._clocks else 0.0

    def frame(self, viewport_width: float, viewport_height: float) -> Frame:
        return render_frame(
            self.store,
            self.tracks,
            self.cursors(),
            viewport_width,
            viewport_height,
            policy=self.match_policy,
            tolerance=self.tolerance,
        )
