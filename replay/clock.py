# replay/clock.py
from typing import Optional, Sequence


class PlaybackClock:
    """
    Maps wall-clock time to a sample index for one delay sequence.

    ``now`` is always passed in (seconds, e.g. ``time.monotonic()``), so the
    clock itself never reads the system time. Delays are milliseconds.

    The index moves at most one step per tick. When several delays have
    elapsed between two ticks the clock does not catch up; the next due
    time is measured from the tick that advanced, not from the previous
    due time.
    """

    def __init__(self, delays_ms: Sequence[int]):
        self._delays = tuple(int(d) for d in delays_ms)
        self.index = 0
        self.running = False
        self.started_at: Optional[float] = None
        self.next_due: Optional[float] = None

    def __len__(self) -> int:
        return len(self._delays)

    @property
    def finished(self) -> bool:
        """Cursor has run past the last sample."""
        return self.index >= len(self._delays)

    def start(self, now: float) -> None:
        self.running = True
        self.index = 0
        self.started_at = now
        self.next_due = None
        self._schedule(now)

    def stop(self) -> None:
        self.running = False
        self.index = 0
        self.started_at = None
        self.next_due = None

    def tick(self, now: float) -> bool:
        """Advance by one sample if due. Returns True when the index moved."""
        if not self.running or self.finished:
            return False
        if self.next_due is None or now < self.next_due:
            return False

        self.index += 1
        self._schedule(now)
        return True

    def elapsed(self, now: float) -> float:
        if not self.running or self.started_at is None:
            return 0.0
        return max(0.0, now - self.started_at)

    def _schedule(self, now: float) -> None:
        # past the end the previous due time is left as is
        if self.index < len(self._delays):
            self.next_due = now + self._delays[self.index] / 1000.0
