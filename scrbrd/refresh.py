"""Auto-refresh timer."""

import time
from contextlib import contextmanager

REFRESH_PERIOD_SECONDS = 30


def now_ts() -> float:
    return time.monotonic()


class RefreshClock:
    """
    Tracks when the scoreboard was last fetched and whether a fetch is
    running. The timestamp moves on failed attempts too, so a broken endpoint
    is retried on the normal cadence rather than on every poll.
    """

    def __init__(self, period: int = REFRESH_PERIOD_SECONDS):
        self.period = period
        self.last_refresh = now_ts()
        self.in_flight = False

    def elapsed(self) -> float:
        return max(0.0, now_ts() - self.last_refresh)

    def should_refresh(self) -> bool:
        return not self.in_flight and self.elapsed() >= self.period

    def seconds_remaining(self) -> int:
        """Whole seconds until the next automatic refresh (display only)."""
        return int(max(0.0, self.period - self.elapsed()))

    def begin(self) -> None:
        self.in_flight = True

    def finish(self) -> None:
        self.last_refresh = now_ts()
        self.in_flight = False

    @contextmanager
    def fetching(self):
        """Mark a fetch in flight; always stamp and clear on the way out."""
        self.begin()
        try:
            yield self
        finally:
            self.finish()
