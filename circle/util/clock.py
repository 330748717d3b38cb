"""Server-side clock for ordering keys."""

import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional


class MonotonicClock:
    """UTC clock that never returns the same or an earlier instant twice.

    ``created_at`` is the only ordering key of the feed, so two comments
    stamped by this process must never tie or go backwards, even when the
    wall clock is adjusted.
    """

    _TICK = timedelta(microseconds=1)

    def __init__(self, source: Optional[Callable[[], datetime]] = None) -> None:
        self._source = source or (lambda: datetime.now(timezone.utc))
        self._last: Optional[datetime] = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._source()
            if self._last is not None and current <= self._last:
                current = self._last + self._TICK
            self._last = current
            return current
