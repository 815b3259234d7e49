"""Once-per-day display gate for word feeds."""

import threading
from datetime import date
from typing import Callable, Optional


class DailyGate:
    """Track which feeds have already been shown today.

    All feeds share one clock. When the local date changes, every feed is
    re-armed in the same locked step that noticed the change. State lives in
    memory only, so a restart re-arms everything.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today
        self._lock = threading.Lock()
        self._shown: dict[str, bool] = {}
        self._last_date: Optional[date] = None

    def _roll_over(self) -> None:
        current = self._today()
        if current != self._last_date:
            self._shown.clear()
            self._last_date = current

    def should_show(self, feed: str) -> bool:
        """True if the feed has not been shown since the last rollover."""
        with self._lock:
            self._roll_over()
            return not self._shown.get(feed, False)

    def mark_shown(self, feed: str) -> None:
        with self._lock:
            self._roll_over()
            self._shown[feed] = True

    def try_claim(self, feed: str) -> bool:
        """Check and mark in one step; True means the caller should show the feed.

        A caller that fails to show a claimed feed hands it back with ``release``.
        """
        with self._lock:
            self._roll_over()
            if self._shown.get(feed, False):
                return False
            self._shown[feed] = True
            return True

    def release(self, feed: str) -> None:
        with self._lock:
            self._shown.pop(feed, None)

    def shown_feeds(self) -> set[str]:
        with self._lock:
            self._roll_over()
            return {feed for feed, shown in self._shown.items() if shown}

    def reset(self) -> None:
        """Forget everything, as on host shutdown."""
        with self._lock:
            self._shown.clear()
            self._last_date = None
