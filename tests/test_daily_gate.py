"""Tests for the daily display gate."""

import threading
from datetime import date, timedelta

from word_of_the_day.core import DailyGate


class FakeClock:
    """Controllable replacement for date.today."""

    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1) -> None:
        self.today += timedelta(days=days)


def test_daily_gate_basic() -> None:
    """A feed is shown once per day."""
    clock = FakeClock(date(2026, 10, 18))
    gate = DailyGate(today=clock)

    # Initially shown
    assert gate.should_show("primary")

    gate.mark_shown("primary")
    assert not gate.should_show("primary")

    # Other feeds are independent
    assert gate.should_show("medieval")


def test_daily_gate_rollover_resets_all_feeds() -> None:
    """A new day re-arms every feed, not just the one being checked."""
    clock = FakeClock(date(2026, 10, 18))
    gate = DailyGate(today=clock)

    gate.mark_shown("primary")
    gate.mark_shown("medieval")
    assert gate.shown_feeds() == {"primary", "medieval"}

    clock.advance()

    assert gate.should_show("primary")
    assert gate.should_show("medieval")
    assert gate.shown_feeds() == set()


def test_daily_gate_same_day_keeps_state() -> None:
    """Repeated checks on the same date do not reset."""
    clock = FakeClock(date(2026, 10, 18))
    gate = DailyGate(today=clock)

    gate.mark_shown("custom")
    for _ in range(3):
        assert not gate.should_show("custom")


def test_daily_gate_reset() -> None:
    """Reset re-arms everything, as on shutdown or restart."""
    gate = DailyGate(today=lambda: date(2026, 10, 18))

    gate.mark_shown("primary")
    gate.reset()

    assert gate.should_show("primary")


def test_daily_gate_concurrent_marks() -> None:
    """Marks from several threads are all kept."""
    gate = DailyGate(today=lambda: date(2026, 10, 18))
    feeds = [f"feed{i}" for i in range(20)]

    threads = [threading.Thread(target=gate.mark_shown, args=(feed,)) for feed in feeds]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert gate.shown_feeds() == set(feeds)


def test_daily_gate_try_claim() -> None:
    """Only the first claim of the day succeeds; release hands it back."""
    clock = FakeClock(date(2026, 10, 18))
    gate = DailyGate(today=clock)

    assert gate.try_claim("primary")
    assert not gate.try_claim("primary")
    assert not gate.should_show("primary")

    gate.release("primary")
    assert gate.should_show("primary")
    assert gate.try_claim("primary")

    clock.advance()
    assert gate.try_claim("primary")


def test_daily_gate_concurrent_claims() -> None:
    """Exactly one of many threads claims a feed."""
    gate = DailyGate(today=lambda: date(2026, 10, 18))
    wins = []
    barrier = threading.Barrier(20)

    def claim() -> None:
        barrier.wait()
        if gate.try_claim("primary"):
            wins.append(True)

    threads = [threading.Thread(target=claim) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(wins) == 1
