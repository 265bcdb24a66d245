"""Tests for PollingDriver."""

import threading
from collections.abc import Callable
from concurrent.futures import Future

import pytest

from branch_titlebar.core.polling import PollingDriver
from branch_titlebar.gateway.dispatch.abc import Dispatcher
from branch_titlebar.gateway.dispatch.fake import InlineDispatcher
from branch_titlebar.gateway.dispatch.real import ThreadDispatcher


class DeferredDispatcher(Dispatcher):
    """Holds submitted work until the test runs it."""

    def __init__(self) -> None:
        self.pending: list[Callable[[], None]] = []
        self.shut_down = False

    def submit(self, fn: Callable[[], None]) -> Future[None]:
        self.pending.append(fn)
        return Future()

    def shutdown(self) -> None:
        self.shut_down = True

    def run_pending(self) -> None:
        pending, self.pending = self.pending, []
        for fn in pending:
            fn()


def test_fire_runs_tick_on_dispatcher() -> None:
    ticks: list[int] = []
    dispatcher = InlineDispatcher()
    driver = PollingDriver(tick=lambda: ticks.append(1), dispatcher=dispatcher, interval_seconds=5)

    future = driver.fire()

    assert future is not None
    assert ticks == [1]
    assert dispatcher.submitted_count == 1
    assert driver.in_flight is False


def test_overlapping_fire_is_skipped_not_queued() -> None:
    ticks: list[int] = []
    dispatcher = DeferredDispatcher()
    driver = PollingDriver(tick=lambda: ticks.append(1), dispatcher=dispatcher, interval_seconds=5)

    assert driver.fire() is not None
    assert driver.in_flight is True
    assert driver.fire() is None
    assert driver.fire() is None

    dispatcher.run_pending()

    assert ticks == [1]
    assert driver.in_flight is False
    assert driver.fire() is not None
    assert len(dispatcher.pending) == 1


def test_failing_tick_is_logged_and_clears_in_flight(caplog: pytest.LogCaptureFixture) -> None:
    def tick() -> None:
        raise ValueError("tick exploded")

    driver = PollingDriver(tick=tick, dispatcher=InlineDispatcher(), interval_seconds=5)

    future = driver.fire()

    assert future is not None
    assert future.exception() is None
    assert driver.in_flight is False
    assert "Synchronization tick failed" in caplog.text


def test_stop_prevents_further_fires() -> None:
    ticks: list[int] = []
    dispatcher = InlineDispatcher()
    driver = PollingDriver(tick=lambda: ticks.append(1), dispatcher=dispatcher, interval_seconds=5)

    driver.stop()

    assert driver.fire() is None
    assert ticks == []
    assert dispatcher.is_shut_down is True


def test_start_fires_immediately_and_stops_cleanly() -> None:
    ticked = threading.Event()
    tick_threads: list[str] = []

    def tick() -> None:
        tick_threads.append(threading.current_thread().name)
        ticked.set()

    driver = PollingDriver(tick=tick, dispatcher=ThreadDispatcher(), interval_seconds=60)

    with driver:
        assert ticked.wait(timeout=5)

    assert driver.wait(timeout=0) is True
    assert tick_threads[0].startswith("titlebar-ui")


def test_repeated_firings_at_interval() -> None:
    count = 0
    enough = threading.Event()

    def tick() -> None:
        nonlocal count
        count += 1
        if count >= 3:
            enough.set()

    with PollingDriver(tick=tick, dispatcher=ThreadDispatcher(), interval_seconds=0.01):
        assert enough.wait(timeout=5)


def test_start_twice_raises() -> None:
    driver = PollingDriver(tick=lambda: None, dispatcher=InlineDispatcher(), interval_seconds=60)
    driver.start()
    try:
        with pytest.raises(RuntimeError, match="already started"):
            driver.start()
    finally:
        driver.stop()
