"""Fixed-interval driver that submits synchronization ticks.

A timer thread fires immediately and then every `interval_seconds`. Each
firing hands the tick to the dispatcher (the UI-affine context) without
waiting for it. A firing that arrives while the previous tick is still
running is skipped, not queued.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from types import TracebackType

from branch_titlebar.gateway.dispatch.abc import Dispatcher

logger = logging.getLogger(__name__)

TIMER_THREAD_NAME = "titlebar-timer"


class PollingDriver:
    """Runs `tick` on `dispatcher` at a fixed interval."""

    def __init__(
        self,
        *,
        tick: Callable[[], object],
        dispatcher: Dispatcher,
        interval_seconds: float,
    ) -> None:
        self._tick = tick
        self._dispatcher = dispatcher
        self._interval_seconds = interval_seconds
        self._in_flight = False
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def in_flight(self) -> bool:
        with self._lock:
            return self._in_flight

    def fire(self) -> Future[None] | None:
        """Submit one tick unless one is already in flight or the driver stopped.

        Returns:
            Future for the submitted tick, or None if the firing was skipped
        """
        if self._stopped.is_set():
            return None

        with self._lock:
            if self._in_flight:
                logger.debug("Previous tick still running, skipping")
                return None
            self._in_flight = True

        try:
            return self._dispatcher.submit(self._run_tick)
        except RuntimeError:
            # Dispatcher already shut down
            with self._lock:
                self._in_flight = False
            return None

    def _run_tick(self) -> None:
        try:
            self._tick()
        except Exception:
            logger.exception("Synchronization tick failed")
        finally:
            with self._lock:
                self._in_flight = False

    def _loop(self) -> None:
        while not self._stopped.is_set():
            self.fire()
            if self._stopped.wait(self._interval_seconds):
                break

    def start(self) -> None:
        """Start the timer thread. The first tick fires immediately."""
        if self._thread is not None:
            raise RuntimeError("PollingDriver already started")
        self._thread = threading.Thread(target=self._loop, name=TIMER_THREAD_NAME, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop firing and wait for an in-flight tick to complete."""
        self._stopped.set()
        if self._thread is not None:
            self._thread.join()
        self._dispatcher.shutdown()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the driver is stopped or `timeout` elapses.

        Returns:
            True if the driver was stopped
        """
        return self._stopped.wait(timeout)

    def __enter__(self) -> PollingDriver:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
