"""Fake Dispatcher that runs work synchronously on the calling thread."""

from collections.abc import Callable
from concurrent.futures import Future

from branch_titlebar.gateway.dispatch.abc import Dispatcher


class InlineDispatcher(Dispatcher):
    """Runs submitted work immediately and returns an already-completed future."""

    def __init__(self) -> None:
        self._submitted_count = 0
        self._is_shut_down = False

    @property
    def submitted_count(self) -> int:
        """Number of callables submitted. For test assertions only."""
        return self._submitted_count

    @property
    def is_shut_down(self) -> bool:
        """Whether shutdown() was called. For test assertions only."""
        return self._is_shut_down

    def submit(self, fn: Callable[[], None]) -> Future[None]:
        self._submitted_count += 1
        future: Future[None] = Future()
        try:
            fn()
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(None)
        return future

    def shutdown(self) -> None:
        self._is_shut_down = True
