"""Production Dispatcher running work on a single dedicated thread."""

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from branch_titlebar.gateway.dispatch.abc import Dispatcher


class ThreadDispatcher(Dispatcher):
    """Serializes work on one worker thread, standing in for a UI thread."""

    def __init__(self, *, thread_name_prefix: str = "titlebar-ui") -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=thread_name_prefix)

    def submit(self, fn: Callable[[], None]) -> Future[None]:
        return self._executor.submit(fn)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)
