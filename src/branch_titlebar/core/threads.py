"""Run work on a dedicated thread and wait for it."""

from collections.abc import Callable
from threading import Thread

RECENT_ITEMS_THREAD_NAME = "titlebar-recent-items"


def run_on_dedicated_thread(
    fn: Callable[[], None], *, name: str = RECENT_ITEMS_THREAD_NAME
) -> None:
    """Run `fn` on a new thread and block until it finishes.

    The recent-items API must be called from its own thread rather than the
    UI-affine one, and the caller must not continue until it is done. An
    exception raised by `fn` is re-raised in the caller.
    """
    errors: list[BaseException] = []

    def target() -> None:
        try:
            fn()
        except BaseException as e:
            errors.append(e)

    thread = Thread(target=target, name=name)
    thread.start()
    thread.join()

    if errors:
        raise errors[0]
