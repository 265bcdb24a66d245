"""Abstract interface for the UI-affine execution context.

Reading the host project model and touching the window title must happen on
one serialized context. A Dispatcher accepts work from any thread and runs it
there.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import Future


class Dispatcher(ABC):
    """Abstract interface for submitting work to the UI-affine context."""

    @abstractmethod
    def submit(self, fn: Callable[[], None]) -> Future[None]:
        """Schedule `fn` and return a future for its completion.

        Exceptions raised by `fn` are captured in the returned future.
        """
        ...

    @abstractmethod
    def shutdown(self) -> None:
        """Stop accepting work and wait for submitted work to finish."""
        ...
