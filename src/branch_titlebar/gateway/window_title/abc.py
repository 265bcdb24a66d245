"""Abstract interface for reading and setting the host window title.

Windows are located by their exact current title text. This is brittle (two
windows with the same title, or a title changed by someone else), so real
implementations may ignore the matcher when the host has injected a stable
window handle.
"""

from abc import ABC, abstractmethod


class WindowTitle(ABC):
    """Abstract interface for window title operations.

    All implementations (real, fake, dry-run) must implement this interface.
    """

    @abstractmethod
    def get_title(self, matcher: str) -> str | None:
        """Read the displayed title of the window matched by `matcher`.

        Args:
            matcher: Exact title text used to locate the window

        Returns:
            The window's title, or None if no window matched or the title
            could not be read
        """
        ...

    @abstractmethod
    def set_title(self, matcher: str, new_title: str) -> bool:
        """Set the title of the window matched by `matcher`.

        Args:
            matcher: Exact title text used to locate the window
            new_title: Title to display

        Returns:
            True if the title was set, False if no window matched or the
            platform call failed
        """
        ...
