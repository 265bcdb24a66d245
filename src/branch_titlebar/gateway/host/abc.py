"""Abstract interface for the host application's project model."""

from abc import ABC, abstractmethod

from branch_titlebar.gateway.host.types import ActiveProject


class ProjectHost(ABC):
    """Abstract interface for querying the host application.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def get_active_project(self) -> ActiveProject | None:
        """Get the project currently open in the host.

        Returns:
            ActiveProject, or None when no project is open
        """
        ...

    @abstractmethod
    def get_window_caption(self) -> str | None:
        """Get the caption the host believes its main window has.

        Used as the exact-title matcher when reading the window title.

        Returns:
            Caption text, or None if the host has no main window
        """
        ...
