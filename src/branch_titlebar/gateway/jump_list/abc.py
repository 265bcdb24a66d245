"""Abstract interface for the shell's recent-items presentation.

The presentation is always rebuilt from scratch: every submit() replaces the
previous set of categories entirely and asks the shell to refresh it.
"""

from abc import ABC, abstractmethod

from branch_titlebar.gateway.jump_list.types import JumpListCategory


class JumpList(ABC):
    """Abstract interface for recent-items presentation operations.

    All implementations (real, fake, dry-run) must implement this interface.
    """

    @abstractmethod
    def submit(self, categories: tuple[JumpListCategory, ...]) -> None:
        """Replace the presentation with `categories` and refresh it.

        Args:
            categories: Ordered categories to display
        """
        ...
