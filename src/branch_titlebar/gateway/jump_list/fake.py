"""Fake JumpList implementation for testing."""

from branch_titlebar.gateway.jump_list.abc import JumpList
from branch_titlebar.gateway.jump_list.types import JumpListCategory


class FakeJumpList(JumpList):
    """In-memory fake that records every submitted presentation."""

    def __init__(self) -> None:
        self._submissions: list[tuple[JumpListCategory, ...]] = []

    @property
    def submissions(self) -> list[tuple[JumpListCategory, ...]]:
        """Get every presentation passed to submit(), oldest first.

        Returns a copy to prevent external mutation.
        This property is for test assertions only.
        """
        return list(self._submissions)

    @property
    def current(self) -> tuple[JumpListCategory, ...] | None:
        """Get the most recently submitted presentation, if any."""
        if not self._submissions:
            return None
        return self._submissions[-1]

    def submit(self, categories: tuple[JumpListCategory, ...]) -> None:
        self._submissions.append(categories)
