"""Fake WindowTitle implementation for testing.

FakeWindowTitle models a set of open windows keyed by their title, so that
exact-title matching behaves like the real platform: once a window has been
renamed, its old title no longer finds it.
"""

from branch_titlebar.gateway.window_title.abc import WindowTitle


class FakeWindowTitle(WindowTitle):
    """In-memory fake that tracks title mutations.

    This class has NO public setup methods beyond constructor.
    All state is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        open_titles: list[str] | None = None,
        readable: bool = True,
        fail_sets: bool = False,
    ) -> None:
        """Create FakeWindowTitle with optional initial windows.

        Args:
            open_titles: Titles of the windows that exist initially
            readable: False makes get_title() always fail, like a terminal
            fail_sets: True makes every set_title() call fail
        """
        self._titles = list(open_titles) if open_titles is not None else []
        self._readable = readable
        self._fail_sets = fail_sets
        self._set_calls: list[tuple[str, str]] = []

    @property
    def set_calls(self) -> list[tuple[str, str]]:
        """Get the (matcher, new_title) pairs passed to set_title().

        Returns a copy to prevent external mutation.
        This property is for test assertions only.
        """
        return list(self._set_calls)

    @property
    def open_titles(self) -> list[str]:
        """Get the current titles of all windows.

        This property is for test assertions only.
        """
        return list(self._titles)

    def get_title(self, matcher: str) -> str | None:
        if not self._readable or matcher not in self._titles:
            return None
        return matcher

    def set_title(self, matcher: str, new_title: str) -> bool:
        self._set_calls.append((matcher, new_title))
        if self._fail_sets or matcher not in self._titles:
            return False
        self._titles[self._titles.index(matcher)] = new_title
        return True
