"""Fake Git implementation for testing.

FakeGit answers from a path -> ref mapping configured at construction and
records every query so tests can assert on fallback usage.
"""

from pathlib import Path

from branch_titlebar.gateway.git.abc import Git


class FakeGit(Git):
    """In-memory fake that tracks queries.

    This class has NO public setup methods beyond constructor.
    """

    def __init__(self, *, abbrev_refs: dict[Path, str] | None = None) -> None:
        """Create FakeGit with optional configured refs.

        Args:
            abbrev_refs: Mapping of cwd -> ref name. Directories not in the
                mapping behave like a failed git invocation.
        """
        self._abbrev_refs = abbrev_refs if abbrev_refs is not None else {}
        self._abbrev_ref_calls: list[tuple[Path, float]] = []

    @property
    def abbrev_ref_calls(self) -> list[tuple[Path, float]]:
        """Get the (cwd, timeout) pairs that were queried.

        Returns a copy to prevent external mutation.
        This property is for test assertions only.
        """
        return list(self._abbrev_ref_calls)

    def get_abbrev_ref(self, cwd: Path, *, timeout_seconds: float) -> str | None:
        self._abbrev_ref_calls.append((cwd, timeout_seconds))
        return self._abbrev_refs.get(cwd)
