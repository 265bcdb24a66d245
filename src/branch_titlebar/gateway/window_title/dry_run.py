"""Dry-run WindowTitle implementation.

Delegates read-only methods to wrapped, no-ops mutations.
"""

from branch_titlebar.gateway.window_title.abc import WindowTitle
from branch_titlebar.output import user_output


class DryRunWindowTitle(WindowTitle):
    """No-op wrapper that prevents title changes in dry-run mode.

    set_title() reports success so the synchronizer advances its state the
    same way it would for a real change.
    """

    def __init__(self, wrapped: WindowTitle) -> None:
        self._wrapped = wrapped

    def get_title(self, matcher: str) -> str | None:
        return self._wrapped.get_title(matcher)

    def set_title(self, matcher: str, new_title: str) -> bool:
        user_output(f"[DRY RUN] Would set window title to: {new_title}")
        return True
