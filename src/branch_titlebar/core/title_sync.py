"""Synchronize the host window title and recent items with the current branch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from branch_titlebar.core.branch_resolver import DEFAULT_GIT_TIMEOUT_SECONDS, resolve_branch
from branch_titlebar.core.config import DEFAULT_TITLE_FORMAT
from branch_titlebar.core.recent_entries import RecentItemsUpdater
from branch_titlebar.core.threads import run_on_dedicated_thread
from branch_titlebar.gateway.git.abc import Git
from branch_titlebar.gateway.host.abc import ProjectHost
from branch_titlebar.gateway.window_title.abc import WindowTitle

logger = logging.getLogger(__name__)


@dataclass
class SyncState:
    """What the synchronizer last applied, owned by one watch session.

    Only TitleSynchronizer.tick() mutates it, and only from the UI-affine
    context.
    """

    last_applied_branch: str = ""
    last_applied_title: str = ""


@dataclass(frozen=True)
class TickResult:
    """Outcome of a single synchronization cycle."""

    branch: str
    title_updated: bool
    recents_updated: bool

    @staticmethod
    def skipped() -> TickResult:
        return TickResult(branch="", title_updated=False, recents_updated=False)


def format_title(title_format: str, project: str, branch: str) -> str:
    return title_format.format(project=project, branch=branch)


@dataclass(frozen=True)
class TitleSynchronizer:
    """Applies the resolved branch to the window title and recent items.

    The title is compared on every tick so that it follows project renames
    even without a branch change. The recent-items rewrite is more expensive
    and only runs when the branch actually changes.
    """

    git: Git
    window_title: WindowTitle
    recent_items: RecentItemsUpdater
    title_format: str = DEFAULT_TITLE_FORMAT
    git_timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS
    run_isolated: Callable[[Callable[[], None]], None] = run_on_dedicated_thread

    def tick(self, state: SyncState, host: ProjectHost) -> TickResult:
        """Run one synchronization cycle.

        Args:
            state: Session state, advanced only after a successful cycle
            host: Host to read the active project and window caption from

        Returns:
            TickResult describing what changed
        """
        project = host.get_active_project()
        if project is None:
            logger.debug("No active project, skipping tick")
            return TickResult.skipped()

        branch = resolve_branch(
            self.git, project.repo_root, timeout_seconds=self.git_timeout_seconds
        )
        if not branch:
            logger.debug("No branch for %s, leaving title unchanged", project.repo_root)
            return TickResult.skipped()

        desired_title = format_title(self.title_format, project.identifier, branch)

        caption = host.get_window_caption()
        current_title = self.window_title.get_title(caption) if caption is not None else None
        if current_title is None:
            # Window not found under the host's caption: most likely we renamed it
            current_title = state.last_applied_title

        title_updated = False
        if current_title != desired_title:
            if not self.window_title.set_title(current_title, desired_title):
                logger.debug("Failed to set title %r, will retry next tick", desired_title)
                return TickResult(branch=branch, title_updated=False, recents_updated=False)
            state.last_applied_title = desired_title
            title_updated = True

        recents_updated = False
        if branch != state.last_applied_branch:
            logger.debug("Branch changed %r -> %r", state.last_applied_branch, branch)
            state.last_applied_branch = branch
            project_path = project.project_path

            def update_recent_items() -> None:
                self.recent_items.update(project_path, branch)

            self.run_isolated(update_recent_items)
            recents_updated = True

        return TickResult(
            branch=branch, title_updated=title_updated, recents_updated=recents_updated
        )
