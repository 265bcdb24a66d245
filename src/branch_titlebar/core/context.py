"""Application context with dependency injection."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from branch_titlebar.core.config import GlobalConfig
from branch_titlebar.core.recent_entries import (
    DryRunRecentEntryStore,
    RecentEntryStore,
    RecentItemsUpdater,
)
from branch_titlebar.core.title_sync import TitleSynchronizer
from branch_titlebar.gateway.git.abc import Git
from branch_titlebar.gateway.git.real import RealGit
from branch_titlebar.gateway.jump_list.abc import JumpList
from branch_titlebar.gateway.jump_list.dry_run import DryRunJumpList
from branch_titlebar.gateway.jump_list.real import (
    DesktopEntryJumpList,
    NoJumpList,
    default_applications_dir,
)
from branch_titlebar.gateway.window_title.abc import WindowTitle
from branch_titlebar.gateway.window_title.dry_run import DryRunWindowTitle
from branch_titlebar.gateway.window_title.real import (
    NoWindowTitle,
    TerminalWindowTitle,
    XdotoolWindowTitle,
)

APP_ID = "branch-titlebar"
APP_NAME = "Branch Titlebar"


@dataclass(frozen=True)
class TitlebarContext:
    """Immutable context holding all dependencies for branch-titlebar operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    window_title: WindowTitle
    jump_list: JumpList
    recent_store: RecentEntryStore
    config: GlobalConfig
    cwd: Path
    dry_run: bool

    def with_dry_run(self) -> TitlebarContext:
        """Return a copy whose mutating gateways only report what they would do."""
        if self.dry_run:
            return self
        return TitlebarContext(
            git=self.git,
            window_title=DryRunWindowTitle(self.window_title),
            jump_list=DryRunJumpList(self.jump_list),
            recent_store=DryRunRecentEntryStore(self.recent_store.path),
            config=self.config,
            cwd=self.cwd,
            dry_run=True,
        )

    def synchronizer(self) -> TitleSynchronizer:
        """Build a TitleSynchronizer wired to this context's gateways."""
        return TitleSynchronizer(
            git=self.git,
            window_title=self.window_title,
            recent_items=RecentItemsUpdater(
                store=self.recent_store,
                jump_list=self.jump_list,
                limits=self.config.limits,
            ),
            title_format=self.config.title_format,
            git_timeout_seconds=self.config.git_timeout_seconds,
        )

    @staticmethod
    def for_test(
        git: Git | None = None,
        window_title: WindowTitle | None = None,
        jump_list: JumpList | None = None,
        recent_store: RecentEntryStore | None = None,
        config: GlobalConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> TitlebarContext:
        """Create test context with fakes for every unspecified gateway.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            window_title: Optional WindowTitle. If None, creates FakeWindowTitle
                with no open windows.
            jump_list: Optional JumpList. If None, creates FakeJumpList.
            recent_store: Optional RecentEntryStore. If None, uses the config's
                recent entries path.
            config: Optional GlobalConfig. If None, uses defaults rooted at
                /test/branch-titlebar.
            cwd: Optional working directory. If None, uses /test/default/cwd.
            dry_run: Whether to wrap mutating gateways in dry-run wrappers.

        Example:
            >>> window_title = FakeWindowTitle(open_titles=["App"])
            >>> ctx = TitlebarContext.for_test(window_title=window_title)
        """
        from branch_titlebar.gateway.git.fake import FakeGit
        from branch_titlebar.gateway.jump_list.fake import FakeJumpList
        from branch_titlebar.gateway.window_title.fake import FakeWindowTitle

        if config is None:
            config = GlobalConfig(data_dir=Path("/test/branch-titlebar"))

        ctx = TitlebarContext(
            git=git if git is not None else FakeGit(),
            window_title=window_title if window_title is not None else FakeWindowTitle(),
            jump_list=jump_list if jump_list is not None else FakeJumpList(),
            recent_store=(
                recent_store
                if recent_store is not None
                else RecentEntryStore(config.recent_entries_path)
            ),
            config=config,
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            dry_run=False,
        )
        if dry_run:
            return ctx.with_dry_run()
        return ctx


def _create_window_title(config: GlobalConfig) -> WindowTitle:
    if config.window_backend == "xdotool":
        return XdotoolWindowTitle(window_id=config.window_id)
    if config.window_backend == "terminal":
        return TerminalWindowTitle(sys.stdout)
    return NoWindowTitle()


def _create_jump_list(config: GlobalConfig) -> JumpList:
    if config.jump_list_backend == "desktop":
        return DesktopEntryJumpList(
            app_id=APP_ID,
            app_name=APP_NAME,
            applications_dir=default_applications_dir(),
        )
    return NoJumpList()


def create_context(config: GlobalConfig, *, dry_run: bool) -> TitlebarContext:
    """Create production context with real implementations.

    Args:
        config: Loaded global configuration
        dry_run: If True, mutating gateways only report what they would do
    """
    ctx = TitlebarContext(
        git=RealGit(),
        window_title=_create_window_title(config),
        jump_list=_create_jump_list(config),
        recent_store=RecentEntryStore(config.recent_entries_path),
        config=config,
        cwd=Path.cwd(),
        dry_run=False,
    )
    if dry_run:
        return ctx.with_dry_run()
    return ctx
