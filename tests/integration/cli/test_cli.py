"""Integration tests for the branch-titlebar CLI.

Uses context injection via TitlebarContext.for_test() with fake gateways.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from branch_titlebar.cli.cli import cli
from branch_titlebar.core.config import GlobalConfig, PresentationLimits
from branch_titlebar.core.context import TitlebarContext
from branch_titlebar.core.recent_entries import RecentEntry, RecentEntryStore
from branch_titlebar.gateway.git.fake import FakeGit
from branch_titlebar.gateway.jump_list.fake import FakeJumpList
from branch_titlebar.gateway.window_title.fake import FakeWindowTitle


@pytest.fixture
def config(tmp_path: Path) -> GlobalConfig:
    return GlobalConfig(data_dir=tmp_path / "data")


@pytest.fixture
def project(make_repo: Callable[[str, str], Path]) -> Path:
    root = make_repo("repo", "ref: refs/heads/main\n")
    project_file = root / "App.sln"
    project_file.write_text("", encoding="utf-8")
    return project_file


class TestBranchCommand:
    def test_prints_branch_from_metadata(
        self, make_repo: Callable[[str, str], Path], config: GlobalConfig
    ) -> None:
        root = make_repo("repo", "ref: refs/heads/feature/x\n")
        runner = CliRunner()

        result = runner.invoke(
            cli, ["branch", str(root)], obj=TitlebarContext.for_test(config=config)
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "feature/x"

    def test_json_reports_source(
        self, make_repo: Callable[[str, str], Path], config: GlobalConfig
    ) -> None:
        root = make_repo("repo", "0123456789abcdef0123456789abcdef01234567")
        runner = CliRunner()

        result = runner.invoke(
            cli, ["branch", str(root), "--json"], obj=TitlebarContext.for_test(config=config)
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "branch": "0123456",
            "kind": "detached",
            "source": "metadata",
            "error": None,
        }

    def test_git_fallback_source(self, tmp_path: Path, config: GlobalConfig) -> None:
        root = tmp_path / "repo"
        (root / ".git").mkdir(parents=True)
        runner = CliRunner()
        ctx = TitlebarContext.for_test(git=FakeGit(abbrev_refs={root: "dev"}), config=config)

        result = runner.invoke(cli, ["branch", str(root), "--json"], obj=ctx)

        data = json.loads(result.stdout)
        assert data["branch"] == "dev"
        assert data["source"] == "git"
        assert data["kind"] == "unknown"

    def test_no_branch_exits_nonzero(self, tmp_path: Path, config: GlobalConfig) -> None:
        root = tmp_path / "repo"
        (root / ".git").mkdir(parents=True)
        runner = CliRunner()

        result = runner.invoke(
            cli, ["branch", str(root)], obj=TitlebarContext.for_test(config=config)
        )

        assert result.exit_code == 1
        assert "No branch found" in result.stderr


class TestSyncCommand:
    def test_updates_title_and_recent_items(self, project: Path, config: GlobalConfig) -> None:
        window_title = FakeWindowTitle(open_titles=["App"])
        jump_list = FakeJumpList()
        ctx = TitlebarContext.for_test(
            window_title=window_title, jump_list=jump_list, config=config
        )
        runner = CliRunner()

        result = runner.invoke(cli, ["sync", str(project)], obj=ctx)

        assert result.exit_code == 0, result.output
        assert window_title.open_titles == ["App - [main]"]
        assert ctx.recent_store.load() == [RecentEntry(path=str(project), branch_label="main")]
        assert len(jump_list.submissions) == 1
        assert "Branch: main" in result.stderr
        assert "Window title updated" in result.stderr

    def test_caption_option(self, project: Path, config: GlobalConfig) -> None:
        window_title = FakeWindowTitle(open_titles=["App - Editor"])
        ctx = TitlebarContext.for_test(window_title=window_title, config=config)
        runner = CliRunner()

        result = runner.invoke(cli, ["sync", str(project), "--caption", "App - Editor"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert window_title.set_calls == [("App - Editor", "App - [main]")]

    def test_dry_run_changes_nothing(self, project: Path, config: GlobalConfig) -> None:
        window_title = FakeWindowTitle(open_titles=["App"])
        jump_list = FakeJumpList()
        ctx = TitlebarContext.for_test(
            window_title=window_title, jump_list=jump_list, config=config
        )
        runner = CliRunner()

        result = runner.invoke(cli, ["sync", str(project), "--dry-run"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert window_title.set_calls == []
        assert jump_list.submissions == []
        assert not config.recent_entries_path.exists()
        assert "[DRY RUN] Would set window title to: App - [main]" in result.stderr

    def test_missing_project_argument_rejected(self, tmp_path: Path, config: GlobalConfig) -> None:
        runner = CliRunner()

        result = runner.invoke(
            cli, ["sync", str(tmp_path / "nope.sln")], obj=TitlebarContext.for_test(config=config)
        )

        assert result.exit_code == 2


class TestRecentCommands:
    def _ctx_with_entries(self, config: GlobalConfig) -> TitlebarContext:
        store = RecentEntryStore(config.recent_entries_path)
        store.save(
            [
                RecentEntry(path=r"C:\A\x.sln", branch_label="main"),
                RecentEntry(path=r"C:\B\x.sln", branch_label="dev"),
                RecentEntry(path=r"C:\C\y.sln", branch_label=""),
            ]
        )
        return TitlebarContext.for_test(config=config, recent_store=store)

    def test_list(self, config: GlobalConfig) -> None:
        runner = CliRunner()

        result = runner.invoke(cli, ["recent", "list"], obj=self._ctx_with_entries(config))

        assert result.exit_code == 0, result.output
        assert "dev" in result.stderr
        assert r"C:\C\y.sln" in result.stderr

    def test_list_empty(self, config: GlobalConfig) -> None:
        runner = CliRunner()

        result = runner.invoke(cli, ["recent", "list"], obj=TitlebarContext.for_test(config=config))

        assert result.exit_code == 0
        assert "No recent entries" in result.stderr

    def test_menu(self, config: GlobalConfig) -> None:
        runner = CliRunner()

        result = runner.invoke(cli, ["recent", "menu"], obj=self._ctx_with_entries(config))

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "x",
            "  main\tC:\\A\\x.sln",
            "  dev\tC:\\B\\x.sln",
            "Recent",
            "  y\tC:\\C\\y.sln",
        ]

    def test_menu_respects_limits(self, tmp_path: Path) -> None:
        config = GlobalConfig(
            data_dir=tmp_path / "data", limits=PresentationLimits(max_items_per_category=1)
        )
        runner = CliRunner()

        result = runner.invoke(cli, ["recent", "menu"], obj=self._ctx_with_entries(config))

        assert "  dev\tC:\\B\\x.sln" not in result.stdout


def test_invalid_config_file_reports_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("poll_interval_seconds = -1\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, ["--config", str(config_path), "recent", "menu"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
