"""Tests for configuration loading."""

from pathlib import Path

import pytest

from branch_titlebar.core.config import (
    DEFAULT_TITLE_FORMAT,
    GlobalConfig,
    PresentationLimits,
    load_config,
)


def test_missing_file_gives_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    config = load_config(tmp_path / "missing.toml")

    assert config == GlobalConfig(data_dir=tmp_path / ".branch-titlebar")
    assert config.poll_interval_seconds == 5.0
    assert config.git_timeout_seconds == 5.0
    assert config.title_format == DEFAULT_TITLE_FORMAT
    assert config.limits == PresentationLimits()
    assert config.recent_entries_path == tmp_path / ".branch-titlebar" / "recent_entries.json"


def test_loads_all_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        f"""
data_dir = "{tmp_path / 'data'}"
poll_interval_seconds = 2
git_timeout_seconds = 1.5
title_format = "{{branch}} :: {{project}}"
window_backend = "terminal"
window_id = "0x3a00007"
jump_list_backend = "none"
max_categories = 2
max_items_per_category = 3
max_fallback_items = 4
""",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config == GlobalConfig(
        data_dir=tmp_path / "data",
        poll_interval_seconds=2.0,
        git_timeout_seconds=1.5,
        title_format="{branch} :: {project}",
        window_backend="terminal",
        window_id="0x3a00007",
        jump_list_backend="none",
        limits=PresentationLimits(max_categories=2, max_items_per_category=3, max_fallback_items=4),
    )


@pytest.mark.parametrize(
    ("content", "key"),
    [
        ("poll_interval_seconds = 0", "poll_interval_seconds"),
        ('git_timeout_seconds = "5"', "git_timeout_seconds"),
        ("max_categories = 1.5", "max_categories"),
        ("max_fallback_items = true", "max_fallback_items"),
        ('window_backend = "wayland"', "window_backend"),
        ('jump_list_backend = "taskbar"', "jump_list_backend"),
        ('title_format = "{project}"', "title_format"),
        ('title_format = "{branch} {nope}"', "title_format"),
        ("window_id = 42", "window_id"),
    ],
)
def test_invalid_values_name_the_key(tmp_path: Path, content: str, key: str) -> None:
    path = tmp_path / "config.toml"
    path.write_text(content + "\n", encoding="utf-8")

    with pytest.raises(ValueError, match=key):
        load_config(path)


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("this is = = not toml", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_config(path)
