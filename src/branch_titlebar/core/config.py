"""Global configuration loaded from ~/.branch-titlebar/config.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

WindowBackend = Literal["xdotool", "terminal", "none"]
JumpListBackend = Literal["desktop", "none"]

WINDOW_BACKENDS: tuple[WindowBackend, ...] = ("xdotool", "terminal", "none")
JUMP_LIST_BACKENDS: tuple[JumpListBackend, ...] = ("desktop", "none")

DEFAULT_TITLE_FORMAT = "{project} - [{branch}]"
RECENT_ENTRIES_FILENAME = "recent_entries.json"


def installation_path() -> Path:
    """Return path to the per-user application directory.

    Note: Not cached to allow tests to monkeypatch Path.home().
    """
    return Path.home() / ".branch-titlebar"


def default_config_path() -> Path:
    return installation_path() / "config.toml"


@dataclass(frozen=True)
class PresentationLimits:
    """Caps applied when building the recent-items presentation."""

    max_categories: int = 5
    max_items_per_category: int = 5
    max_fallback_items: int = 10


@dataclass(frozen=True)
class GlobalConfig:
    """Global branch-titlebar configuration.

    Every field has a default, so a missing config file is equivalent to an
    empty one.
    """

    data_dir: Path
    poll_interval_seconds: float = 5.0
    git_timeout_seconds: float = 5.0
    title_format: str = DEFAULT_TITLE_FORMAT
    window_backend: WindowBackend = "xdotool"
    window_id: str | None = None
    jump_list_backend: JumpListBackend = "desktop"
    limits: PresentationLimits = PresentationLimits()

    @staticmethod
    def defaults() -> GlobalConfig:
        return GlobalConfig(data_dir=installation_path())

    @property
    def recent_entries_path(self) -> Path:
        return self.data_dir / RECENT_ENTRIES_FILENAME


def _positive_number(data: dict[str, object], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"'{key}' must be a positive number, got: {value!r}")
    return float(value)


def _positive_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"'{key}' must be a positive integer, got: {value!r}")
    return value


def _optional_str(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got: {value!r}")
    return value


def _validate_title_format(title_format: str) -> str:
    if "{branch}" not in title_format:
        raise ValueError(f"'title_format' must contain {{branch}}, got: {title_format!r}")
    try:
        title_format.format(project="project", branch="branch")
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(f"'title_format' is not a valid format string: {e}") from None
    return title_format


def parse_config(data: dict[str, object]) -> GlobalConfig:
    """Build a GlobalConfig from parsed TOML data.

    Raises:
        ValueError: If a key has the wrong type or an invalid value
    """
    defaults = GlobalConfig.defaults()

    window_backend = data.get("window_backend", defaults.window_backend)
    if window_backend not in WINDOW_BACKENDS:
        raise ValueError(
            f"'window_backend' must be one of {', '.join(WINDOW_BACKENDS)}, got: {window_backend!r}"
        )

    jump_list_backend = data.get("jump_list_backend", defaults.jump_list_backend)
    if jump_list_backend not in JUMP_LIST_BACKENDS:
        raise ValueError(
            f"'jump_list_backend' must be one of {', '.join(JUMP_LIST_BACKENDS)}, "
            f"got: {jump_list_backend!r}"
        )

    data_dir = _optional_str(data, "data_dir")
    title_format = _optional_str(data, "title_format")

    return GlobalConfig(
        data_dir=Path(data_dir).expanduser() if data_dir is not None else defaults.data_dir,
        poll_interval_seconds=_positive_number(
            data, "poll_interval_seconds", defaults.poll_interval_seconds
        ),
        git_timeout_seconds=_positive_number(
            data, "git_timeout_seconds", defaults.git_timeout_seconds
        ),
        title_format=_validate_title_format(
            title_format if title_format is not None else defaults.title_format
        ),
        window_backend=window_backend,
        window_id=_optional_str(data, "window_id"),
        jump_list_backend=jump_list_backend,
        limits=PresentationLimits(
            max_categories=_positive_int(
                data, "max_categories", defaults.limits.max_categories
            ),
            max_items_per_category=_positive_int(
                data, "max_items_per_category", defaults.limits.max_items_per_category
            ),
            max_fallback_items=_positive_int(
                data, "max_fallback_items", defaults.limits.max_fallback_items
            ),
        ),
    )


def load_config(config_path: Path) -> GlobalConfig:
    """Load configuration from `config_path`.

    Returns:
        GlobalConfig with defaults for every key the file does not set, or
        pure defaults if the file does not exist

    Raises:
        ValueError: If the file is not valid TOML or holds invalid values
    """
    if not config_path.exists():
        return GlobalConfig.defaults()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from None

    return parse_config(data)
