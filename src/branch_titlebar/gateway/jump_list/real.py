"""Production JumpList implementations.

DesktopEntryJumpList publishes recent items as freedesktop Desktop Entry
actions, which docks and launchers show in the application's context menu.
Desktop actions have no notion of categories, so each action label is prefixed
with its category title.
"""

import logging
import shutil
import subprocess
from pathlib import Path

from branch_titlebar.gateway.jump_list.abc import JumpList
from branch_titlebar.gateway.jump_list.types import JumpListCategory

logger = logging.getLogger(__name__)

REFRESH_TIMEOUT_SECONDS = 5


def default_applications_dir() -> Path:
    """Return the per-user applications directory.

    Note: Not cached to allow tests to monkeypatch Path.home().
    """
    return Path.home() / ".local" / "share" / "applications"


def _quote_exec_arg(arg: str) -> str:
    """Quote an argument for an Exec key.

    Reserved characters inside double quotes must be backslash-escaped, and
    a literal percent sign is written as %%.
    """
    escaped = arg
    for ch in ("\\", '"', "`", "$"):
        escaped = escaped.replace(ch, f"\\{ch}")
    escaped = escaped.replace("%", "%%")
    # The desktop file itself applies string escaping on top of Exec quoting
    escaped = escaped.replace("\\", "\\\\")
    return f'"{escaped}"'


def _escape_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace("\t", "\\t")


def render_desktop_entry(app_name: str, categories: tuple[JumpListCategory, ...]) -> str:
    """Render a desktop entry whose actions open each recent item.

    Args:
        app_name: Value of the entry's Name key
        categories: Presentation to render, in display order

    Returns:
        Desktop entry file content
    """
    sections: list[str] = []
    action_ids: list[str] = []
    for category_index, category in enumerate(categories):
        for item_index, item in enumerate(category.items):
            action_id = f"recent-{category_index}-{item_index}"
            action_ids.append(action_id)
            sections.append(
                f"[Desktop Action {action_id}]\n"
                f"Name={_escape_value(f'{category.title}: {item.label}')}\n"
                f"Exec=xdg-open {_quote_exec_arg(item.target)}\n"
            )

    header = (
        "[Desktop Entry]\n"
        "Type=Application\n"
        f"Name={_escape_value(app_name)}\n"
        "Exec=xdg-open %f\n"
        "NoDisplay=false\n"
        f"Actions={''.join(f'{action_id};' for action_id in action_ids)}\n"
    )
    return "\n".join([header, *sections])


class DesktopEntryJumpList(JumpList):
    """Writes the presentation into a .desktop file and refreshes the database.

    Desktop actions take themed icon names rather than documents, so each
    item's icon source is not rendered.
    """

    def __init__(self, *, app_id: str, app_name: str, applications_dir: Path) -> None:
        self._app_id = app_id
        self._app_name = app_name
        self._applications_dir = applications_dir

    @property
    def entry_path(self) -> Path:
        return self._applications_dir / f"{self._app_id}.desktop"

    def submit(self, categories: tuple[JumpListCategory, ...]) -> None:
        content = render_desktop_entry(self._app_name, categories)
        try:
            self._applications_dir.mkdir(parents=True, exist_ok=True)
            self.entry_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to write %s: %s", self.entry_path, e)
            return

        self._refresh()

    def _refresh(self) -> None:
        if shutil.which("update-desktop-database") is None:
            logger.debug("update-desktop-database not installed, skipping refresh")
            return
        try:
            subprocess.run(
                ["update-desktop-database", str(self._applications_dir)],
                capture_output=True,
                check=False,
                timeout=REFRESH_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("update-desktop-database failed: %s", e)


class NoJumpList(JumpList):
    """JumpList backend for hosts without a recent-items menu."""

    def submit(self, categories: tuple[JumpListCategory, ...]) -> None:
        logger.debug("Recent-items presentation disabled, dropping %d categories", len(categories))
