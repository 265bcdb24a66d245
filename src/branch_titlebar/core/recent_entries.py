"""Persisted recent-entry list and the presentation built from it.

The store is a JSON array of {"Path": ..., "BranchName": ...} objects,
most-recent-first, with at most one entry per path (compared
case-insensitively). Every update is a full read-modify-write of the file
without locking, so concurrent writers race and the last one wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from branch_titlebar.core.config import PresentationLimits
from branch_titlebar.gateway.jump_list.abc import JumpList
from branch_titlebar.gateway.jump_list.types import JumpListCategory, JumpListItem
from branch_titlebar.output import user_output

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY_TITLE = "Recent"


class RecentEntry(BaseModel):
    """A project path and the branch it was last seen on."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = Field(alias="Path")
    branch_label: str = Field(default="", alias="BranchName")

    @property
    def path_key(self) -> str:
        return self.path.casefold()

    @property
    def display_name(self) -> str:
        # PureWindowsPath splits on both "/" and "\"
        return PureWindowsPath(self.path).stem

    @property
    def directory_name(self) -> str:
        parent = PureWindowsPath(self.path).parent
        return parent.name or str(parent)


_ENTRIES_ADAPTER = TypeAdapter(list[RecentEntry] | None)


class RecentEntryStore:
    """Reads and rewrites the recent-entry file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[RecentEntry]:
        """Load all entries, most recent first.

        A missing, unreadable or corrupt file is treated as an empty list.
        """
        if not self._path.exists():
            return []

        try:
            content = self._path.read_bytes()
            entries = _ENTRIES_ADAPTER.validate_json(content)
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable recent entries at %s: %s", self._path, e)
            return []

        if entries is None:
            return []
        return entries

    def save(self, entries: list[RecentEntry]) -> None:
        """Overwrite the file with `entries`. Write failures are logged and dropped."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(_ENTRIES_ADAPTER.dump_json(entries, by_alias=True, indent=2))
        except OSError as e:
            logger.warning("Failed to save recent entries to %s: %s", self._path, e)

    def upsert(self, path: str, branch_label: str) -> list[RecentEntry]:
        """Move `path` to the front of the list with `branch_label`.

        Returns:
            The full list as persisted
        """
        new_entry = RecentEntry(path=path, branch_label=branch_label)
        entries = [e for e in self.load() if e.path_key != new_entry.path_key]
        entries.insert(0, new_entry)
        self.save(entries)
        return entries


def _fallback_label(entry: RecentEntry) -> str:
    if entry.branch_label:
        return f"{entry.display_name} [{entry.branch_label}]"
    return entry.display_name


def _item(entry: RecentEntry, label: str) -> JumpListItem:
    return JumpListItem(target=entry.path, label=label, icon_source=entry.path)


def build_jump_list(
    entries: list[RecentEntry], limits: PresentationLimits
) -> tuple[JumpListCategory, ...]:
    """Build the recent-items presentation from `entries`.

    Entries sharing a display name (case-insensitive) form a group. A group
    with several members, at least one of them on a known branch, gets its
    own category whose items are labelled by branch (or by directory when the
    branch is unknown). Everything else lands in the "Recent" category.

    Args:
        entries: Recent entries, most recent first
        limits: Category and item caps

    Returns:
        Dedicated categories in recency order, then the fallback category if
        it has any items
    """
    groups: dict[str, list[RecentEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.display_name.casefold(), []).append(entry)

    categories: list[JumpListCategory] = []
    absorbed: set[str] = set()
    for members in groups.values():
        if len(categories) >= limits.max_categories:
            break
        if len(members) < 2 or not any(m.branch_label for m in members):
            continue
        shown = members[: limits.max_items_per_category]
        categories.append(
            JumpListCategory(
                title=members[0].display_name,
                items=tuple(_item(m, m.branch_label or m.directory_name) for m in shown),
            )
        )
        # Members past the item cap are dropped rather than spilled into "Recent"
        absorbed.update(m.path_key for m in members)

    fallback = [e for e in entries if e.path_key not in absorbed]
    if fallback:
        categories.append(
            JumpListCategory(
                title=FALLBACK_CATEGORY_TITLE,
                items=tuple(
                    _item(e, _fallback_label(e)) for e in fallback[: limits.max_fallback_items]
                ),
            )
        )

    return tuple(categories)


@dataclass(frozen=True)
class RecentItemsUpdater:
    """Records a branch change and republishes the recent-items presentation."""

    store: RecentEntryStore
    jump_list: JumpList
    limits: PresentationLimits

    def update(self, project_path: Path, branch_label: str) -> bool:
        """Record `project_path` on `branch_label` and refresh the presentation.

        Returns:
            False if the project no longer exists and nothing was recorded
        """
        if not project_path.exists():
            logger.debug("Project %s no longer exists, skipping recent entry", project_path)
            return False

        entries = self.store.upsert(str(project_path), branch_label)
        self.jump_list.submit(build_jump_list(entries, self.limits))
        return True


class DryRunRecentEntryStore(RecentEntryStore):
    """Store that reads the real file but only reports writes."""

    def save(self, entries: list[RecentEntry]) -> None:
        user_output(f"[DRY RUN] Would save {len(entries)} recent entries to {self.path}")
