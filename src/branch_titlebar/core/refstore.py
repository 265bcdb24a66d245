"""Read the current ref straight from on-disk git metadata.

No git binary is involved: the reader walks up from a repository root to the
nearest `.git` entry, follows the `gitdir:` redirect that linked worktrees
use, and parses HEAD. Failures never raise; they collapse to an "unknown"
RefState that carries a description of what went wrong.

A symbolic HEAD outside refs/heads/ is reported as "unknown" rather than
shortened like a commit id, so the git fallback gets to name it. This is
intentional.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

logger = logging.getLogger(__name__)

RefKind = Literal["branch", "detached", "unknown"]

BRANCH_REF_PREFIX = "ref: refs/heads/"
SYMBOLIC_REF_PREFIX = "ref:"
GITDIR_PREFIX = "gitdir:"
SHORT_COMMIT_LENGTH = 7


@dataclass(frozen=True)
class RefState:
    """Resolved HEAD of a working tree.

    Attributes:
        kind: "branch", "detached" or "unknown"
        label: Branch name, 7-character commit prefix, or "" for unknown
        error: Why resolution failed, or None when the result is confirmed
            (an "unknown" result with no error means no metadata was found)
    """

    kind: RefKind
    label: str
    error: str | None = None

    @staticmethod
    def unknown(error: str | None = None) -> RefState:
        return RefState(kind="unknown", label="", error=error)

    @property
    def is_resolved(self) -> bool:
        return self.kind != "unknown" and bool(self.label)


def parse_head(content: str) -> RefState:
    """Parse the content of a HEAD file.

    The branch name is taken verbatim from the ref line; the ref itself is not
    looked up, so a branch with no commits yet still resolves.
    """
    head = content.strip()
    if head.startswith(BRANCH_REF_PREFIX):
        name = head[len(BRANCH_REF_PREFIX) :].strip()
        if not name:
            return RefState.unknown(error="empty branch ref in HEAD")
        return RefState(kind="branch", label=name)

    if head.startswith(SYMBOLIC_REF_PREFIX):
        # Symbolic ref outside refs/heads, not a commit id
        return RefState.unknown(error=f"HEAD points outside refs/heads: {head}")

    if len(head) >= SHORT_COMMIT_LENGTH:
        return RefState(kind="detached", label=head[:SHORT_COMMIT_LENGTH])

    return RefState.unknown(error="HEAD too short for a commit id")


def find_git_entry(start: Path) -> Path | None:
    """Find the nearest `.git` directory or file at or above `start`.

    `start` is resolved first so that `..` components walk real ancestors.

    Returns:
        Path to the `.git` entry, or None if the filesystem root was reached
    """
    current = start.resolve()
    while True:
        candidate = current / ".git"
        if candidate.is_dir() or candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def resolve_gitdir(git_file: Path) -> Path | None:
    """Follow a linked worktree's `.git` file to its metadata directory.

    The file contains `gitdir: <path>`; a relative path is relative to the
    directory holding the `.git` file.

    Raises:
        OSError: If the file cannot be read
    """
    for line in git_file.read_text(encoding="utf-8").splitlines():
        if line.startswith(GITDIR_PREFIX):
            target = Path(line[len(GITDIR_PREFIX) :].strip())
            if not target.is_absolute():
                target = git_file.parent / target
            return target
    return None


def read_ref_state(repo_root: Path) -> RefState:
    """Resolve the current branch or commit of the working tree at `repo_root`.

    Args:
        repo_root: Any directory inside a working tree

    Returns:
        RefState for the nearest enclosing repository. Never raises.
    """
    try:
        git_entry = find_git_entry(repo_root)
        if git_entry is None:
            logger.debug("No .git found above %s", repo_root)
            return RefState.unknown()

        if git_entry.is_dir():
            git_dir = git_entry
        else:
            resolved = resolve_gitdir(git_entry)
            if resolved is None:
                return RefState.unknown(error=f"no gitdir line in {git_entry}")
            git_dir = resolved

        return parse_head((git_dir / "HEAD").read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read git metadata for %s: %s", repo_root, e)
        return RefState.unknown(error=str(e))
