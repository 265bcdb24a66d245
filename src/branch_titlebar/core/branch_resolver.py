"""Resolve a single branch label for a directory."""

import logging
from pathlib import Path

from branch_titlebar.core.refstore import read_ref_state
from branch_titlebar.gateway.git.abc import Git

logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT_SECONDS = 5.0


def resolve_branch(
    git: Git,
    repo_root: Path,
    *,
    timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS,
) -> str:
    """Get the branch label to display for `repo_root`.

    On-disk metadata is tried first. Only when it yields nothing usable is
    git itself asked, with a bounded wait.

    Args:
        git: Git gateway used for the command fallback
        repo_root: Directory inside the working tree
        timeout_seconds: Maximum wait for the git fallback

    Returns:
        Branch name or short commit id, or "" when no branch could be found
    """
    ref_state = read_ref_state(repo_root)
    if ref_state.is_resolved:
        return ref_state.label

    if ref_state.error is not None:
        logger.debug("Metadata unusable for %s (%s), asking git", repo_root, ref_state.error)

    branch = git.get_abbrev_ref(repo_root, timeout_seconds=timeout_seconds)
    if branch is None:
        return ""
    return branch.strip()
