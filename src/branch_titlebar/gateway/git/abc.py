"""Abstract interface for the git command fallback.

Branch resolution reads .git metadata directly from disk and only shells out
to git when that metadata is missing or ambiguous. This gateway isolates the
subprocess so the resolver can be tested without a git binary.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git subprocess queries.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def get_abbrev_ref(self, cwd: Path, *, timeout_seconds: float) -> str | None:
        """Get the abbreviated name of the current ref.

        Equivalent to `git rev-parse --abbrev-ref HEAD` run in `cwd`.

        Args:
            cwd: Directory to run git in
            timeout_seconds: Maximum time to wait for git to exit

        Returns:
            The trimmed ref name, or None if git is missing, timed out, exited
            non-zero, printed nothing, or printed the detached placeholder "HEAD"
        """
        ...
