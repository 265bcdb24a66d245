"""Production Git implementation using subprocess."""

import logging
import subprocess
from pathlib import Path

from branch_titlebar.gateway.git.abc import Git

logger = logging.getLogger(__name__)

# Printed by rev-parse --abbrev-ref when HEAD is detached
DETACHED_PLACEHOLDER = "HEAD"


class RealGit(Git):
    """Runs the git binary found on PATH."""

    def get_abbrev_ref(self, cwd: Path, *, timeout_seconds: float) -> str | None:
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--abbrev-ref", "HEAD"],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
                timeout=timeout_seconds,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("git rev-parse failed to run in %s: %s", cwd, e)
            return None

        if result.returncode != 0:
            logger.debug("git rev-parse exited %d in %s", result.returncode, cwd)
            return None

        branch = result.stdout.strip()
        if not branch or branch == DETACHED_PLACEHOLDER:
            return None

        return branch
