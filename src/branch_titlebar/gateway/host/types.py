"""Types describing the host's active project."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ActiveProject:
    """The project currently open in the host.

    Attributes:
        identifier: Short name shown in the window title (e.g., "App")
        project_path: Path recorded in the recent-items list
        repo_root: Directory branch resolution starts from
    """

    identifier: str
    project_path: Path
    repo_root: Path
