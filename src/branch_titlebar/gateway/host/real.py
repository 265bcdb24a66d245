"""Production ProjectHost backed by a project path on disk."""

from pathlib import Path

from branch_titlebar.gateway.host.abc import ProjectHost
from branch_titlebar.gateway.host.types import ActiveProject


class FileProjectHost(ProjectHost):
    """Host whose single project is a file or directory on disk.

    A project file (e.g. `App.sln`, `app.code-workspace`) is identified by its
    name without extension and resolved from its containing directory. A
    project directory is identified by its name and is its own root.

    The path is resolved on every lookup, so one project reached through
    different relative paths yields the same ActiveProject.
    """

    def __init__(self, project_path: Path, *, window_caption: str | None = None) -> None:
        self._project_path = project_path
        self._window_caption = window_caption

    def get_active_project(self) -> ActiveProject | None:
        path = self._project_path.resolve()
        if path.is_dir():
            return ActiveProject(identifier=path.name, project_path=path, repo_root=path)
        if path.is_file():
            return ActiveProject(identifier=path.stem, project_path=path, repo_root=path.parent)
        return None

    def get_window_caption(self) -> str | None:
        if self._window_caption is not None:
            return self._window_caption
        project = self.get_active_project()
        if project is None:
            return None
        return project.identifier
