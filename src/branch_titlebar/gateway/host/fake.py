"""Fake ProjectHost implementation for testing."""

from branch_titlebar.gateway.host.abc import ProjectHost
from branch_titlebar.gateway.host.types import ActiveProject


class FakeProjectHost(ProjectHost):
    """In-memory host with a fixed project and caption.

    This class has NO public setup methods beyond constructor.
    """

    def __init__(
        self,
        *,
        project: ActiveProject | None = None,
        window_caption: str | None = None,
    ) -> None:
        self._project = project
        self._window_caption = window_caption

    def get_active_project(self) -> ActiveProject | None:
        return self._project

    def get_window_caption(self) -> str | None:
        return self._window_caption
