from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[[str, str], Path]:
    """Create a working tree under tmp_path with the given HEAD content.

    Returns a factory taking (name, head_content) and returning the
    working tree root.
    """

    def factory(name: str, head_content: str) -> Path:
        root = tmp_path / name
        git_dir = root / ".git"
        git_dir.mkdir(parents=True)
        (git_dir / "HEAD").write_text(head_content, encoding="utf-8")
        return root

    return factory
