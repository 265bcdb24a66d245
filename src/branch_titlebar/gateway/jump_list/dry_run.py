"""Dry-run JumpList implementation."""

from branch_titlebar.gateway.jump_list.abc import JumpList
from branch_titlebar.gateway.jump_list.types import JumpListCategory
from branch_titlebar.output import user_output


class DryRunJumpList(JumpList):
    """No-op wrapper that prints the presentation instead of publishing it."""

    def __init__(self, wrapped: JumpList) -> None:
        self._wrapped = wrapped

    def submit(self, categories: tuple[JumpListCategory, ...]) -> None:
        user_output("[DRY RUN] Would publish recent items:")
        for category in categories:
            user_output(f"  {category.title}")
            for item in category.items:
                user_output(f"    {item.label} -> {item.target}")
