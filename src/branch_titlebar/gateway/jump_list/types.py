"""Types describing the recent-items presentation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class JumpListItem:
    """A single launchable entry.

    Attributes:
        target: Path opened when the entry is activated
        label: Text shown for the entry
        icon_source: Path the entry's icon is taken from
    """

    target: str
    label: str
    icon_source: str


@dataclass(frozen=True)
class JumpListCategory:
    """A titled, ordered group of entries."""

    title: str
    items: tuple[JumpListItem, ...]
