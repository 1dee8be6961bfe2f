"""
Tree host contract.

The host (an editor tree view, or the CLI) only relies on these members.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

ICONS_DIR = Path(__file__).resolve().parent.parent / "resources" / "icons"


@dataclass(frozen=True)
class IconPath:
    """Icon files for light and dark themes."""

    light: Path
    dark: Path

    @classmethod
    def theme_agnostic(cls, filename: str) -> "IconPath":
        icon = ICONS_DIR / filename
        return cls(light=icon, dark=icon)


@runtime_checkable
class TreeItem(Protocol):
    """A node shown in the tree."""

    @property
    def id(self) -> str: ...

    @property
    def label(self) -> str: ...

    @property
    def icon_path(self) -> IconPath: ...

    @property
    def context_value(self) -> str: ...


@runtime_checkable
class ParentTreeItem(TreeItem, Protocol):
    """A node with lazily loaded children."""

    def has_more_children(self) -> bool: ...

    async def load_more_children(self, clear_cache: bool) -> Sequence[TreeItem]: ...

    async def delete_tree_item(self) -> None: ...

    async def create_child(
        self, show_creating_placeholder: Callable[[str], None]
    ) -> TreeItem: ...
