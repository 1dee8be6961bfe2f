"""Tree nodes for browsing collections and their documents."""

from docdb_explorer.tree.base import IconPath, ParentTreeItem, TreeItem
from docdb_explorer.tree.collection import CollectionTreeItem
from docdb_explorer.tree.document import DocumentTreeItem
from docdb_explorer.tree.loader import (
    LoaderState,
    PageIterator,
    PaginatedChildLoader,
    load_all,
)

__all__ = [
    "IconPath",
    "ParentTreeItem",
    "TreeItem",
    "CollectionTreeItem",
    "DocumentTreeItem",
    "LoaderState",
    "PageIterator",
    "PaginatedChildLoader",
    "load_all",
]
