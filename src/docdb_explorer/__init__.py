"""
docdb-explorer.

Tree nodes for browsing DocumentDB-style collections: paged document
listing, document creation and confirmed collection deletion.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("docdb-explorer")
except PackageNotFoundError:
    __version__ = "unknown"

from .tree import CollectionTreeItem, DocumentTreeItem, PaginatedChildLoader
from .utils.errors import OperationCancelled, RemoteOperationError

__all__ = [
    "__version__",
    "CollectionTreeItem",
    "DocumentTreeItem",
    "PaginatedChildLoader",
    "OperationCancelled",
    "RemoteOperationError",
]
