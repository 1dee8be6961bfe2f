"""
Pydantic models for docdb-explorer.

Provides data models for collections, connections and paging.
"""

from docdb_explorer.models.base import (
    DEFAULT_BATCH_SIZE,
    EMULATOR_ENDPOINT,
    EMULATOR_KEY,
    MAX_PAGE_SIZE,
    ConnectionContext,
    PageOptions,
)
from docdb_explorer.models.collection import CollectionMeta, PartitionKeyDefinition

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "EMULATOR_ENDPOINT",
    "EMULATOR_KEY",
    "MAX_PAGE_SIZE",
    "ConnectionContext",
    "PageOptions",
    "CollectionMeta",
    "PartitionKeyDefinition",
]
