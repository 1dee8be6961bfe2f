"""
Database clients.

This module provides the async wrapper used to talk to the document database.
"""

from docdb_explorer.clients.cosmos_client import (
    DocumentClient,
    DocumentPageIterator,
    get_document_client,
    parse_collection_link,
)

__all__ = [
    "DocumentClient",
    "DocumentPageIterator",
    "get_document_client",
    "parse_collection_link",
]
