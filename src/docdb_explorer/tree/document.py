"""Tree node for a single document."""

from collections.abc import Mapping
import copy
from typing import Any

from docdb_explorer.models import PartitionKeyDefinition
from docdb_explorer.tree.base import IconPath


class DocumentTreeItem:
    """
    One document under a collection.

    The parent relation is the owning collection's id only; the node holds
    no reference to the collection node.
    """

    CONTEXT_VALUE = "cosmosDBDocument"
    context_value = CONTEXT_VALUE

    def __init__(self, document: Mapping[str, Any], collection_id: str):
        if "id" not in document:
            raise ValueError("Document record has no 'id' field")
        self._document = dict(document)
        self.collection_id = collection_id

    @property
    def id(self) -> str:
        return str(self._document["id"])

    @property
    def label(self) -> str:
        return self.id

    @property
    def icon_path(self) -> IconPath:
        return IconPath.theme_agnostic("Document.svg")

    @property
    def document(self) -> dict[str, Any]:
        return copy.deepcopy(self._document)

    def partition_key_value(self, definition: PartitionKeyDefinition | None) -> Any:
        if definition is None:
            return None
        return definition.extract_value(self._document)

    def __repr__(self) -> str:
        return f"DocumentTreeItem(id={self.id!r}, collection_id={self.collection_id!r})"
