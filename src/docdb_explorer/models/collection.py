"""
Collection models.

Represents collection metadata as returned by the database SDK.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PartitionKeyDefinition(BaseModel):
    """Declared partition key of a collection."""

    model_config = ConfigDict(frozen=True, extra="allow")

    paths: list[str] = Field(..., min_length=1, description="Partition key paths")
    kind: str = Field(default="Hash", description="Partitioning scheme")
    version: int | None = Field(default=None, description="Partition key version")

    @property
    def path(self) -> str:
        return self.paths[0]

    def extract_value(self, document: Mapping[str, Any]) -> Any:
        """Return the partition key value of ``document``, or None if absent."""
        current: Any = document
        for segment in self.path.strip("/").split("/"):
            if not isinstance(current, Mapping) or segment not in current:
                return None
            current = current[segment]
        return current


class CollectionMeta(BaseModel):
    """Metadata for one collection.

    Immutable once constructed. Unknown SDK fields (``_rid``, ``_etag``,
    indexing policy, ...) are kept as extras.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str = Field(..., min_length=1, description="Collection id")
    self_link: str = Field(
        ..., alias="_self", min_length=1, description="Server-assigned self link"
    )
    partition_key: PartitionKeyDefinition | None = Field(
        default=None, alias="partitionKey", description="Partition key definition"
    )

    @property
    def raw_data(self) -> dict[str, Any]:
        """Metadata in the SDK's own field naming."""
        return self.model_dump(by_alias=True, exclude_none=True)
