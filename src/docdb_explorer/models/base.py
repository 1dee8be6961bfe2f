"""
Base Pydantic models for docdb-explorer.

Provides connection and paging parameters shared across the library.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BATCH_SIZE = 50
MAX_PAGE_SIZE = 1000

# Well-known local emulator account (published by the emulator itself)
EMULATOR_ENDPOINT = "https://localhost:8081/"
EMULATOR_KEY = (
    "C2y6yDjf5/R+ob0N8A7Cgv30VRDJIWEHLM+4QDU5DE2nQ9nDuVTqobD4b8mGGyPMbIZnqyMsEcaGQy67XIw/Jw=="
)


class ConnectionContext(BaseModel):
    """Everything needed to build a client for one database account.

    No client object is kept here; callers construct one per operation.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    endpoint: str = Field(..., min_length=1, description="Account endpoint URL")
    credential: str = Field(..., repr=False, description="Account master key")
    is_emulator: bool = Field(
        default=False, description="Whether the endpoint is the local emulator"
    )


class PageOptions(BaseModel):
    """Feed options for a paged document query."""

    model_config = ConfigDict(frozen=True)

    max_item_count: int = Field(
        default=DEFAULT_BATCH_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Maximum number of documents per page (1-1000)",
    )
    continuation: str | None = Field(
        default=None, description="Opaque continuation token to resume from"
    )
