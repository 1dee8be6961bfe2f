"""
Cosmos DB (SQL API) client wrapper.

Provides an async-compatible wrapper around azure-cosmos with link-based
addressing and unified error handling.
"""

import asyncio
from collections.abc import Callable, Iterable, Iterator
import logging
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos import CosmosClient
from azure.cosmos.container import ContainerProxy

from docdb_explorer.models import CollectionMeta, PageOptions
from docdb_explorer.utils.errors import RemoteOperationError

logger = logging.getLogger(__name__)


def parse_collection_link(link: str) -> tuple[str, str]:
    """
    Split a collection link into its database and collection parts.

    Both id-based (``dbs/mydb/colls/mycoll``) and rid-based self links
    (``dbs/AbCd==/colls/AbCdEf==/``) are accepted.

    Raises:
        ValueError: If the link is not a collection link
    """
    segments = [segment for segment in link.strip().strip("/").split("/") if segment]
    if len(segments) != 4 or segments[0] != "dbs" or segments[2] != "colls":
        raise ValueError(f"Not a collection link: {link!r}")
    return segments[1], segments[3]


def _remote_error(action: str, link: str, error: AzureError) -> RemoteOperationError:
    status_code = getattr(error, "status_code", None)
    message = getattr(error, "message", None) or str(error)
    return RemoteOperationError(
        f"Failed to {action} ({link}): {message}", status_code=status_code
    )


PageSource = Callable[[], Iterator[Iterable[dict[str, Any]]]]


class DocumentPageIterator:
    """
    Server-side document iterator, fetched one page at a time.

    Wraps the SDK's page iterator, which is opened on the first fetch. The
    continuation token is owned by the SDK; once it reports no continuation,
    ``has_more_results`` turns False and further calls return an empty page
    without a request.
    """

    def __init__(self, open_pages: PageSource, link: str):
        self._open_pages = open_pages
        self._pages: Iterator[Iterable[dict[str, Any]]] | None = None
        self._link = link
        self._has_more = True

    @property
    def has_more_results(self) -> bool:
        return self._has_more

    @property
    def continuation(self) -> str | None:
        return getattr(self._pages, "continuation_token", None)

    async def next_page(self) -> list[dict[str, Any]]:
        """
        Fetch the next page of documents.

        Returns:
            Documents in server order (empty when the feed is drained)

        Raises:
            RemoteOperationError: If the request fails
        """
        if not self._has_more:
            return []
        try:
            return await asyncio.to_thread(self._fetch_page)
        except AzureError as e:
            raise _remote_error("read documents", self._link, e) from e

    def _fetch_page(self) -> list[dict[str, Any]]:
        if self._pages is None:
            self._pages = self._open_pages()

        # StopIteration must not cross the thread boundary into a future
        try:
            page = next(self._pages)
        except StopIteration:
            self._has_more = False
            return []

        documents = list(page)
        if self.continuation is None:
            self._has_more = False
        return documents


class DocumentClient:
    """
    Async-compatible wrapper around azure-cosmos.

    Resources are addressed by link, as the tree hands them around. The SDK
    client is created on first use, inside a worker thread, since building
    it reads the database account over the network.
    """

    def __init__(self, endpoint: str, credential: str, is_emulator: bool = False):
        """
        Initialize the document client.

        Args:
            endpoint: Account endpoint URL
            credential: Account master key
            is_emulator: Whether the endpoint is the local emulator
        """
        self.endpoint = endpoint
        self.credential = credential
        self.is_emulator = is_emulator
        self._client: CosmosClient | None = None

    @property
    def client(self) -> CosmosClient:
        """Get or create the azure-cosmos client (blocking)."""
        if self._client is None:
            kwargs: dict[str, Any] = {}
            if self.is_emulator:
                # The emulator serves a self-signed certificate
                kwargs["connection_verify"] = False
            self._client = CosmosClient(self.endpoint, self.credential, **kwargs)
        return self._client

    def _container(self, link: str) -> ContainerProxy:
        database_id, collection_id = parse_collection_link(link)
        return self.client.get_database_client(database_id).get_container_client(
            collection_id
        )

    def read_documents(
        self, link: str, page_options: PageOptions | None = None
    ) -> DocumentPageIterator:
        """
        Open a paged read over every document in a collection.

        No request is made until the first page is fetched; connection
        failures surface from ``next_page``.

        Args:
            link: Collection link
            page_options: Page size and optional continuation token
        """
        options = page_options or PageOptions()

        def open_pages() -> Iterator[Iterable[dict[str, Any]]]:
            items = self._container(link).read_all_items(
                max_item_count=options.max_item_count
            )
            return items.by_page(options.continuation)

        return DocumentPageIterator(open_pages, link)

    async def create_document(
        self, link: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Create a document in a collection.

        A body without an ``id`` gets a generated one.

        Args:
            link: Collection link
            body: Document body

        Returns:
            The created document as stored by the server

        Raises:
            RemoteOperationError: If the request fails
        """
        try:
            return await asyncio.to_thread(
                lambda: self._container(link).create_item(
                    body=body, enable_automatic_id_generation="id" not in body
                )
            )
        except AzureError as e:
            raise _remote_error("create document", link, e) from e

    async def delete_collection(self, link: str) -> None:
        """
        Delete a collection and all of its documents.

        Raises:
            RemoteOperationError: If the request fails
        """
        database_id, collection_id = parse_collection_link(link)
        try:
            await asyncio.to_thread(
                lambda: self.client.get_database_client(database_id).delete_container(
                    collection_id
                )
            )
        except AzureError as e:
            raise _remote_error("delete collection", link, e) from e
        logger.debug(f"Deleted collection {link}")

    async def read_collection(self, link: str) -> CollectionMeta:
        """
        Read a collection's metadata.

        Raises:
            RemoteOperationError: If the request fails
        """
        try:
            properties = await asyncio.to_thread(lambda: self._container(link).read())
        except AzureError as e:
            raise _remote_error("read collection", link, e) from e
        return CollectionMeta.model_validate(properties)


def get_document_client(
    endpoint: str, credential: str, is_emulator: bool = False
) -> DocumentClient:
    """Build a client for one database account."""
    return DocumentClient(endpoint, credential, is_emulator=is_emulator)
