"""Tree node for a collection and the documents under it."""

from collections.abc import Callable
import logging
from typing import Any

from docdb_explorer.clients import (
    DocumentClient,
    DocumentPageIterator,
    get_document_client,
)
from docdb_explorer.models import (
    DEFAULT_BATCH_SIZE,
    CollectionMeta,
    ConnectionContext,
    PageOptions,
    PartitionKeyDefinition,
)
from docdb_explorer.tree.base import IconPath
from docdb_explorer.tree.document import DocumentTreeItem
from docdb_explorer.tree.loader import PaginatedChildLoader
from docdb_explorer.ui import DialogBoxResponses, UserInterface
from docdb_explorer.utils.errors import OperationCancelled
from docdb_explorer.utils.logging_config import PerformanceMonitor, log_operation

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, str, bool], DocumentClient]

CREATE_DOCUMENT_PROMPT = "Document ID"
CREATE_DOCUMENT_PLACEHOLDER = "Enter a unique document ID or leave blank for a generated ID"


class CollectionTreeItem:
    """
    A collection node.

    Documents are its children, loaded page by page. Stored procedures are
    not shown.
    """

    CONTEXT_VALUE = "cosmosDBDocumentCollection"
    context_value = CONTEXT_VALUE

    def __init__(
        self,
        connection: ConnectionContext,
        collection: CollectionMeta,
        ui: UserInterface,
        page_size: int = DEFAULT_BATCH_SIZE,
        client_factory: ClientFactory = get_document_client,
    ):
        """
        Args:
            connection: Account the collection lives in
            collection: Collection metadata from the SDK
            ui: Confirmation and input prompts
            page_size: Documents per loaded page
            client_factory: Builds a client from endpoint, key and emulator flag
        """
        self._connection = connection
        self._collection = collection
        self._ui = ui
        self._client_factory = client_factory
        self._loader: PaginatedChildLoader[
            DocumentClient, dict[str, Any], DocumentTreeItem
        ] = PaginatedChildLoader(
            get_client=self.get_document_client,
            get_iterator=self.get_iterator,
            wrap_child=self.wrap_child,
            page_size=page_size,
            name=f"documents of {collection.id}",
        )

    @property
    def id(self) -> str:
        return self._collection.id

    @property
    def label(self) -> str:
        return self._collection.id

    @property
    def icon_path(self) -> IconPath:
        return IconPath.theme_agnostic("Collection.svg")

    @property
    def link(self) -> str:
        return self._collection.self_link

    @property
    def partition_key(self) -> PartitionKeyDefinition | None:
        return self._collection.partition_key

    @property
    def loader(self) -> PaginatedChildLoader[DocumentClient, dict[str, Any], DocumentTreeItem]:
        return self._loader

    def get_document_client(self) -> DocumentClient:
        return self._client_factory(
            self._connection.endpoint,
            self._connection.credential,
            self._connection.is_emulator,
        )

    def get_iterator(
        self, client: DocumentClient, page_options: PageOptions
    ) -> DocumentPageIterator:
        return client.read_documents(self.link, page_options)

    def wrap_child(self, document: dict[str, Any]) -> DocumentTreeItem:
        return DocumentTreeItem(document, collection_id=self.id)

    def has_more_children(self) -> bool:
        return self._loader.has_more_children()

    async def load_more_children(self, clear_cache: bool) -> list[DocumentTreeItem]:
        with PerformanceMonitor(logger, "Load documents", collection=self.id):
            return await self._loader.load_more(clear_cache)

    async def delete_tree_item(self) -> None:
        """
        Delete this collection after confirmation.

        Raises:
            OperationCancelled: If the user does not confirm
            RemoteOperationError: If the delete request fails
        """
        message = f"Are you sure you want to delete collection '{self.label}' and its contents?"
        result = await self._ui.show_warning_message(
            message, DialogBoxResponses.YES, DialogBoxResponses.CANCEL, modal=True
        )
        if result != DialogBoxResponses.YES:
            log_operation(logger, "delete", self.id, "cancelled")
            raise OperationCancelled()

        client = self.get_document_client()
        await client.delete_collection(self.link)
        self._loader.reset_cache()
        log_operation(logger, "delete", self.id, "success")

    async def create_child(
        self, show_creating_placeholder: Callable[[str], None]
    ) -> DocumentTreeItem:
        """
        Create a document in this collection.

        An empty id lets the server side generate one.

        Args:
            show_creating_placeholder: Called with the id once creation starts

        Raises:
            OperationCancelled: If the prompt is dismissed
            RemoteOperationError: If the create request fails
        """
        document_id = await self._ui.show_input_box(
            CREATE_DOCUMENT_PROMPT, placeholder=CREATE_DOCUMENT_PLACEHOLDER
        )
        if document_id is None:
            log_operation(logger, "create", self.id, "cancelled")
            raise OperationCancelled()

        document_id = document_id.strip()
        show_creating_placeholder(document_id)

        body: dict[str, Any] = {"id": document_id} if document_id else {}
        client = self.get_document_client()
        document = await client.create_document(self.link, body)

        child = self.wrap_child(document)
        log_operation(logger, "create", self.id, "success", document=child.id)
        return child

    def pick_tree_item(self, expected_context_value: str) -> "CollectionTreeItem | None":
        if expected_context_value in (self.CONTEXT_VALUE, DocumentTreeItem.CONTEXT_VALUE):
            return self
        return None

    def __repr__(self) -> str:
        return f"CollectionTreeItem(id={self.id!r}, link={self.link!r})"
