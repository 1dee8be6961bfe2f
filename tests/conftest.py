from unittest.mock import AsyncMock, MagicMock

import pytest

from docdb_explorer.clients import DocumentClient
from docdb_explorer.models import CollectionMeta, ConnectionContext


class FakePageIterator:
    """In-memory stand-in for a server-side page iterator."""

    def __init__(self, pages):
        self._pages = [list(page) for page in pages]
        self.calls = 0

    @property
    def has_more_results(self):
        return self.calls < len(self._pages)

    async def next_page(self):
        self.calls += 1
        if self.calls > len(self._pages):
            return []
        return self._pages[self.calls - 1]


def make_documents(count, prefix="doc"):
    return [{"id": f"{prefix}{i}", "value": i} for i in range(count)]


@pytest.fixture
def connection():
    return ConnectionContext(
        endpoint="https://example.documents.azure.com:443/",
        credential="secret-key",
        is_emulator=False,
    )


@pytest.fixture
def collection_meta():
    return CollectionMeta.model_validate(
        {
            "id": "orders",
            "_self": "dbs/shop/colls/orders/",
            "_rid": "AbCdEf==",
            "partitionKey": {"paths": ["/customer/id"], "kind": "Hash"},
        }
    )


@pytest.fixture
def mock_client():
    """Fixture for DocumentClient mock."""
    client = MagicMock(spec=DocumentClient)
    client.create_document = AsyncMock(
        return_value={"id": "generated-id", "_rid": "xyz"}
    )
    client.delete_collection = AsyncMock(return_value=None)
    client.read_collection = AsyncMock()
    client.read_documents = MagicMock(
        side_effect=lambda link, options: FakePageIterator(
            [make_documents(3), make_documents(2, prefix="late")]
        )
    )
    return client


@pytest.fixture
def client_factory(mock_client):
    return MagicMock(return_value=mock_client)


@pytest.fixture
def mock_ui():
    """Fixture for UserInterface mock."""
    ui = MagicMock()
    ui.show_warning_message = AsyncMock(return_value="Yes")
    ui.show_input_box = AsyncMock(return_value="")
    return ui


@pytest.fixture
def page_iterator_cls():
    return FakePageIterator


@pytest.fixture
def documents_factory():
    return make_documents
