"""Shared argument and wiring helpers for CLI commands."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from docdb_explorer.clients import get_document_client
from docdb_explorer.config import get_config
from docdb_explorer.models import MAX_PAGE_SIZE, CollectionMeta
from docdb_explorer.tree import CollectionTreeItem
from docdb_explorer.ui import ConsoleUserInterface, UserInterface
from docdb_explorer.utils.errors import (
    DocDBExplorerError,
    OperationCancelled,
    handle_error,
)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130


def add_collection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--database", required=True, help="Database id")
    parser.add_argument("--collection", required=True, help="Collection id")


def collection_link(database: str, collection: str) -> str:
    return f"dbs/{database}/colls/{collection}"


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None


def page_size_arg(value: str) -> int:
    """argparse type: documents per page, 1..MAX_PAGE_SIZE."""
    parsed = _parse_int(value)
    if not 1 <= parsed <= MAX_PAGE_SIZE:
        raise argparse.ArgumentTypeError(
            f"must be between 1 and {MAX_PAGE_SIZE}, got {parsed}"
        )
    return parsed


def non_negative_int(value: str) -> int:
    parsed = _parse_int(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {parsed}")
    return parsed


async def open_collection(
    args: argparse.Namespace, ui: UserInterface | None = None
) -> CollectionTreeItem:
    """Read the collection's metadata and build its tree node."""
    config = get_config()
    connection = config.connection_context()
    client = get_document_client(
        connection.endpoint, connection.credential, connection.is_emulator
    )
    meta: CollectionMeta = await client.read_collection(
        collection_link(args.database, args.collection)
    )
    page_size = getattr(args, "page_size", None) or config.page_size
    return CollectionTreeItem(
        connection,
        meta,
        ui or ConsoleUserInterface(assume_yes=getattr(args, "yes", False)),
        page_size=page_size,
        client_factory=get_document_client,
    )


def run_async(
    operation: str, handler: Callable[[], Awaitable[Any]], emit_result: Callable[[Any], None]
) -> int:
    """Run one command coroutine and map its outcome to an exit code."""
    try:
        result = asyncio.run(handler())
    except OperationCancelled as e:
        handle_error(e, operation)
        print("Cancelled.")
        return EXIT_CANCELLED
    except KeyboardInterrupt:
        print("Cancelled.")
        return EXIT_CANCELLED
    except DocDBExplorerError as e:
        print(handle_error(e, operation))
        return EXIT_ERROR
    emit_result(result)
    return EXIT_OK
