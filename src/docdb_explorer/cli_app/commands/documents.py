"""Document commands: list and create."""

from __future__ import annotations

import argparse
from typing import Any

from docdb_explorer.cli_app.common import (
    add_collection_args,
    non_negative_int,
    open_collection,
    page_size_arg,
    run_async,
)
from docdb_explorer.cli_app.output import add_output_arg, emit
from docdb_explorer.tree import load_all
from docdb_explorer.ui import ConsoleUserInterface


def register(subparsers: argparse._SubParsersAction) -> None:
    documents = subparsers.add_parser("documents", help="Document operations")
    doc_sub = documents.add_subparsers(dest="subcommand", required=True)

    list_cmd = doc_sub.add_parser("list", help="List documents in a collection")
    add_collection_args(list_cmd)
    list_cmd.add_argument(
        "--pages",
        type=non_negative_int,
        default=1,
        help="Number of pages to load; 0 loads everything (default: 1)",
    )
    list_cmd.add_argument(
        "--page-size",
        type=page_size_arg,
        help="Documents per page, 1-1000 (default: from config)",
    )
    list_cmd.add_argument(
        "--full", action="store_true", help="Print full documents instead of ids"
    )
    add_output_arg(list_cmd)

    create = doc_sub.add_parser("create", help="Create a document")
    add_collection_args(create)
    create.add_argument(
        "--id",
        dest="document_id",
        help="Document id; an empty value requests a generated id "
        "(prompted for when omitted)",
    )
    add_output_arg(create)


async def _list_documents(args: argparse.Namespace) -> dict[str, Any]:
    node = await open_collection(args)
    documents = await load_all(
        node.load_more_children,
        node.has_more_children,
        max_pages=args.pages or None,
    )
    return {
        "collection": node.id,
        "count": len(documents),
        "has_more": node.has_more_children(),
        "documents": [doc.document if args.full else doc.id for doc in documents],
    }


class _PresetInput(ConsoleUserInterface):
    """Answers the id prompt with a value given on the command line."""

    def __init__(self, value: str):
        super().__init__()
        self._value = value

    async def show_input_box(self, prompt: str, placeholder: str = "") -> str | None:
        return self._value


async def _create_document(args: argparse.Namespace) -> dict[str, Any]:
    ui = None if args.document_id is None else _PresetInput(args.document_id)
    node = await open_collection(args, ui=ui)
    document = await node.create_child(
        lambda document_id: print(f"Creating document '{document_id or '<generated>'}'...")
    )
    return {"collection": node.id, "created": document.id}


def run(args: argparse.Namespace) -> int:
    handlers = {
        "list": lambda: _list_documents(args),
        "create": lambda: _create_document(args),
    }
    return run_async(
        f"documents {args.subcommand}",
        handlers[args.subcommand],
        lambda payload: emit(args, payload),
    )
