"""Collection commands."""

from __future__ import annotations

import argparse
from typing import Any

from docdb_explorer.cli_app.common import add_collection_args, open_collection, run_async
from docdb_explorer.cli_app.output import add_output_arg, emit


def register(subparsers: argparse._SubParsersAction) -> None:
    collections = subparsers.add_parser("collections", help="Collection operations")
    col_sub = collections.add_subparsers(dest="subcommand", required=True)

    delete = col_sub.add_parser("delete", help="Delete a collection and its documents")
    add_collection_args(delete)
    delete.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    add_output_arg(delete)


async def _delete_collection(args: argparse.Namespace) -> dict[str, Any]:
    node = await open_collection(args)
    await node.delete_tree_item()
    return {"collection": node.id, "deleted": True}


def run(args: argparse.Namespace) -> int:
    handlers = {
        "delete": lambda: _delete_collection(args),
    }
    return run_async(
        f"collections {args.subcommand}",
        handlers[args.subcommand],
        lambda payload: emit(args, payload),
    )
