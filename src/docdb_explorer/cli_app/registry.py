"""CLI parser and dispatch registry."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from docdb_explorer.cli_app.commands import collections, documents, system

CommandRunner = Callable[[argparse.Namespace], int]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docdb-explorer",
        description="Browse DocumentDB collections from the command line",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    registrars: tuple[Callable[[argparse._SubParsersAction], None], ...] = (
        system.register,
        documents.register,
        collections.register,
    )
    for register in registrars:
        register(subparsers)

    return parser


def dispatch(args: argparse.Namespace) -> int:
    command_handlers: dict[str, CommandRunner] = {
        "config": system.run,
        "documents": documents.run,
        "collections": collections.run,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        raise ValueError(f"Unknown command: {args.command}")
    return handler(args)
