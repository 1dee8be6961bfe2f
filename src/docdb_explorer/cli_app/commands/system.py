"""System commands: configuration display."""

from __future__ import annotations

import argparse

from docdb_explorer.cli_app.output import add_output_arg, emit
from docdb_explorer.config import get_config


def obfuscate_sensitive_value(value: str | None, keep_chars: int = 4) -> str | None:
    """Obfuscate sensitive values by showing only the first few characters."""
    if not value or not isinstance(value, str):
        return value
    if len(value) <= keep_chars:
        return "*" * len(value)
    return value[:keep_chars] + "*" * (len(value) - keep_chars)


def obfuscate_config_for_display(config: dict) -> dict:
    """Create a copy of config with sensitive values obfuscated."""
    obfuscated = config.copy()
    for key in ("cosmos_key",):
        if key in obfuscated:
            obfuscated[key] = obfuscate_sensitive_value(obfuscated[key])
    return obfuscated


def register(subparsers: argparse._SubParsersAction) -> None:
    config = subparsers.add_parser("config", help="Configuration")
    config_sub = config.add_subparsers(dest="subcommand", required=True)

    show = config_sub.add_parser("show", help="Show the effective configuration")
    add_output_arg(show)


def run(args: argparse.Namespace) -> int:
    config = get_config()
    payload = obfuscate_config_for_display(config.model_dump())
    payload["has_credentials"] = config.has_credentials
    emit(args, payload)
    return 0
