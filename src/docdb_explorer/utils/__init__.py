"""Shared utilities: error taxonomy and logging configuration."""

from docdb_explorer.utils.errors import (
    ConfigurationError,
    DocDBExplorerError,
    OperationCancelled,
    RemoteOperationError,
    format_api_error,
    handle_error,
)

__all__ = [
    "ConfigurationError",
    "DocDBExplorerError",
    "OperationCancelled",
    "RemoteOperationError",
    "format_api_error",
    "handle_error",
]
