"""
Unified error handling for docdb-explorer.
"""

import logging

logger = logging.getLogger(__name__)


class DocDBExplorerError(Exception):
    """Base exception for docdb-explorer errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}. {self.suggestion}"
        return self.message


class OperationCancelled(DocDBExplorerError):
    """The user declined a confirmation or dismissed a prompt."""

    def __init__(self, message: str = "Operation cancelled."):
        super().__init__(message)


class RemoteOperationError(DocDBExplorerError):
    """The database client reported a failure."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        suggestion: str | None = None,
    ):
        super().__init__(message, suggestion)
        self.status_code = status_code


class ConfigurationError(DocDBExplorerError):
    """Configuration error."""
    pass


def handle_error(error: Exception, operation: str = "operation") -> str:
    """
    Turn an exception into a message suitable for the user.

    Cancellation is expected control flow and is only logged at debug level.

    Args:
        error: The exception that occurred
        operation: Name of the operation that failed

    Returns:
        User-friendly error message with suggestions
    """
    if isinstance(error, OperationCancelled):
        logger.debug(f"{operation} cancelled by user")
        return str(error)

    logger.error(f"Error in {operation}: {error}")

    if isinstance(error, RemoteOperationError) and error.status_code is not None:
        return format_api_error(error.status_code, error.message)

    if isinstance(error, DocDBExplorerError):
        return f"Error: {error}"

    error_str = str(error).lower()
    error_type = type(error).__name__

    if "connection" in error_str or "timeout" in error_str:
        return (
            "Error: Could not connect to the database account. "
            "Please check COSMOS_ENDPOINT and that the emulator or account is reachable."
        )

    return f"Error in {operation}: {error_type} - {error}"


def format_api_error(status_code: int, message: str = "") -> str:
    """Format an API error with appropriate message."""
    error_messages = {
        400: "Bad request. Please check the document body.",
        401: "Authentication failed. Please check COSMOS_KEY.",
        403: "Access denied. You don't have permission to perform this action.",
        404: "Resource not found. Please check the database and collection ids.",
        409: "Conflict. A document with this id already exists.",
        429: "Request rate too large. Please wait before making more requests.",
        500: "Database service error. Please try again later.",
        503: "Database service unavailable. Please try again later.",
    }

    default_message = f"API error (status {status_code})"
    base_message = error_messages.get(status_code, default_message)

    if message:
        return f"Error: {base_message} Details: {message}"
    return f"Error: {base_message}"
