"""
Logging setup for docdb-explorer.

The CLI installs a console handler on the root logger at startup; with
``--debug`` the package logger also writes to a rotating file under
``LOG_DIR``. Tree nodes report their operations through ``log_operation``
and time page loads with ``PerformanceMonitor``.
"""

from datetime import datetime
import logging
import logging.handlers
import os
from pathlib import Path
import sys
from typing import Any

LOG_DIR = Path.home() / ".cache" / "docdb-explorer" / "logs"

CONSOLE_FORMAT = "%(name)s %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def get_log_level() -> int:
    """
    Resolve the log level from LOG_LEVEL, falling back to the DEBUG flag.

    Unknown LOG_LEVEL values are ignored.
    """
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "").upper())
    if isinstance(level, int):
        return level
    if os.getenv("DEBUG", "").lower() in ("true", "1", "yes"):
        return logging.DEBUG
    return logging.INFO


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(level: int) -> logging.Handler:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / f"docdb-explorer-{datetime.now():%Y-%m-%d}.log"
    handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(
    name: str,
    level: int | None = None,
    console: bool = True,
    file: bool = True,
) -> logging.Logger:
    """
    Give a logger its own console and rotating file handlers.

    Existing handlers are replaced, so calling this again reconfigures the
    logger rather than duplicating output.

    Args:
        name: Logger name
        level: Log level (defaults to get_log_level())
        console: Add a stderr handler
        file: Add a rotating file handler under LOG_DIR
    """
    resolved = level or get_log_level()
    logger = logging.getLogger(name)
    logger.setLevel(resolved)
    logger.handlers.clear()
    logger.propagate = False

    if console:
        logger.addHandler(_console_handler(resolved))
    if file:
        logger.addHandler(_file_handler(resolved))
    return logger


def log_operation(
    logger: logging.Logger,
    operation: str,
    resource_id: str,
    status: str,
    **details: Any,
) -> None:
    """
    Log one tree operation as ``[OPERATION] id - status (details)``.

    Successes go to INFO, errors to ERROR, anything else (cancellations)
    to DEBUG.
    """
    msg = f"[{operation.upper()}] {resource_id} - {status}"
    if details:
        msg += " (" + ", ".join(f"{k}={v}" for k, v in details.items()) + ")"

    if status == "success":
        logger.info(msg)
    elif status == "error":
        logger.error(msg)
    else:
        logger.debug(msg)


class PerformanceMonitor:
    """
    Context manager that logs how long a block took.

    Example:
        >>> with PerformanceMonitor(logger, "Load documents", collection="orders"):
        ...     await node.load_more_children(False)
    """

    def __init__(
        self,
        logger: logging.Logger,
        operation_name: str,
        log_level: int = logging.DEBUG,
        **metadata: Any,
    ) -> None:
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.metadata = metadata
        self.start_time: datetime | None = None

    def __enter__(self) -> "PerformanceMonitor":
        self.start_time = datetime.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is None:
            return

        elapsed = (datetime.now() - self.start_time).total_seconds()
        outcome = "failed after" if exc_type is not None else "completed in"
        msg = f"{self.operation_name} {outcome} {elapsed:.2f}s"
        if self.metadata:
            msg += " (" + ", ".join(f"{k}={v}" for k, v in self.metadata.items()) + ")"

        self.logger.log(self.log_level, msg)


def initialize_logging(level: int | None = None) -> None:
    """Install a single console handler on the root logger."""
    resolved = level or get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(resolved))

    logging.getLogger(__name__).debug(
        f"Logging initialized. Level: {logging.getLevelName(resolved)}"
    )
