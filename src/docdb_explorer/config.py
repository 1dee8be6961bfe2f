"""
Configuration management for docdb-explorer.

Loads settings from environment variables and .env files.
Priority: Environment vars > .env file > defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from docdb_explorer.models import (
    DEFAULT_BATCH_SIZE,
    EMULATOR_ENDPOINT,
    EMULATOR_KEY,
    MAX_PAGE_SIZE,
    ConnectionContext,
)
from docdb_explorer.utils.errors import ConfigurationError

# Global config singleton
_config: Optional[Config] = None


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes")


class Config(BaseModel):
    """Application configuration loaded from environment."""

    # Account
    cosmos_endpoint: str = Field(default="")
    cosmos_key: str = Field(default="", repr=False)
    cosmos_is_emulator: bool = Field(default=False)

    # Paging
    page_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=1, le=MAX_PAGE_SIZE)

    # Logging
    log_level: str = Field(default="INFO")
    debug: bool = Field(default=False)

    @classmethod
    def from_env(cls) -> Config:
        """
        Create config from environment variables.

        Raises:
            ConfigurationError: If a value cannot be parsed or is out of range
        """
        is_emulator = _env_flag("COSMOS_IS_EMULATOR")
        default_endpoint = EMULATOR_ENDPOINT if is_emulator else ""
        default_key = EMULATOR_KEY if is_emulator else ""

        raw_page_size = os.getenv("COSMOS_PAGE_SIZE", str(DEFAULT_BATCH_SIZE))
        try:
            return cls(
                cosmos_endpoint=os.getenv("COSMOS_ENDPOINT", default_endpoint),
                cosmos_key=os.getenv("COSMOS_KEY", default_key),
                cosmos_is_emulator=is_emulator,
                page_size=int(raw_page_size),
                log_level=os.getenv("LOG_LEVEL", "INFO"),
                debug=_env_flag("DEBUG"),
            )
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(
                f"Invalid COSMOS_PAGE_SIZE: {raw_page_size!r}",
                suggestion=f"Use an integer between 1 and {MAX_PAGE_SIZE}",
            ) from e

    @classmethod
    def load(cls, env_file: str = ".env") -> Config:
        """Load config from .env file, then environment variables."""
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)

        return cls.from_env()

    @property
    def has_credentials(self) -> bool:
        """Whether an endpoint and key are configured."""
        return bool(self.cosmos_endpoint and self.cosmos_key)

    def connection_context(self) -> ConnectionContext:
        """
        Build the connection context for the configured account.

        Raises:
            ConfigurationError: If endpoint or key is missing
        """
        if not self.has_credentials:
            raise ConfigurationError(
                "No database account configured",
                suggestion="Set COSMOS_ENDPOINT and COSMOS_KEY, or COSMOS_IS_EMULATOR=true",
            )
        return ConnectionContext(
            endpoint=self.cosmos_endpoint,
            credential=self.cosmos_key,
            is_emulator=self.cosmos_is_emulator,
        )


def get_config() -> Config:
    """Get or create the global config singleton."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Reset the global config (for testing)."""
    global _config
    _config = None
