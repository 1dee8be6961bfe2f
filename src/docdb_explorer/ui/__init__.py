"""User interaction primitives."""

from docdb_explorer.ui.prompts import (
    ConsoleUserInterface,
    DialogBoxResponses,
    UserInterface,
)

__all__ = ["ConsoleUserInterface", "DialogBoxResponses", "UserInterface"]
