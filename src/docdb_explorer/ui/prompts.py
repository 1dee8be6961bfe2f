"""
User interaction surface.

The tree never talks to a terminal or an editor directly; it asks a
``UserInterface`` for confirmations and free-text input.
"""

import asyncio
from collections.abc import Callable
from typing import Protocol, runtime_checkable


class DialogBoxResponses:
    """Labels of the confirmation dialog choices."""

    YES = "Yes"
    CANCEL = "Cancel"


@runtime_checkable
class UserInterface(Protocol):
    """Modal confirmations and input prompts provided by the host."""

    async def show_warning_message(
        self, message: str, *choices: str, modal: bool = True
    ) -> str | None:
        """Return the chosen label, or None when the dialog is dismissed."""
        ...

    async def show_input_box(self, prompt: str, placeholder: str = "") -> str | None:
        """Return the entered text (possibly empty), or None when dismissed."""
        ...


class ConsoleUserInterface:
    """
    Terminal implementation of ``UserInterface``.

    End of input and Ctrl-C count as dismissing the prompt.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        assume_yes: bool = False,
    ):
        self._input = input_func or input
        self.assume_yes = assume_yes

    async def _read(self, prompt: str) -> str | None:
        try:
            return await asyncio.to_thread(self._input, prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    async def show_warning_message(
        self, message: str, *choices: str, modal: bool = True
    ) -> str | None:
        if not choices:
            return None
        if self.assume_yes:
            return choices[0]

        options = "/".join(choices)
        answer = await self._read(f"{message} [{options}] ")
        if answer is None:
            return None

        answer = answer.strip().lower()
        for choice in choices:
            if answer and choice.lower().startswith(answer):
                return choice
        return None

    async def show_input_box(self, prompt: str, placeholder: str = "") -> str | None:
        hint = f" ({placeholder})" if placeholder else ""
        return await self._read(f"{prompt}{hint}: ")
