"""Tests for the console user interface."""

import threading

import pytest

from docdb_explorer.ui import ConsoleUserInterface, DialogBoxResponses, UserInterface


def _answers(*values):
    queue = list(values)

    def fake_input(prompt):
        value = queue.pop(0)
        if isinstance(value, BaseException):
            raise value
        return value

    return fake_input


def test_console_satisfies_protocol():
    assert isinstance(ConsoleUserInterface(), UserInterface)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "answer,expected",
    [
        ("y", DialogBoxResponses.YES),
        ("Yes", DialogBoxResponses.YES),
        ("c", DialogBoxResponses.CANCEL),
        ("nope", None),
        ("", None),
    ],
)
async def test_warning_message_choices(answer, expected):
    ui = ConsoleUserInterface(input_func=_answers(answer))

    result = await ui.show_warning_message(
        "Delete?", DialogBoxResponses.YES, DialogBoxResponses.CANCEL
    )

    assert result == expected


@pytest.mark.asyncio
async def test_warning_message_assume_yes():
    ui = ConsoleUserInterface(input_func=_answers(), assume_yes=True)

    result = await ui.show_warning_message(
        "Delete?", DialogBoxResponses.YES, DialogBoxResponses.CANCEL
    )

    assert result == DialogBoxResponses.YES


@pytest.mark.asyncio
async def test_input_box_returns_text_including_empty():
    ui = ConsoleUserInterface(input_func=_answers("  abc ", ""))

    assert await ui.show_input_box("Document ID") == "  abc "
    assert await ui.show_input_box("Document ID") == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [EOFError(), KeyboardInterrupt()])
async def test_input_box_dismissed(error):
    ui = ConsoleUserInterface(input_func=_answers(error))

    assert await ui.show_input_box("Document ID", placeholder="blank for generated") is None


@pytest.mark.asyncio
async def test_input_is_read_off_the_event_loop_thread():
    readers = []

    def fake_input(prompt):
        readers.append(threading.get_ident())
        return "abc"

    ui = ConsoleUserInterface(input_func=fake_input)

    assert await ui.show_input_box("Document ID") == "abc"
    assert readers and readers[0] != threading.get_ident()
