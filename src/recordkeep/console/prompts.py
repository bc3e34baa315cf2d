# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Line-based input collection for the console apps.

``ConsoleInput`` turns raw prompt answers into validated scalars and raises
``InputError`` subclasses when an answer is blank or cannot be parsed.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import TypeVar

import typer

from recordkeep.errors import InputError, InvalidFieldFormatError, MissingFieldError

T = TypeVar("T")

PromptFunc = Callable[[str], str]


def typer_prompt(label: str) -> str:
    """Ask on the terminal; a bare Enter yields an empty string."""
    return typer.prompt(label, default="", show_default=False)


class ConsoleInput:
    """Reads and validates one field at a time."""

    def __init__(self, prompt: PromptFunc = typer_prompt) -> None:
        self._prompt = prompt

    def text(self, label: str, required: bool = True) -> str:
        raw = self._prompt(label).strip()
        if required and not raw:
            raise MissingFieldError(label.strip())
        return raw

    def integer(self, label: str, minimum: int | None = None) -> int:
        raw = self.text(label)
        try:
            value = int(raw)
        except ValueError:
            raise InvalidFieldFormatError(
                label.strip(), raw, f"{label.strip()} must be a number."
            ) from None
        if minimum is not None and value < minimum:
            raise InvalidFieldFormatError(
                label.strip(), raw, f"{label.strip()} must be at least {minimum}."
            )
        return value

    def count(self, label: str) -> int:
        """Read how many records to enter."""
        return self.integer(label, minimum=0)

    def date(self, label: str, fmt: str = "%Y-%m-%d") -> date:
        raw = self.text(label)
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            raise InvalidFieldFormatError(
                label.strip(), raw, f"{label.strip()} must be a date in the format {fmt}."
            ) from None

    def until_valid(
        self, read: Callable[[], T], report: Callable[[InputError], None]
    ) -> T:
        """Call ``read`` until it returns without an input error."""
        while True:
            try:
                return read()
            except InputError as e:
                report(e)
