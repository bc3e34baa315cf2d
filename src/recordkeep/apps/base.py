# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Shared plumbing for the interactive console apps.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import typer
from pydantic import ValidationError

from recordkeep.config import RecordkeepSettings, get_settings
from recordkeep.console import ConsoleInput, render, render_error
from recordkeep.domain import KeyedRepositoryProtocol
from recordkeep.errors import InvalidFieldFormatError, Result
from recordkeep.logging import LoggerProtocol, get_logger

T = TypeVar("T")

OutputFunc = Callable[[str], Any]


class ConsoleApp:
    """
    Base class for the console apps.

    Collects dependencies (input, output, logger, settings) and the
    read-validate-store loop every app repeats.
    """

    name = "app"

    def __init__(
        self,
        *,
        console: ConsoleInput | None = None,
        out: OutputFunc = typer.echo,
        logger: LoggerProtocol | None = None,
        settings: RecordkeepSettings | None = None,
    ) -> None:
        self.console = console or ConsoleInput()
        self.out = out
        self.logger = logger or get_logger(f"recordkeep.apps.{self.name}")
        self.settings = settings or get_settings()

    def report(self, error: Exception) -> None:
        """Tell the user an operation failed; the app carries on."""
        self.logger.warning("Operation failed", error=str(error))
        self.out(render_error(error))

    def read_count(self, label: str) -> int:
        return self.console.until_valid(lambda: self.console.count(label), self.report)

    def read_record(self, build: Callable[[], T]) -> T:
        """Run ``build`` until it yields a valid entity.

        Model validation errors are reported like input errors.
        """

        def _build() -> T:
            try:
                return build()
            except ValidationError as e:
                first = e.errors()[0]
                field = ".".join(str(part) for part in first["loc"]) or "record"
                raise InvalidFieldFormatError(field, str(first.get("input")), first["msg"]) from e

        return self.console.until_valid(_build, self.report)

    def store(self, repo: KeyedRepositoryProtocol[Any], item: Any) -> bool:
        """Add ``item`` to ``repo``, reporting a duplicate identity."""
        result = repo.add(item)
        if result.is_failure:
            self.report(result.error)
            return False
        self.logger.debug("Stored record", entity=repo.entity_type, id=item.id)
        return True

    def announce(self, result: Result[Any, Exception], message: str) -> bool:
        """Print ``message`` on success, the error otherwise."""
        if result.is_failure:
            self.report(result.error)
            return False
        self.out(message)
        return True

    def print_section(self, title: str, entities: Iterable[Any]) -> None:
        self.out(f"\n--- {title} ---")
        for entity in entities:
            self.out(render(entity))
