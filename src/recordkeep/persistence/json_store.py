# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
JSON file persistence for whole entity collections.

The store only sees snapshots: ``save`` takes the list a repository's
``get_all`` returns, and ``load`` hands back a list ready for
``KeyedRepository.replace_all``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from recordkeep.errors import ErrorCode, Failure, PersistenceError, Result, Success
from recordkeep.logging import LoggerProtocol, get_logger

M = TypeVar("M", bound=BaseModel)


class JsonCollectionStore(Generic[M]):
    """Reads and writes a list of ``model`` instances as an indented JSON array."""

    def __init__(
        self,
        path: Path | str,
        model: type[M],
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.path = Path(path)
        self.model = model
        self._adapter = TypeAdapter(list[model])  # type: ignore[valid-type]
        self._logger = logger or get_logger("recordkeep.persistence.json_store")

    def save(self, items: Sequence[M]) -> Result[Path, PersistenceError]:
        """Write ``items`` to the file, replacing its previous contents."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            payload = self._adapter.dump_json(list(items), indent=2)
            self.path.write_bytes(payload)
        except OSError as e:
            self._logger.error(
                "Failed to save collection", path=str(self.path), error=str(e)
            )
            return Failure(
                PersistenceError(str(self.path), f"Error saving file: {e}", ErrorCode.SAVE_FAILED)
            )
        self._logger.info("Saved collection", path=str(self.path), count=len(items))
        return Success(self.path)

    def load(self) -> Result[list[M], PersistenceError]:
        """Read the file back into models.

        A missing file is not an error: it yields an empty list.
        """
        if not self.path.exists():
            self._logger.info("No saved file found", path=str(self.path))
            return Success([])
        try:
            raw = self.path.read_text(encoding="utf-8")
            if not raw.strip():
                return Success([])
            items = self._adapter.validate_json(raw)
        except (OSError, UnicodeDecodeError) as e:
            self._logger.error("Failed to read collection", path=str(self.path), error=str(e))
            return Failure(PersistenceError(str(self.path), f"Error loading file: {e}"))
        except ValidationError as e:
            self._logger.error(
                "Collection file is invalid", path=str(self.path), errors=e.error_count()
            )
            return Failure(
                PersistenceError(
                    str(self.path),
                    f"Error loading file: {e.error_count()} invalid value(s)",
                )
            )
        self._logger.info("Loaded collection", path=str(self.path), count=len(items))
        return Success(items)

    def exists(self) -> bool:
        return self.path.exists()
