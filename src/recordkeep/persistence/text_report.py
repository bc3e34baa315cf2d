# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Plain-text reports: one rendered line per entity.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from recordkeep.errors import ErrorCode, Failure, PersistenceError, Result, Success


def write_text_report(path: Path | str, lines: Iterable[str]) -> Result[Path, PersistenceError]:
    """Write ``lines`` to ``path``, newline-terminated."""
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(f"{line}\n")
    except OSError as e:
        return Failure(
            PersistenceError(str(target), f"Error saving file: {e}", ErrorCode.SAVE_FAILED)
        )
    return Success(target)
