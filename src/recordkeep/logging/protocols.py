# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Logging interface definitions for recordkeep.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """
    Protocol defining the interface for loggers.

    Used for static type checking only.
    """

    def debug(self, msg: str, **kwargs: Any) -> None: ...

    def info(self, msg: str, **kwargs: Any) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...

    def error(self, msg: str, **kwargs: Any) -> None: ...

    def critical(self, msg: str, **kwargs: Any) -> None: ...

    def exception(self, msg: str, **kwargs: Any) -> None: ...

    def bind(self, **kwargs: Any) -> LoggerProtocol: ...
