# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Public API for the recordkeep logging system.

Structured logging on top of the standard library ``logging`` module,
configured from the environment.
"""

from __future__ import annotations

from recordkeep.logging.config import LogLevel, LoggingSettings
from recordkeep.logging.logger import (
    RecordkeepLogger,
    StructuredFormatter,
    get_logger,
    log_context,
)
from recordkeep.logging.protocols import LoggerProtocol

__all__ = [
    "LoggerProtocol",
    "LogLevel",
    "LoggingSettings",
    "RecordkeepLogger",
    "StructuredFormatter",
    "get_logger",
    "log_context",
]
