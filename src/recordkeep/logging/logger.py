# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Logger implementation for recordkeep.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from collections.abc import Generator
from contextvars import ContextVar
from typing import Any

from recordkeep.logging.config import LogLevel, LoggingSettings
from recordkeep.logging.protocols import LoggerProtocol

# Context variable for storing log context data
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

_CONTEXT_ATTR = "recordkeep_context"


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra: dict[str, Any] = dict(_log_context.get())
        extra.update(getattr(record, _CONTEXT_ATTR, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(super().format(record), extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **extra,
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])
        return json.dumps(log_data, cls=RecordkeepJsonEncoder, ensure_ascii=False)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output."""
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, BaseException):
            return json.dumps({"message": str(value), "type": type(value).__name__})
        try:
            return json.dumps(value, cls=RecordkeepJsonEncoder)
        except (TypeError, ValueError):
            return str(value)


class RecordkeepJsonEncoder(json.JSONEncoder):
    """JSON encoder that handles dates, enums and pydantic models for logging."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if hasattr(obj, "model_dump"):
            return obj.model_dump(mode="json")
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        return str(obj)


class RecordkeepLogger:
    """Default logger implementation for recordkeep."""

    def __init__(
        self,
        name: str,
        level: str | None = None,
        settings: LoggingSettings | None = None,
        stream: Any = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            level: Log level override; defaults to the configured level
            settings: Optional logger settings (loads from environment if None)
            stream: Console stream; defaults to ``sys.stderr`` at call time
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._stream = stream
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}
        self._configure(level or self._settings.level)

    def _configure(self, level: str) -> None:
        self._logger.setLevel(level.upper())

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = logging.StreamHandler(self._stream or sys.stderr)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(self._settings.file_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs: Any) -> None:
        combined_context = {**self._bound_context, **self._context, **kwargs}
        self._logger.log(
            level,
            msg,
            exc_info=exc_info,
            extra={_CONTEXT_ATTR: combined_context},
        )

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an error message with the active exception's traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self._logger.setLevel(level.to_stdlib_level())

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None, None, None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    def bind(self, **kwargs: Any) -> RecordkeepLogger:
        """Create a new logger with bound context values.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        logger = RecordkeepLogger(
            self.name,
            level=logging.getLevelName(self._logger.level),
            settings=self._settings,
            stream=self._stream,
        )
        logger._bound_context = {**self._bound_context, **kwargs}
        return logger


@contextlib.contextmanager
def log_context(**kwargs: Any) -> Generator[None, None, None]:
    """Add context to every log line emitted inside the block, across loggers."""
    token = _log_context.set({**_log_context.get(), **kwargs})
    try:
        yield
    finally:
        _log_context.reset(token)


def get_logger(
    name: str,
    level: LogLevel | None = None,
    settings: LoggingSettings | None = None,
    stream: Any = None,
) -> LoggerProtocol:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override
        settings: Optional settings; loaded from the environment when omitted
        stream: Optional console stream

    Returns:
        Configured logger instance
    """
    return RecordkeepLogger(
        name,
        level=level.value if level is not None else None,
        settings=settings,
        stream=stream,
    )
