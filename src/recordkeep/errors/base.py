# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Base error classes for recordkeep.

This module provides the foundation for structured error handling with
error codes, contextual information, and error categories.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Severity levels for errors across recordkeep."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory(str, Enum):
    """Categories of errors for classification."""

    VALIDATION = "validation"  # Input validation errors
    NOT_FOUND = "not_found"  # Resource not found
    CONFLICT = "conflict"  # Resource conflicts
    PERSISTENCE = "persistence"  # File load/save errors
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class RecordkeepError(Exception):
    """
    Base error class for recordkeep errors.
    Should only be subclassed for specific errors, not instantiated directly.
    """

    message: str
    code: str
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> RecordkeepError:
        if cls is RecordkeepError:
            raise TypeError(
                "Do not instantiate RecordkeepError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error (never instantiate the base directly).

        Args:
            message: Human-readable error message
            code: Stable machine-readable error code
            category: Category used for classification
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Merged into the context
        """
        full_context = dict(context or {})
        full_context.update(kwargs)

        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)
        super().__init__(message)

    def add_context(self, key: str, value: Any) -> RecordkeepError:
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def with_context(self, context: dict[str, Any]) -> RecordkeepError:
        """Return a copy of this error with additional context."""
        new_error = self.__class__.__new__(self.__class__)
        new_error.__dict__.update(self.__dict__)
        new_error.context = {**self.context, **context}
        new_error.args = self.args
        if self.__cause__ is not None:
            new_error.__cause__ = self.__cause__
        return new_error

    def __str__(self) -> str:
        """Get string representation of the error.

        Returns:
            String in format 'code: message'
        """
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
