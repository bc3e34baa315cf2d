# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Consolidated error definitions for recordkeep.

Repository errors are returned inside ``Failure`` results; input and
persistence errors are raised by the console and file collaborators.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from recordkeep.errors.base import ErrorCategory, ErrorSeverity, RecordkeepError

# -----------------------------------------------------------------------------
# Error codes
# -----------------------------------------------------------------------------


class ErrorCode:
    """Stable error codes."""

    DUPLICATE_IDENTITY = "REPO-0001"
    NOT_FOUND = "REPO-0002"
    INVALID_VALUE = "REPO-0003"
    MISSING_FIELD = "INPUT-0001"
    INVALID_FIELD_FORMAT = "INPUT-0002"
    LOAD_FAILED = "PERSIST-0001"
    SAVE_FAILED = "PERSIST-0002"


class RepositoryErrorKind(str, Enum):
    """Closed set of failures a keyed repository can report."""

    DUPLICATE_IDENTITY = "duplicate_identity"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"


# -----------------------------------------------------------------------------
# Repository errors
# -----------------------------------------------------------------------------


class RepositoryError(RecordkeepError):
    """Base class for failures reported by a keyed repository."""

    kind: RepositoryErrorKind

    def __init__(
        self,
        kind: RepositoryErrorKind,
        message: str,
        code: str,
        category: ErrorCategory,
        **context: Any,
    ) -> None:
        self.kind = kind
        super().__init__(
            message=message,
            code=code,
            category=category,
            severity=ErrorSeverity.WARNING,
            **context,
        )


class DuplicateIdentityError(RepositoryError):
    """An entity with the same identity is already stored."""

    def __init__(self, entity_id: int, entity_type: str = "Item", **context: Any):
        super().__init__(
            kind=RepositoryErrorKind.DUPLICATE_IDENTITY,
            message=f"{entity_type} with ID {entity_id} already exists.",
            code=ErrorCode.DUPLICATE_IDENTITY,
            category=ErrorCategory.CONFLICT,
            entity_id=entity_id,
            entity_type=entity_type,
            **context,
        )
        self.entity_id = entity_id


class NotFoundError(RepositoryError):
    """No entity is stored under the requested identity."""

    def __init__(self, entity_id: int, entity_type: str = "Item", **context: Any):
        super().__init__(
            kind=RepositoryErrorKind.NOT_FOUND,
            message=f"{entity_type} with ID {entity_id} not found.",
            code=ErrorCode.NOT_FOUND,
            category=ErrorCategory.NOT_FOUND,
            entity_id=entity_id,
            entity_type=entity_type,
            **context,
        )
        self.entity_id = entity_id


class InvalidValueError(RepositoryError):
    """A field update violates a domain constraint."""

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str | None = None,
        **context: Any,
    ):
        reason = reason or f"{field.capitalize()} is invalid."
        super().__init__(
            kind=RepositoryErrorKind.INVALID_VALUE,
            message=reason,
            code=ErrorCode.INVALID_VALUE,
            category=ErrorCategory.VALIDATION,
            field=field,
            value=value,
            **context,
        )
        self.field = field
        self.value = value


# -----------------------------------------------------------------------------
# Input errors
# -----------------------------------------------------------------------------


class InputError(RecordkeepError):
    """Base class for errors raised while collecting console input."""

    def __init__(self, message: str, code: str, field: str, **context: Any):
        super().__init__(
            message=message,
            code=code,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.WARNING,
            field=field,
            **context,
        )
        self.field = field


class MissingFieldError(InputError):
    """A required field was left blank."""

    def __init__(self, field: str, message: str | None = None, **context: Any):
        super().__init__(
            message=message or f"{field} is missing.",
            code=ErrorCode.MISSING_FIELD,
            field=field,
            **context,
        )


class InvalidFieldFormatError(InputError):
    """A field could not be parsed into its expected type."""

    def __init__(
        self,
        field: str,
        raw_value: str,
        message: str | None = None,
        **context: Any,
    ):
        super().__init__(
            message=message or f"{field} has an invalid format: {raw_value!r}",
            code=ErrorCode.INVALID_FIELD_FORMAT,
            field=field,
            raw_value=raw_value,
            **context,
        )
        self.raw_value = raw_value


# -----------------------------------------------------------------------------
# Persistence errors
# -----------------------------------------------------------------------------


class PersistenceError(RecordkeepError):
    """Loading or saving a collection file failed."""

    def __init__(self, path: str, reason: str, code: str = ErrorCode.LOAD_FAILED, **context: Any):
        super().__init__(
            message=f"{reason} ({path})",
            code=code,
            category=ErrorCategory.PERSISTENCE,
            severity=ErrorSeverity.ERROR,
            path=path,
            reason=reason,
            **context,
        )
        self.path = path
        self.reason = reason
