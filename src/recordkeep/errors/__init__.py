# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Public API for recordkeep error handling.
"""

from recordkeep.errors.base import (
    ErrorCategory,
    ErrorSeverity,
    RecordkeepError,
)
from recordkeep.errors.definitions import (
    DuplicateIdentityError,
    ErrorCode,
    InputError,
    InvalidFieldFormatError,
    InvalidValueError,
    MissingFieldError,
    NotFoundError,
    PersistenceError,
    RepositoryError,
    RepositoryErrorKind,
)
from recordkeep.errors.result import (
    Failure,
    Result,
    Success,
    combine,
    failure,
    from_exception,
    of,
)

__all__ = [
    # Base
    "ErrorCategory",
    "ErrorSeverity",
    "RecordkeepError",
    # Definitions
    "ErrorCode",
    "RepositoryErrorKind",
    "RepositoryError",
    "DuplicateIdentityError",
    "NotFoundError",
    "InvalidValueError",
    "InputError",
    "MissingFieldError",
    "InvalidFieldFormatError",
    "PersistenceError",
    # Result
    "Result",
    "Success",
    "Failure",
    "of",
    "failure",
    "from_exception",
    "combine",
]
