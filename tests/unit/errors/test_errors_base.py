# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Tests for the error base class and concrete definitions."""

import pytest

from recordkeep.errors import (
    DuplicateIdentityError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    InvalidFieldFormatError,
    MissingFieldError,
    NotFoundError,
    PersistenceError,
    RecordkeepError,
    RepositoryErrorKind,
)


class FakeAppError(RecordkeepError):
    def __init__(self, message: str, context: dict[str, object] | None = None):
        super().__init__(
            message=message,
            code="FAKE_APP_ERROR",
            category=ErrorCategory.INTERNAL,
            severity=ErrorSeverity.ERROR,
            context=context,
        )


def test_base_error_cannot_be_instantiated():
    with pytest.raises(TypeError):
        RecordkeepError("msg", "CODE")


def test_subclass_instantiation():
    err = FakeAppError("something went wrong")
    assert err.code == "FAKE_APP_ERROR"
    assert err.message == "something went wrong"
    assert err.category is ErrorCategory.INTERNAL
    assert err.severity is ErrorSeverity.ERROR
    assert err.context == {}
    assert err.timestamp is not None
    assert str(err) == "FAKE_APP_ERROR: something went wrong"


def test_add_context_chains():
    err = FakeAppError("fail").add_context("a", 1).add_context("b", 2)
    assert err.context == {"a": 1, "b": 2}


def test_with_context_returns_new_error():
    err = FakeAppError("fail", {"a": 1})
    err2 = err.with_context({"b": 2})
    assert err2.context == {"a": 1, "b": 2}
    assert err.context == {"a": 1}
    assert err is not err2
    assert err2.message == "fail"


def test_to_dict():
    data = NotFoundError(7, "Patient").to_dict()
    assert data["code"] == ErrorCode.NOT_FOUND
    assert data["message"] == "Patient with ID 7 not found."
    assert data["category"] == "not_found"
    assert data["severity"] == "warning"
    assert data["context"]["entity_id"] == 7


def test_repository_error_kinds():
    assert DuplicateIdentityError(1).kind is RepositoryErrorKind.DUPLICATE_IDENTITY
    assert NotFoundError(1).kind is RepositoryErrorKind.NOT_FOUND
    assert set(RepositoryErrorKind) == {
        RepositoryErrorKind.DUPLICATE_IDENTITY,
        RepositoryErrorKind.NOT_FOUND,
        RepositoryErrorKind.INVALID_VALUE,
    }


def test_input_errors():
    missing = MissingFieldError("ID")
    assert missing.message == "ID is missing."
    assert missing.field == "ID"
    invalid = InvalidFieldFormatError("Score", "abc", "Score must be a number.")
    assert invalid.raw_value == "abc"
    assert invalid.code == ErrorCode.INVALID_FIELD_FORMAT


def test_persistence_error_message():
    err = PersistenceError("/tmp/x.json", "Error loading file: boom")
    assert err.message == "Error loading file: boom (/tmp/x.json)"
    assert err.category is ErrorCategory.PERSISTENCE
