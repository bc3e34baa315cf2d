# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Tests for the Result pattern."""

import pytest

from recordkeep.errors import (
    Failure,
    NotFoundError,
    Success,
    combine,
    failure,
    from_exception,
    of,
)


def test_success_basics():
    result = of(3)
    assert result.is_success and not result.is_failure
    assert result.unwrap() == 3
    assert result.error is None
    assert result.map(lambda v: v * 2).unwrap() == 6


def test_failure_basics():
    err = NotFoundError(1)
    result = failure(err)
    assert result.is_failure
    assert result.error is err
    assert result.value is None
    assert result.unwrap_or(0) == 0
    assert result.unwrap_or_else(lambda e: -1) == -1
    with pytest.raises(RuntimeError):
        result.unwrap()


def test_failure_short_circuits_map_and_flat_map():
    result = Failure(NotFoundError(1))
    assert result.map(lambda v: v + 1) is result
    assert result.flat_map(lambda v: Success(v)) is result


def test_map_captures_exceptions():
    result = Success(1).map(lambda v: v / 0)
    assert isinstance(result, Failure)
    assert isinstance(result.error, ZeroDivisionError)
    assert result.traceback


def test_failure_outside_except_has_no_traceback():
    assert Failure(ValueError("x")).traceback is None


def test_ensure_and_recover():
    assert Success(5).ensure(lambda v: v > 3, ValueError("small")).is_success
    assert Success(1).ensure(lambda v: v > 3, ValueError("small")).is_failure
    assert Failure(ValueError("x")).recover(lambda e: 0).unwrap() == 0


def test_on_success_and_on_failure():
    seen = []
    Success(1).on_success(seen.append).on_failure(seen.append)
    err = ValueError("x")
    Failure(err).on_success(seen.append).on_failure(seen.append)
    assert seen == [1, err]


def test_to_dict():
    assert Success({"a": 1}).to_dict() == {"status": "success", "data": {"a": 1}}
    data = Failure(NotFoundError(2)).to_dict()
    assert data["status"] == "error"
    assert data["error"]["message"] == "Item with ID 2 not found."
    plain = Failure(ValueError("bad")).to_dict()
    assert plain["error"]["type"] == "ValueError"


def test_from_exception_decorator():
    @from_exception
    def parse(text: str) -> int:
        return int(text)

    assert parse("4").unwrap() == 4
    assert isinstance(parse("x").error, ValueError)


def test_combine():
    assert combine([Success(1), Success(2)]).unwrap() == [1, 2]
    err = ValueError("x")
    assert combine([Success(1), Failure(err), Success(3)]).error is err
