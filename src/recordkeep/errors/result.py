# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Result objects for functional error handling.

This module implements the Result pattern (also known as the Either pattern)
for handling errors in a functional way without relying on exceptions.
"""

from __future__ import annotations

import functools
import sys
import traceback
from abc import ABC, abstractmethod
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, cast, runtime_checkable

from recordkeep.errors.base import RecordkeepError

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
U = TypeVar("U")


@runtime_checkable
class HasToDict(Protocol):
    """Protocol for objects that can be converted to dictionaries."""

    def to_dict(self) -> dict[str, Any]: ...


class Result(Generic[T, E], ABC):
    """Abstract base class for Result monad."""

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    @abstractmethod
    def is_failure(self) -> bool: ...

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Result[U, E]: ...

    @abstractmethod
    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]: ...

    @abstractmethod
    def unwrap(self) -> T: ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T: ...

    @abstractmethod
    def unwrap_or_else(self, func: Callable[[E], T]) -> T: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def ensure(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """
        Return Failure if predicate is False for a Success value, else self.
        """
        if self.is_success and not predicate(self.unwrap()):
            return Failure(error)
        return self

    def recover(self, func: Callable[[E], T]) -> Result[T, E]:
        """
        Transform a Failure into a Success by applying func to the error.
        """
        if self.is_failure:
            return Success(func(self.error))  # type: ignore[attr-defined]
        return self


@dataclass(frozen=True)
class Success(Result[T, E], Generic[T, E]):
    """
    Represents a successful result with a value.

    Attributes:
        value: The successful result value
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        """
        Map the value of a successful result.

        Args:
            func: The function to apply to the value

        Returns:
            A new Success with the mapped value, or a Failure if func raised
        """
        try:
            return Success(func(self.value))
        except Exception as e:
            return Failure(cast("E", e))

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Apply a function that returns a Result to the value of a successful result.

        Args:
            func: The function to apply to the value

        Returns:
            The Result returned by the function
        """
        try:
            return func(self.value)
        except Exception as e:
            return Failure(cast("E", e))

    def on_success(self, func: Callable[[T], Any]) -> Success[T, E]:
        """Execute a function with the value; the result is returned unchanged."""
        with suppress(Exception):
            func(self.value)
        return self

    def on_failure(self, func: Callable[[E], Any]) -> Success[T, E]:
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the result to a dictionary.

        Returns:
            A dictionary representation of the result
        """
        if isinstance(self.value, HasToDict):
            return {"status": "success", "data": self.value.to_dict()}
        return {"status": "success", "data": self.value}

    def __str__(self) -> str:
        return f"Success({self.value})"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Result[T, E], Generic[T, E]):
    """
    Represents a failed result with an error.

    Attributes:
        error: The error that caused the failure
        traceback: The traceback at the time of failure, when one is active
    """

    error: E
    traceback: str | None = None

    def __post_init__(self) -> None:
        # Only meaningful when constructed while handling an exception
        if self.traceback is None and sys.exc_info()[0] is not None:
            object.__setattr__(self, "traceback", traceback.format_exc())

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return cast("Failure[U, E]", self)

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return cast("Failure[U, E]", self)

    def on_success(self, func: Callable[[T], Any]) -> Failure[T, E]:
        return self

    def on_failure(self, func: Callable[[E], Any]) -> Failure[T, E]:
        """Execute a function with the error; the result is returned unchanged."""
        with suppress(Exception):
            func(self.error)
        return self

    def unwrap(self) -> T:
        """
        Unwrap a successful result to get its value.

        Raises:
            RuntimeError: Since this is a failure
        """
        raise RuntimeError(f"Cannot unwrap a Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self.error)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the result to a dictionary.

        Returns:
            A dictionary representation of the result
        """
        if isinstance(self.error, RecordkeepError):
            return {"status": "error", "error": self.error.to_dict()}
        return {
            "status": "error",
            "error": {
                "message": str(self.error),
                "code": "UNKNOWN_ERROR",
                "type": type(self.error).__name__,
            },
        }

    def __str__(self) -> str:
        return f"Failure({self.error})"

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


def of(value: T) -> Success[T, Any]:
    """Create a successful result with a value."""
    return Success(value)


def failure(error: E) -> Failure[Any, E]:
    """Create a failed result with an error."""
    return Failure(error)


def from_exception(func: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
    """
    Decorator to convert a function that might raise exceptions to one that returns a Result.

    Args:
        func: The function to decorate

    Returns:
        A function that returns a Result
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Result[T, Exception]:
        try:
            return Success(func(*args, **kwargs))
        except Exception as e:
            return Failure(e)

    return wrapper


def combine(results: list[Result[T, E]]) -> Result[list[T], E]:
    """
    Combine multiple Results into a single Result.

    Returns:
        A Success with a list of values if all Results are successful,
        or the first Failure
    """
    values: list[T] = []
    for result in results:
        if result.is_failure:
            return cast("Failure[list[T], E]", result)
        values.append(result.unwrap())
    return Success(values)
