# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""Identity-keyed repository for domain entities.

The repository owns a mapping from integer identity to entity and enforces
three rules on it: identities are unique, mutations target existing entries,
and field updates pass validation before they are stored. Every operation
returns a ``Result``; nothing is raised, logged or printed here.

Entities must be immutable (frozen pydantic models or frozen dataclasses);
``add`` and ``replace_all`` reject anything else, so the values handed out by
``get_by_id`` and ``get_all`` cannot change stored state behind the
repository's back.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from recordkeep.domain.protocols import HasIdentity
from recordkeep.errors import (
    DuplicateIdentityError,
    Failure,
    InvalidValueError,
    NotFoundError,
    RepositoryError,
    Result,
    Success,
)

T = TypeVar("T", bound=HasIdentity)

# Returns a failure reason, or None when the value is acceptable
FieldValidator = Callable[[Any], str | None]


def non_negative(field: str) -> FieldValidator:
    """Build a validator rejecting negative numbers for ``field``."""

    def _check(value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return f"{field.capitalize()} must be a number."
        if value < 0:
            return f"{field.capitalize()} cannot be negative."
        return None

    return _check


def is_immutable(item: Any) -> bool:
    """True for frozen pydantic models and frozen dataclasses."""
    if isinstance(item, BaseModel):
        return bool(type(item).model_config.get("frozen", False))
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return type(item).__dataclass_params__.frozen  # type: ignore[attr-defined]
    return False


def _mutable_entity(item: Any) -> InvalidValueError:
    return InvalidValueError(
        "id",
        item.id,
        f"{type(item).__name__} must be immutable to be stored.",
    )


class KeyedRepository(Generic[T]):
    """In-memory store of entities keyed by their ``id``.

    Validation order for updates is fixed: the new value is checked first and
    existence second, so a negative quantity for a missing id reports
    ``INVALID_VALUE``.
    """

    def __init__(self, entity_type: str = "Item") -> None:
        """Initialize an empty repository.

        Args:
            entity_type: Name used in error messages, e.g. "Patient".
        """
        self._items: dict[int, T] = {}
        self.entity_type = entity_type

    def add(self, item: T) -> Result[T, RepositoryError]:
        """Insert ``item`` under ``item.id``.

        Returns:
            Success with the stored item, or Failure(DuplicateIdentityError)
            if the identity is already taken. Entities that can be mutated
            in place fail with INVALID_VALUE.
        """
        if not is_immutable(item):
            return Failure(_mutable_entity(item))
        if item.id in self._items:
            return Failure(DuplicateIdentityError(item.id, self.entity_type))
        self._items[item.id] = item
        return Success(item)

    def get_by_id(self, entity_id: int) -> Result[T, RepositoryError]:
        """Look up the entity stored under ``entity_id``."""
        if entity_id not in self._items:
            return Failure(NotFoundError(entity_id, self.entity_type))
        return Success(self._items[entity_id])

    def remove(self, entity_id: int) -> Result[T, RepositoryError]:
        """Delete the entry for ``entity_id`` and return the removed entity.

        Removing an absent identity fails with NOT_FOUND, including a second
        removal of the same id.
        """
        if entity_id not in self._items:
            return Failure(NotFoundError(entity_id, self.entity_type))
        return Success(self._items.pop(entity_id))

    def update_quantity(self, entity_id: int, new_value: int) -> Result[T, RepositoryError]:
        """Replace the ``quantity`` field of a stored entity."""
        return self.update_field(
            entity_id, "quantity", new_value, validator=non_negative("quantity")
        )

    def update_field(
        self,
        entity_id: int,
        field: str,
        value: Any,
        validator: FieldValidator | None = None,
    ) -> Result[T, RepositoryError]:
        """Replace one field of a stored entity with a validated value.

        Args:
            entity_id: Identity of the entity to update
            field: Name of the field to replace; ``id`` is not updatable
            value: New value for the field
            validator: Optional check run before the existence check

        Returns:
            Success with the updated entity, or Failure with INVALID_VALUE
            or NOT_FOUND. The stored entity is untouched on failure.
        """
        if field == "id":
            return Failure(
                InvalidValueError(field, value, "Identity cannot be changed.")
            )
        if validator is not None:
            reason = validator(value)
            if reason:
                return Failure(InvalidValueError(field, value, reason))
        if entity_id not in self._items:
            return Failure(NotFoundError(entity_id, self.entity_type))

        result = self._with_field(self._items[entity_id], field, value)
        if result.is_success:
            self._items[entity_id] = result.unwrap()
        return result

    def get_all(self) -> list[T]:
        """Snapshot of all stored entities in insertion order."""
        return list(self._items.values())

    def replace_all(self, items: Iterable[T]) -> Result[list[T], RepositoryError]:
        """Swap the whole contents for ``items``, e.g. after loading a file.

        Duplicate identities or a mutable entity inside ``items`` fail the
        call and leave the current contents in place.
        """
        staged: dict[int, T] = {}
        for item in items:
            if not is_immutable(item):
                return Failure(_mutable_entity(item))
            if item.id in staged:
                return Failure(DuplicateIdentityError(item.id, self.entity_type))
            staged[item.id] = item
        self._items = staged
        return Success(list(staged.values()))

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.entity_type}, size={len(self)})"

    def _with_field(self, current: T, field: str, value: Any) -> Result[T, RepositoryError]:
        """Build a re-validated copy of ``current`` with ``field`` replaced."""
        if isinstance(current, BaseModel):
            model_type = type(current)
            if field not in model_type.model_fields:
                return Failure(
                    InvalidValueError(field, value, f"Unknown field '{field}'.")
                )
            data = {name: getattr(current, name) for name in model_type.model_fields}
            data[field] = value
            try:
                return Success(model_type.model_validate(data))
            except ValidationError as e:
                return Failure(
                    InvalidValueError(
                        field, value, e.errors()[0]["msg"], errors=e.errors()
                    )
                )
        if dataclasses.is_dataclass(current):
            if field not in {f.name for f in dataclasses.fields(current)}:
                return Failure(
                    InvalidValueError(field, value, f"Unknown field '{field}'.")
                )
            try:
                return Success(dataclasses.replace(current, **{field: value}))
            except (TypeError, ValueError) as e:
                return Failure(InvalidValueError(field, value, str(e)))
        return Failure(
            InvalidValueError(
                field,
                value,
                f"{type(current).__name__} does not support field updates.",
            )
        )
