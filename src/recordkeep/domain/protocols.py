# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
domain.protocols
Capability protocols shared by recordkeep entities and repositories
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

from recordkeep.errors import RepositoryError, Result

T = TypeVar("T", bound="HasIdentity")


@runtime_checkable
class HasIdentity(Protocol):
    """Anything stored in a keyed repository: exposes a stable integer identity."""

    @property
    def id(self) -> int: ...


@runtime_checkable
class Stocked(HasIdentity, Protocol):
    """Entities that carry a name and a stock quantity."""

    @property
    def name(self) -> str: ...

    @property
    def quantity(self) -> int: ...


class KeyedRepositoryProtocol(Protocol[T]):
    """Interface of an identity-keyed, invariant-enforcing store."""

    entity_type: str

    def add(self, item: T) -> Result[T, RepositoryError]: ...

    def get_by_id(self, entity_id: int) -> Result[T, RepositoryError]: ...

    def remove(self, entity_id: int) -> Result[T, RepositoryError]: ...

    def update_quantity(
        self, entity_id: int, new_value: int
    ) -> Result[T, RepositoryError]: ...

    def get_all(self) -> list[T]: ...

    def replace_all(self, items: Iterable[T]) -> Result[list[T], RepositoryError]: ...
