# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Domain module: entities, capability protocols and the keyed repository.
"""

from recordkeep.domain.protocols import HasIdentity, KeyedRepositoryProtocol, Stocked
from recordkeep.domain.repository import KeyedRepository, non_negative

__all__ = [
    "HasIdentity",
    "Stocked",
    "KeyedRepositoryProtocol",
    "KeyedRepository",
    "non_negative",
]
