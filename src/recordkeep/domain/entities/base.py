# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Base model for entities stored in a keyed repository.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    Immutable entity with an externally assigned integer identity.

    Records are frozen: the only way to change a stored record is through
    the repository that owns it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    id: int = Field(ge=0, description="Identity, unique within a repository")
