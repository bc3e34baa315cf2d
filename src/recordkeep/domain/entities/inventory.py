# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Inventory records: logged items and the two warehouse item kinds.

All three satisfy the ``Stocked`` protocol (id, name, quantity).
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from recordkeep.domain.entities.base import Record


class InventoryRecord(Record):
    """An item entry in the inventory log, timestamped when it was added."""

    name: str = Field(min_length=1)
    quantity: int = Field(ge=0)
    date_added: datetime = Field(default_factory=datetime.now)


class ElectronicItem(Record):
    name: str = Field(min_length=1)
    quantity: int = Field(ge=0)
    brand: str
    warranty_months: int = Field(ge=0)


class GroceryItem(Record):
    name: str = Field(min_length=1)
    quantity: int = Field(ge=0)
    expiry_date: date
