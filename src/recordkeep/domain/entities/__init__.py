# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Entities stored by the recordkeep applications.
"""

from recordkeep.domain.entities.base import Record
from recordkeep.domain.entities.grading import Student, letter_grade
from recordkeep.domain.entities.healthcare import Patient, Prescription
from recordkeep.domain.entities.inventory import (
    ElectronicItem,
    GroceryItem,
    InventoryRecord,
)

__all__ = [
    "Record",
    "Student",
    "letter_grade",
    "Patient",
    "Prescription",
    "InventoryRecord",
    "ElectronicItem",
    "GroceryItem",
]
