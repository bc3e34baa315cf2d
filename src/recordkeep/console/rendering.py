# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Text rendering of entities, one formatter per entity type.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any

from recordkeep.domain.entities import (
    ElectronicItem,
    GroceryItem,
    InventoryRecord,
    Patient,
    Prescription,
    Student,
)
from recordkeep.errors import RecordkeepError

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@singledispatch
def render(entity: Any) -> str:
    """Render an entity as a single line of text."""
    return str(entity)


@render.register
def _(student: Student) -> str:
    return (
        f"{student.full_name} (ID: {student.id}): "
        f"Score = {student.score}, Grade = {student.grade}"
    )


@render.register
def _(patient: Patient) -> str:
    return f"{patient.id}: {patient.name}, Age {patient.age}, Gender {patient.gender}"


@render.register
def _(prescription: Prescription) -> str:
    return (
        f"{prescription.id}: {prescription.medication_name} "
        f"(Patient ID: {prescription.patient_id}, "
        f"Date: {prescription.date_issued:{DATE_FORMAT}})"
    )


@render.register
def _(record: InventoryRecord) -> str:
    return (
        f"{record.id}: {record.name} - Qty: {record.quantity}, "
        f"Added: {record.date_added:{DATETIME_FORMAT}}"
    )


@render.register
def _(item: ElectronicItem) -> str:
    return (
        f"{item.id}: {item.name} (Brand: {item.brand}, "
        f"Warranty: {item.warranty_months} months, Qty: {item.quantity})"
    )


@render.register
def _(item: GroceryItem) -> str:
    return f"{item.id}: {item.name} (Expiry: {item.expiry_date:{DATE_FORMAT}}, Qty: {item.quantity})"


def render_error(error: Exception) -> str:
    """User-facing line for a failed operation."""
    message = error.message if isinstance(error, RecordkeepError) else str(error)
    return f"Error: {message}"
