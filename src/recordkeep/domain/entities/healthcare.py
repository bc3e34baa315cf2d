# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Patient and prescription records for the healthcare app.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from recordkeep.domain.entities.base import Record


class Patient(Record):
    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    gender: str


class Prescription(Record):
    """A medication issued to a patient, linked by ``patient_id``."""

    patient_id: int = Field(ge=0)
    medication_name: str = Field(min_length=1)
    date_issued: date
