# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Healthcare records app: patients and the prescriptions issued to them.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from recordkeep.apps.base import ConsoleApp
from recordkeep.console import render
from recordkeep.domain import KeyedRepository
from recordkeep.domain.entities import Patient, Prescription


class HealthSystemApp(ConsoleApp):
    name = "healthcare"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.patients: KeyedRepository[Patient] = KeyedRepository("Patient")
        self.prescriptions: KeyedRepository[Prescription] = KeyedRepository(
            "Prescription"
        )
        self._prescription_map: dict[int, list[Prescription]] = {}

    def read_patient(self) -> Patient:
        return Patient(
            id=self.console.integer("ID", minimum=0),
            name=self.console.text("Name"),
            age=self.console.integer("Age", minimum=0),
            gender=self.console.text("Gender"),
        )

    def read_prescription(self) -> Prescription:
        return Prescription(
            id=self.console.integer("ID", minimum=0),
            patient_id=self.console.integer("Patient ID", minimum=0),
            medication_name=self.console.text("Medication Name"),
            date_issued=self.console.date(
                "Date Issued (yyyy-mm-dd)", self.settings.date_format
            ),
        )

    def seed_data(self) -> None:
        patient_count = self.read_count("How many patients to enter?")
        for i in range(patient_count):
            self.out(f"\n--- Patient {i + 1} ---")
            self.store(self.patients, self.read_record(self.read_patient))

        prescription_count = self.read_count("\nHow many prescriptions to enter?")
        for i in range(prescription_count):
            self.out(f"\n--- Prescription {i + 1} ---")
            prescription = self.read_record(self.read_prescription)
            if prescription.patient_id not in self.patients:
                self.logger.warning(
                    "Prescription references an unknown patient",
                    prescription_id=prescription.id,
                    patient_id=prescription.patient_id,
                )
            self.store(self.prescriptions, prescription)

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        """Group prescriptions by patient ID, rebuilding from scratch."""
        grouped: defaultdict[int, list[Prescription]] = defaultdict(list)
        for prescription in self.prescriptions.get_all():
            grouped[prescription.patient_id].append(prescription)
        self._prescription_map = dict(grouped)
        return self._prescription_map

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        self.print_section("All Patients", self.patients.get_all())

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        prescriptions = self.prescriptions_for(patient_id)
        if not prescriptions:
            self.out("No prescriptions found for this patient.")
            return
        self.out(f"\nPrescriptions for Patient ID {patient_id}:")
        for prescription in prescriptions:
            self.out(render(prescription))

    def run(self) -> None:
        self.seed_data()
        self.build_prescription_map()
        self.print_all_patients()
        patient_id = self.console.until_valid(
            lambda: self.console.integer("\nEnter Patient ID to view prescriptions"),
            self.report,
        )
        self.print_prescriptions_for_patient(patient_id)
