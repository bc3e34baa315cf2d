# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Student grading app.

Collects students, retrying any student whose input is incomplete, invalid
or uses an ID that is already taken, then writes and prints a grade report.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from recordkeep.apps.base import ConsoleApp
from recordkeep.console import render
from recordkeep.domain import KeyedRepository
from recordkeep.domain.entities import Student
from recordkeep.errors import InputError, InvalidFieldFormatError, PersistenceError, Result
from recordkeep.persistence import write_text_report


class GradingApp(ConsoleApp):
    name = "grading"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.students: KeyedRepository[Student] = KeyedRepository("Student")

    def read_student(self) -> Student:
        student_id = self.console.integer("ID", minimum=0)
        full_name = self.console.text("Full Name")
        raw_score = self.console.text("Score")
        try:
            score = int(raw_score)
        except ValueError:
            raise InvalidFieldFormatError(
                "Score", raw_score, "Score must be a number."
            ) from None
        return Student(id=student_id, full_name=full_name, score=score)

    def collect_students(self) -> None:
        count = self.read_count("How many students do you want to enter?")
        for i in range(count):
            self.out(f"\n--- Student {i + 1} ---")
            # Retry the same student until it is stored
            while True:
                try:
                    student = self.read_student()
                except InputError as e:
                    self.report(e)
                    continue
                if self.store(self.students, student):
                    break

    def report_lines(self) -> list[str]:
        return [render(student) for student in self.students.get_all()]

    def save_report(self, path: Path | str) -> Result[Path, PersistenceError]:
        result = write_text_report(path, self.report_lines())
        if self.announce(result, f"Report saved successfully to {path}"):
            self.logger.info("Report written", path=str(path), students=len(self.students))
        return result

    def print_report(self) -> None:
        self.print_section("Student Report", self.students.get_all())

    def run(self, report_path: Path | str | None = None) -> None:
        self.collect_students()
        if report_path is None:
            answer = self.console.text(
                "\nEnter file path to save report", required=False
            )
            report_path = answer or self.settings.report_file
        self.save_report(self.settings.resolve_path(report_path))
        self.print_report()
