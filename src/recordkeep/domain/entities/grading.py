# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Student records for the grading app.
"""

from __future__ import annotations

from pydantic import Field

from recordkeep.domain.entities.base import Record

# Lower bound (inclusive) for each letter grade, highest first
GRADE_BOUNDARIES: tuple[tuple[int, str], ...] = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)


def letter_grade(score: int) -> str:
    """Map a numeric score to its letter grade."""
    for lower_bound, grade in GRADE_BOUNDARIES:
        if score >= lower_bound:
            return grade
    return "F"


class Student(Record):
    full_name: str = Field(min_length=1)
    score: int

    @property
    def grade(self) -> str:
        return letter_grade(self.score)
