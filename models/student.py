# models/student.py

"""
Represents a student on the roster.

Stores the identifying first and last name and an ordered sequence of integer grades.
Grades are append-only: insertion order is chronological order and duplicates are allowed.

Identity is the (first name, last name) pair. Homonyms are not deduplicated; two students
with identical names are distinct records.

Includes functionality for:
- Appending grades
- Computing the average, highest, and lowest grade
- Matching a student against a first and last name
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from core.errors import EmptyDataError

# significant digits kept after the integer part of an average
AVERAGE_FRACTION_DIGITS = 10


class Student:

    def __init__(
        self,
        first_name: str,
        last_name: str,
        grades: list[int] | None = None,
    ):
        self._first_name: str = first_name
        self._last_name: str = last_name
        self._grades: list[int] = list(grades or [])

    # === properties ===

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def grades(self) -> list[int]:
        return self._grades.copy()

    @property
    def has_grades(self) -> bool:
        return bool(self._grades)

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._first_name}, {self._last_name}, {self._grades})"

    def __str__(self) -> str:
        return f"STUDENT: {self.full_name} - ({len(self._grades)} grades)"

    # === data accessors ===

    def matches(self, first_name: str, last_name: str) -> bool:
        return self._first_name == first_name and self._last_name == last_name

    def has_grade(self, grade: int) -> bool:
        return grade in self._grades

    # --- grade aggregates ---

    @property
    def average_grade(self) -> Decimal:
        """
        Returns the exact arithmetic mean of the student's grades.

        Raises:
            EmptyDataError: If the student has no grades.

        Notes:
            - Computed with `Decimal` so grades of any size yield a mean; precision covers every integer digit of the total.
        """
        self._require_grades("average")
        total = sum(self._grades)

        with localcontext() as ctx:
            # bit_length // 3 + 1 bounds the number of decimal digits in the total
            ctx.prec = abs(total).bit_length() // 3 + AVERAGE_FRACTION_DIGITS
            return Decimal(total) / len(self._grades)

    @property
    def floored_average_grade(self) -> int:
        self._require_grades("average")
        return sum(self._grades) // len(self._grades)

    @property
    def highest_grade(self) -> int:
        self._require_grades("highest")
        return max(self._grades)

    @property
    def lowest_grade(self) -> int:
        self._require_grades("lowest")
        return min(self._grades)

    # === data manipulators ===

    def add_grade(self, grade: int) -> None:
        self._grades.append(grade)

    # === data validators ===

    def _require_grades(self, aggregate: str) -> None:
        if not self._grades:
            raise EmptyDataError(
                f"Cannot compute the {aggregate} grade for {self.full_name}: no grades recorded."
            )
