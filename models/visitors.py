# models/visitors.py

"""
Per-student computations applied during a roster traversal.

`Roster.visit_students()` walks the roster in order and hands each `Student` to a visitor.
Neither the roster nor the student knows which computation runs; new computations are
added by writing a new visitor.
"""

from __future__ import annotations

import core.formatters as formatters
from core.response import ErrorCode, Response
from models.student import Student


class StudentVisitor:
    label: str = "Calculation"

    def visit(self, student: Student) -> str:
        raise NotImplementedError


class AverageGradeVisitor(StudentVisitor):
    label = "Average Grade"

    def visit(self, student: Student) -> str:
        average = formatters.format_average(student.average_grade)
        return f"{student.full_name}: average grade {average}"


class HighestGradeVisitor(StudentVisitor):
    label = "Highest Grade"

    def visit(self, student: Student) -> str:
        return f"{student.full_name}: highest grade {student.highest_grade}"


class LowestGradeVisitor(StudentVisitor):
    label = "Lowest Grade"

    def visit(self, student: Student) -> str:
        return f"{student.full_name}: lowest grade {student.lowest_grade}"


STUDENT_VISITORS: dict[str, type[StudentVisitor]] = {
    "average": AverageGradeVisitor,
    "highest": HighestGradeVisitor,
    "lowest": LowestGradeVisitor,
}


def find_student_visitor(visitor_id: str) -> Response:
    """
    Looks up the visitor registered under `visitor_id`.

    Returns:
        Response: On success, data["visitor"] holds a new `StudentVisitor`. An unknown id fails with
        `ErrorCode.NOT_FOUND` and status 404.
    """
    visitor_class = STUDENT_VISITORS.get(visitor_id)

    if visitor_class is None:
        return Response.fail(
            detail=f"Unknown student visitor: '{visitor_id}'.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    return Response.succeed(
        data={
            "visitor": visitor_class(),
        },
    )
