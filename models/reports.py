# models/reports.py

"""
Whole-roster report strategies.

A report strategy turns the full list of students into a block of text. Strategies are
pure: they read student data but never mutate it. The `Roster` hands its students to
whichever strategy the caller selects and does not interpret the output.

Available strategies:
- `TextReportStrategy`: every student with their raw grades in insertion order.
- `AverageReportStrategy`: every student with their mean grade to two decimal places.
- `ChartReportStrategy`: every student with a bar whose length is their floored mean grade.
"""

from __future__ import annotations

import core.formatters as formatters
from core.response import ErrorCode, Response
from models.student import Student


class ReportStrategy:
    title: str = "Report"

    def render(self, students: list[Student]) -> str:
        """
        Renders the report for the given students.

        Args:
            students (list[Student]): The students to report on, in roster order.

        Returns:
            The report text, starting with a banner title.

        Raises:
            EmptyDataError: If the strategy needs an aggregate and a student has no grades.
        """
        lines = [formatters.format_banner_text(self.title)]
        lines.extend(self.render_student(student) for student in students)

        return "\n".join(lines)

    def render_student(self, student: Student) -> str:
        raise NotImplementedError


class TextReportStrategy(ReportStrategy):
    title = "Grades Report"

    def render_student(self, student: Student) -> str:
        return f"{student.full_name}: {formatters.format_grades(student.grades)}"


class AverageReportStrategy(ReportStrategy):
    title = "Average Grades Report"

    def render_student(self, student: Student) -> str:
        average = formatters.format_average(student.average_grade)
        return f"{student.full_name}: average {average}"


class ChartReportStrategy(ReportStrategy):
    title = "Grades Chart"

    def __init__(self, marker: str = "*"):
        self._marker = marker

    def render_student(self, student: Student) -> str:
        bar = formatters.format_bar(student.floored_average_grade, self._marker)
        return f"{student.full_name}: {bar}"


REPORT_STRATEGIES: dict[str, type[ReportStrategy]] = {
    "text": TextReportStrategy,
    "average": AverageReportStrategy,
    "chart": ChartReportStrategy,
}


def find_report_strategy(strategy_id: str) -> Response:
    """
    Looks up the report strategy registered under `strategy_id`.

    Args:
        strategy_id (str): A key of `REPORT_STRATEGIES`.

    Returns:
        Response: A structured response with the following contract:
            - success (bool): True if a strategy is registered under `strategy_id`.
            - error (ErrorCode | str | None): `ErrorCode.NOT_FOUND` if the id is unknown.
            - status_code (int | None): 200 on success, 404 if the id is unknown.
            - data (dict | None): On success, "strategy" (ReportStrategy) is a new instance.
    """
    strategy_class = REPORT_STRATEGIES.get(strategy_id)

    if strategy_class is None:
        return Response.fail(
            detail=f"Unknown report strategy: '{strategy_id}'.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    return Response.succeed(
        data={
            "strategy": strategy_class(),
        },
    )
