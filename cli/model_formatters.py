# cli/model_formatters.py

# anything that renders domain objects for the console
from textwrap import dedent

import core.formatters as formatters
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"{student.full_name:<25} | {formatters.format_grades(student.grades)}"


def format_student_multiline(student: Student) -> str:
    average = (
        formatters.format_average(student.average_grade)
        if student.has_grades
        else "[NO GRADES]"
    )

    return dedent(
        f"""\
        Student:
        ... Name: {student.full_name}
        ... Grades: {formatters.format_grades(student.grades)}
        ... Average: {average}"""
    )
