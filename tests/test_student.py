# tests/test_student.py

from decimal import Decimal

import pytest

from core.errors import EmptyDataError
from models.student import Student


def test_student_attributes(sample_student):
    assert sample_student.first_name == "Sean"
    assert sample_student.last_name == "Cameron"
    assert sample_student.full_name == "Sean Cameron"
    assert sample_student.grades == [80, 90, 100]
    assert sample_student.has_grades


def test_new_student_has_no_grades():
    student = Student("Paul", "Atreides")

    assert student.grades == []
    assert not student.has_grades


def test_add_grade_preserves_order_and_duplicates(ungraded_student):
    ungraded_student.add_grade(75)
    ungraded_student.add_grade(60)
    ungraded_student.add_grade(75)

    assert ungraded_student.grades == [75, 60, 75]


def test_grades_returns_copy(sample_student):
    grades = sample_student.grades
    grades.append(0)

    assert sample_student.grades == [80, 90, 100]


def test_grade_aggregates(sample_student):
    assert sample_student.average_grade == 90
    assert sample_student.highest_grade == 100
    assert sample_student.lowest_grade == 80


@pytest.mark.parametrize(
    "aggregate",
    ["average_grade", "floored_average_grade", "highest_grade", "lowest_grade"],
)
def test_aggregates_on_empty_grades_raise(ungraded_student, aggregate):
    with pytest.raises(EmptyDataError, match="Paul Atreides"):
        getattr(ungraded_student, aggregate)


def test_matches(sample_student):
    assert sample_student.matches("Sean", "Cameron")
    assert not sample_student.matches("Cameron", "Sean")
    assert not sample_student.matches("sean", "cameron")


def test_has_grade(sample_student):
    assert sample_student.has_grade(90)
    assert not sample_student.has_grade(95)


def test_student_to_str(sample_student):
    assert sample_student.__str__() == "STUDENT: Sean Cameron - (3 grades)"


def test_average_grade_is_exact():
    student = Student("Ada", "Lovelace", [1, 2, 2])

    assert student.average_grade.quantize(Decimal("0.0001")) == Decimal("1.6667")
    assert student.floored_average_grade == 1


def test_average_of_huge_grades():
    huge = int("9" * 400)
    student = Student("Ada", "Lovelace", [huge, huge])

    assert student.average_grade == huge
    assert student.floored_average_grade == huge


def test_floored_average_rounds_down_for_negative_totals():
    assert Student("Ada", "Lovelace", [-3, -4]).floored_average_grade == -4
