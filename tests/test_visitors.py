# tests/test_visitors.py

import pytest

from core.errors import EmptyDataError
from core.response import ErrorCode
from models.visitors import (
    AverageGradeVisitor,
    HighestGradeVisitor,
    LowestGradeVisitor,
    find_student_visitor,
)


def test_average_visitor(sample_student):
    assert AverageGradeVisitor().visit(sample_student) == "Sean Cameron: average grade 90.00"


def test_highest_and_lowest_visitors(sample_student):
    assert HighestGradeVisitor().visit(sample_student) == "Sean Cameron: highest grade 100"
    assert LowestGradeVisitor().visit(sample_student) == "Sean Cameron: lowest grade 80"


@pytest.mark.parametrize(
    "visitor", [AverageGradeVisitor(), HighestGradeVisitor(), LowestGradeVisitor()]
)
def test_visitors_reject_empty_grades(visitor, ungraded_student):
    with pytest.raises(EmptyDataError):
        visitor.visit(ungraded_student)


@pytest.mark.parametrize(
    "visitor_id, visitor_class",
    [
        ("average", AverageGradeVisitor),
        ("highest", HighestGradeVisitor),
        ("lowest", LowestGradeVisitor),
    ],
)
def test_find_student_visitor(visitor_id, visitor_class):
    response = find_student_visitor(visitor_id)

    assert response.success
    assert isinstance(response.data["visitor"], visitor_class)


def test_find_student_visitor_unknown_id():
    response = find_student_visitor("median")

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404
