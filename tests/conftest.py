# tests/conftest.py

import pytest

from models.roster import Roster
from models.student import Student


class RecordingObserver:
    def __init__(self):
        self.events: list[tuple[str, int]] = []

    def update(self, student_name: str, grade: int) -> None:
        self.events.append((student_name, grade))


class FailingObserver:
    def update(self, student_name: str, grade: int) -> None:
        raise RuntimeError("observer failure")


@pytest.fixture
def empty_roster():
    return Roster()


@pytest.fixture
def sample_roster():
    # A: [70, 90], B: [90], C: [85]
    roster = Roster()

    roster.add_student("Ada", "Lovelace")
    roster.add_student("Alan", "Turing")
    roster.add_student("Grace", "Hopper")

    roster.add_grade("Ada", "Lovelace", 70)
    roster.add_grade("Ada", "Lovelace", 90)
    roster.add_grade("Alan", "Turing", 90)
    roster.add_grade("Grace", "Hopper", 85)

    return roster


@pytest.fixture
def sample_student():
    return Student("Sean", "Cameron", [80, 90, 100])


@pytest.fixture
def ungraded_student():
    return Student("Paul", "Atreides")


@pytest.fixture
def recording_observer():
    return RecordingObserver()


@pytest.fixture
def failing_observer():
    return FailingObserver()
