# tests/test_roster_codec.py

import pytest

from models.roster_codec import (
    decode_line,
    encode_student,
    parse_grade,
    read_roster,
    write_roster,
)
from models.student import Student


def test_encode_student(sample_student):
    assert encode_student(sample_student) == "Sean,Cameron,80,90,100"


def test_encode_student_without_grades(ungraded_student):
    assert encode_student(ungraded_student) == "Paul,Atreides"


def test_decode_line():
    student = decode_line("Sean,Cameron,80,90,100\n")

    assert student.full_name == "Sean Cameron"
    assert student.grades == [80, 90, 100]


def test_decode_line_skips_unparsable_grades():
    student = decode_line("Sean,Cameron,80,A+,,90, 95 ")

    assert student.grades == [80, 90, 95]


@pytest.mark.parametrize(
    "field, expected",
    [
        ("90", 90),
        (" +5 ", 5),
        ("-3", -3),
        ("007", 7),
        ("1_000", None),
        ("٣", None),
        ("９０", None),
        ("+", None),
        ("9.5", None),
        ("", None),
    ],
)
def test_parse_grade_accepts_only_ascii_integers(field, expected):
    assert parse_grade(field) == expected


def test_decode_line_skips_non_ascii_and_underscored_grades():
    student = decode_line("Ada,Lovelace,1_000,٣,+5,-3")

    assert student.grades == [5, -3]


def test_decode_line_with_only_names():
    student = decode_line("Paul,Atreides")

    assert student.full_name == "Paul Atreides"
    assert student.grades == []


@pytest.mark.parametrize("line", ["", "\n", "   \n", "Cameron\n"])
def test_decode_line_skips_blank_and_short_lines(line):
    assert decode_line(line) is None


def test_write_and_read_roster(tmp_path):
    path = str(tmp_path / "roster.txt")
    students = [
        Student("Ada", "Lovelace", [70, 90]),
        Student("Alan", "Turing"),
        Student("Grace", "Hopper", [85, 85]),
    ]

    write_roster(path, students)

    with open(path) as f:
        assert f.read() == "Ada,Lovelace,70,90\nAlan,Turing\nGrace,Hopper,85,85\n"

    loaded = read_roster(path)

    assert [s.full_name for s in loaded] == ["Ada Lovelace", "Alan Turing", "Grace Hopper"]
    assert [s.grades for s in loaded] == [[70, 90], [], [85, 85]]


def test_read_roster_skips_malformed_lines(tmp_path):
    path = tmp_path / "roster.txt"
    path.write_text("Ada,Lovelace,70\n\nnonsense\nAlan,Turing,x,88\n")

    loaded = read_roster(str(path))

    assert [s.full_name for s in loaded] == ["Ada Lovelace", "Alan Turing"]
    assert [s.grades for s in loaded] == [[70], [88]]


def test_read_missing_roster_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_roster(str(tmp_path / "missing.txt"))
