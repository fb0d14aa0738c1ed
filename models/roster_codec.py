# models/roster_codec.py

"""
Flat text encoding of the roster.

One student per line, fields separated by commas:

    <first name>,<last name>,<grade 1>,<grade 2>,...,<grade N>

Embedded commas are not escaped. A student with no grades is written with only the two
name fields.

Decoding is lenient: blank lines and lines with fewer than two fields are skipped, and any
grade field that is not a plain decimal integer is dropped while the rest of the line is kept.
"""

from __future__ import annotations

import logging
import re

from models.student import Student

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","

# optional sign followed by ASCII digits only
GRADE_PATTERN = re.compile(r"[+-]?[0-9]+")


def encode_student(student: Student) -> str:
    fields = [student.first_name, student.last_name]
    fields.extend(str(grade) for grade in student.grades)

    return FIELD_SEPARATOR.join(fields)


def parse_grade(field: str) -> int | None:
    grade = field.strip()

    if not GRADE_PATTERN.fullmatch(grade):
        return None

    try:
        return int(grade)
    except ValueError:
        # longer than the interpreter's int string conversion limit
        return None

def decode_line(line: str) -> Student | None:
    """
    Parses one line of the roster file into a `Student`.

    Args:
        line (str): A single line, with or without its trailing newline.

    Returns:
        A new `Student`, or None if the line is blank or has fewer than two fields.

    Notes:
        - Grade fields that fail to parse as integers are skipped, not treated as errors.
    """
    line = line.rstrip("\r\n")

    if not line.strip():
        return None

    parts = line.split(FIELD_SEPARATOR)

    if len(parts) < 2:
        logger.debug("Skipping roster line with fewer than two fields: %r", line)
        return None

    student = Student(parts[0], parts[1])

    for field in parts[2:]:
        grade = parse_grade(field)

        if grade is None:
            logger.debug("Skipping unparsable grade %r for %s.", field, student.full_name)
            continue

        student.add_grade(grade)

    return student


def write_roster(path: str, students: list[Student]) -> None:
    """
    Writes every student to `path`, one line each, in roster order.

    Raises:
        OSError: If the file cannot be opened or written.

    Notes:
        - This intentionally overwrites existing data.
    """
    with open(path, "w", encoding="utf-8") as f:
        for student in students:
            f.write(encode_student(student) + "\n")


def read_roster(path: str) -> list[Student]:
    """
    Reads and decodes every line of `path`.

    Raises:
        OSError: If the file is missing or cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8 text.
    """
    with open(path, "r", encoding="utf-8") as f:
        lines = f.readlines()

    students = []

    for line in lines:
        student = decode_line(line)

        if student is not None:
            students.append(student)

    return students
