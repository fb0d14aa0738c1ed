# models/roster.py

"""
The Roster model is the central data object of the program and represents the "source of truth" for all student records.

Students are stored in insertion order and are never removed. The roster is mutated only by adding a student, adding a grade
to the first student matching a name, or replacing its contents wholesale when loading from disk.

Every grade insertion is broadcast through a `GradeTracker` to the registered observers. Read-only queries hand the student
list to pluggable report strategies, per-student visitors, or a composite display tree built from the top scorers.

Includes attributes that are session-scoped like path (current save location) and unsaved_changes (unsaved mutations).
"""

from __future__ import annotations

import logging

import core.formatters as formatters
from core.composite import Group, Leaf
from core.errors import EmptyDataError
from core.observers import GradeObserver, GradeTracker
from core.response import ErrorCode, Response
from models.reports import ReportStrategy
from models.roster_codec import read_roster, write_roster
from models.student import Student
from models.visitors import StudentVisitor

logger = logging.getLogger(__name__)


class Roster:

    def __init__(self, path: str | None = None):
        self._students: list[Student] = []
        self._grade_tracker: GradeTracker = GradeTracker()
        self._path: str | None = path
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def students(self) -> list[Student]:
        return self._students.copy()

    @property
    def path(self) -> str | None:
        return self._path

    @path.setter
    def path(self, path: str | None) -> None:
        self._path = path

    # --- status markers ---

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === persistence and import ===

    def save(self, path: str | None = None) -> Response:
        """
        Serializes and writes every student to a flat text file.

        Args:
            path (str | None):
                - The file path where the roster will be saved.
                - If no argument is provided, `self.path` will be used by default.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was written to disk.
                    - False if no path is known or the file could not be written.
                - detail (str | None):
                    - On success, "Roster successfully saved to disk."
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if neither `path` nor `self.path` is set.
                    - `ErrorCode.IO_ERROR` if OSError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "path" (str): The path that was written.

        Notes:
            - This intentionally overwrites existing data.
            - On success, `self.path` is updated and the unsaved changes flag is cleared.
        """
        target = path if path is not None else self._path

        if target is None:
            return Response.fail(
                detail="No save location has been set for this roster.",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            write_roster(target, self._students)

        except OSError as e:
            return Response.fail(
                detail=f"Failed to write roster to disk: {e}",
                error=ErrorCode.IO_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._path = target
            self._unsaved_changes = False
            logger.debug("Saved %d students to %s.", len(self._students), target)

            return Response.succeed(
                detail="Roster successfully saved to disk.",
                data={
                    "path": target,
                },
            )

    def load(self, path: str) -> Response:
        """
        Replaces the roster's students with those read from a flat text file.

        Args:
            path (str): The file path where the roster data is stored.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read and the roster replaced.
                    - False if the file is missing, unreadable, or not valid text.
                - detail (str | None):
                    - On success, a confirmation including the number of students loaded.
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.IO_ERROR` if OSError or UnicodeDecodeError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the file does not exist
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): The loaded students, in file order.

        Notes:
            - The in-memory roster is cleared before the file is opened; a failed load leaves the roster empty.
            - Malformed lines and unparsable grades are skipped, not reported.
            - Loading does not notify observers.
        """
        self._students.clear()

        try:
            loaded_students = read_roster(path)

        except FileNotFoundError as e:
            return Response.fail(
                detail=f"Roster file not found: {e}",
                error=ErrorCode.IO_ERROR,
                status_code=404,
            )

        except (OSError, UnicodeDecodeError) as e:
            return Response.fail(
                detail=f"Failed to read roster from disk: {e}",
                error=ErrorCode.IO_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._students.extend(loaded_students)
            self._path = path
            self._unsaved_changes = False
            logger.debug("Loaded %d students from %s.", len(loaded_students), path)

            return Response.succeed(
                detail=f"Roster successfully loaded: {len(loaded_students)} students.",
                data={
                    "records": loaded_students.copy(),
                },
            )

    # === data accessors ===

    def find_student(self, first_name: str, last_name: str) -> Response:
        """
        Looks up the first `Student` in roster order whose first and last name match exactly.

        Args:
            first_name (str): The student's first name.
            last_name (str): The student's last name.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a matching `Student` was found.
                    - False if no student matches.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no matching record is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The first matching student.

        Notes:
            - This method is read-only and does not raise.
            - Homonyms are not disambiguated; later students with the same name are unreachable by name.
        """
        for student in self._students:
            if student.matches(first_name, last_name):
                return Response.succeed(
                    data={
                        "record": student,
                    },
                )

        return Response.fail(
            detail=f"No student found with the name '{first_name} {last_name}'.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    def find_students_with_highest_grade(self) -> Response:
        """
        Finds every `Student` whose grades include the highest grade on the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the highest grade could be computed.
                    - False if the roster is empty or any student has no grades.
                - detail (str | None):
                    - On success, a summary naming the top scorers.
                    - On failure, a human-readable explanation of the problem.
                - error (ErrorCode | str | None):
                    - `ErrorCode.EMPTY_DATA` if the roster or any grade sequence is empty.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): Top scorers, in roster order.
                        - "grade" (int): The highest grade on the roster.

        Notes:
            - This method is read-only and does not raise.
            - A student counts once no matter how many times they earned the highest grade.
        """
        if not self._students:
            return Response.fail(
                detail="Cannot find the highest grade: the roster is empty.",
                error=ErrorCode.EMPTY_DATA,
            )

        try:
            highest_grade = max(student.highest_grade for student in self._students)

            top_scorers = [
                student for student in self._students if student.has_grade(highest_grade)
            ]

        except EmptyDataError as e:
            return Response.fail(
                detail=f"Cannot find the highest grade: {e}",
                error=ErrorCode.EMPTY_DATA,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            names = formatters.format_list_with_and([s.full_name for s in top_scorers])

            return Response.succeed(
                detail=f"Highest grade {highest_grade} earned by {names}.",
                data={
                    "records": top_scorers,
                    "grade": highest_grade,
                },
            )

    # === rendering ===

    def generate_report(self, strategy: ReportStrategy) -> Response:
        """
        Renders the whole roster with the given report strategy.

        Args:
            strategy (ReportStrategy): The strategy used to render the students.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the strategy rendered every student.
                    - False if the strategy needs an aggregate over a student with no grades.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.EMPTY_DATA` if the strategy raised `EmptyDataError`.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "report" (str): The rendered report text.

        Notes:
            - This method is read-only; the roster does not interpret the report.
        """
        try:
            report = strategy.render(self.students)

        except EmptyDataError as e:
            return Response.fail(
                detail=f"Report could not be generated: {e}",
                error=ErrorCode.EMPTY_DATA,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "report": report,
                },
            )

    def visit_students(self, visitor: StudentVisitor) -> Response:
        """
        Applies a visitor to every student in roster order.

        Attempts to visit each student individually. A failure for one student never stops the traversal: students with no
        grades are recorded as skipped, and students for whom the visitor raised any other error are logged and recorded as
        failed.

        Args:
            visitor (StudentVisitor): The per-student computation to apply.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every student was visited successfully.
                    - False if one or more students were skipped or failed.
                - detail (str | None):
                    - Indication of complete or partial success.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` if the visitor raised an unexpected error for any student.
                    - `ErrorCode.EMPTY_DATA` if one or more students had no grades (and nothing failed).
                - status_code (int | None):
                    - 200 if every student was visited
                    - 400 on failure
                - data (dict | None):
                    - "results" (list[str]): Rendered results for visited students, in roster order.
                    - "skipped" (list[Student]): Students with no grades.
                    - "failed" (list[Student]): Students for whom the visitor raised an unexpected error.

        Notes:
            - This method is read-only and performs no aggregation of its own.
        """
        results = []
        skipped = []
        failed = []

        for student in self.students:
            try:
                results.append(visitor.visit(student))

            except EmptyDataError as e:
                logger.debug("Visitor skipped %s: %s", student.full_name, e)
                skipped.append(student)

            except Exception:
                logger.exception("Visitor failed for %s.", student.full_name)
                failed.append(student)

        data = {
            "results": results,
            "skipped": skipped,
            "failed": failed,
        }

        if failed:
            names = formatters.format_list_with_and([s.full_name for s in failed])

            return Response.fail(
                detail=f"Calculation failed for {names}.",
                error=ErrorCode.INTERNAL_ERROR,
                data=data,
            )

        elif skipped:
            names = formatters.format_list_with_and([s.full_name for s in skipped])

            return Response.fail(
                detail=f"No grades recorded for {names}.",
                error=ErrorCode.EMPTY_DATA,
                data=data,
            )

        else:
            return Response.succeed(
                detail="All students successfully visited.",
                data=data,
            )

    def build_top_scorers_tree(self, title: str = "Top Scorers") -> Response:
        """
        Builds a display tree with one leaf for each student holding the highest grade.

        Args:
            title (str, optional): The name of the root group. Defaults to "Top Scorers".

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the tree was built.
                    - False if the highest grade could not be computed.
                - detail (str | None):
                    - The detail of `find_students_with_highest_grade()`.
                - error (ErrorCode | str | None):
                    - Propagated from `find_students_with_highest_grade()`.
                - status_code (int | None):
                    - Propagated from `find_students_with_highest_grade()`.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "tree" (Group): A fresh root group of `Leaf` nodes named after the top scorers.

        Notes:
            - This method is read-only. A new tree is built on every call.
        """
        highest_response = self.find_students_with_highest_grade()

        if not highest_response.success:
            return highest_response

        tree = Group(title)

        for student in highest_response.data["records"]:
            tree.add(Leaf(student.full_name))

        return Response.succeed(
            detail=highest_response.detail,
            data={
                "tree": tree,
            },
        )

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        """
        Marks the roster as having unsaved changes.
        """
        self._unsaved_changes = True

    def add_student(self, first_name: str, last_name: str) -> Response:
        """
        Appends a new `Student` with no grades to the roster.

        Args:
            first_name (str): The student's first name.
            last_name (str): The student's last name.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - Always True; duplicates are not checked.
                - detail (str | None):
                    - A simple confirmation message.
                - error (ErrorCode | str | None):
                    - None.
                - status_code (int | None):
                    - 200
                - data (dict | None): Payload with the following keys:
                    - "record" (Student): The added `Student` object.

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()`.
        """
        student = Student(first_name, last_name)
        self._students.append(student)
        self._mark_dirty()

        logger.debug("Added student %s.", student.full_name)

        return Response.succeed(
            detail=f"{student.full_name} successfully added to the roster.",
            data={
                "record": student,
            },
        )

    def add_grade(self, first_name: str, last_name: str, grade: int) -> Response:
        """
        Appends a grade to the first matching student and notifies every registered observer.

        Args:
            first_name (str): The student's first name.
            last_name (str): The student's last name.
            grade (int): The grade to record.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the grade was recorded.
                    - False if the student cannot be found or the grade is not an integer.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student matches the name.
                    - `ErrorCode.INVALID_FIELD_VALUE` if `grade` is not an int.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The student who received the grade.

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
            - On failure nothing is mutated and no observer is notified.
            - Observers are notified after the grade is stored and before this method returns. Observer failures are isolated by the `GradeTracker`.
        """
        if isinstance(grade, bool) or not isinstance(grade, int):
            return Response.fail(
                detail=f"Grade must be an integer, got {grade!r}.",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        find_response = self.find_student(first_name, last_name)

        if not find_response.success:
            return Response.fail(
                detail=f"Failed to add grade: {find_response.detail}",
                error=find_response.error,
                status_code=find_response.status_code,
            )

        student = find_response.data["record"]
        student.add_grade(grade)
        self._mark_dirty()

        logger.debug("Recorded grade %s for %s.", grade, student.full_name)

        self._grade_tracker.notify(student.full_name, grade)

        return Response.succeed(
            detail=f"Grade {grade} successfully recorded for {student.full_name}.",
            data={
                "record": student,
            },
        )

    # --- observer registration ---

    def register_observer(self, observer: GradeObserver) -> None:
        self._grade_tracker.register(observer)

    def remove_observer(self, observer: GradeObserver) -> None:
        self._grade_tracker.unregister(observer)

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)
