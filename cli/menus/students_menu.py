# cli/menus/students_menu.py

"""
Student actions for the Roster CLI.

This module covers:
- Adding new students
- Recording grades for existing students
- Viewing the roster, either as a list or one student in detail

All operations are routed through the `Roster` API; this module never touches `Student` internals directly.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from cli.menu_helpers import MenuSignal
from models.roster import Roster


# === add student ===


def add_student(roster: Roster) -> None:
    """
    Loops a prompt to add new students to the roster.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - Additions are not saved automatically.
        - Blank input at any name prompt cancels the current addition.
    """
    while True:
        names = prompt_student_name()

        if names is not None:
            first_name, last_name = names
            roster_response = roster.add_student(first_name, last_name)
            print(f"\n{roster_response.detail}")

        if not helpers.confirm_action(
            "Would you like to continue adding new students?"
        ):
            break

    helpers.returning_to("Main Menu")


def prompt_student_name() -> tuple[str, str] | None:
    first_name = helpers.prompt_user_input_or_cancel(
        "Enter the student's first name (leave blank to cancel):"
    )

    if first_name is MenuSignal.CANCEL:
        return None
    first_name = cast(str, first_name)

    last_name = helpers.prompt_user_input_or_cancel(
        "Enter the student's last name (leave blank to cancel):"
    )

    if last_name is MenuSignal.CANCEL:
        return None
    last_name = cast(str, last_name)

    return first_name, last_name


# === add grade ===


def add_grade(roster: Roster) -> None:
    """
    Prompts for a student name and an integer grade, then records the grade.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - The grade prompt repeats until the input parses as an integer.
        - Registered observers (e.g., `ConsoleGradeObserver`) report the grade when it is recorded.
    """
    names = prompt_student_name()

    if names is None:
        helpers.returning_without_changes()
        return

    first_name, last_name = names

    grade = helpers.prompt_int_input_or_cancel(
        f"Enter the grade for {first_name} {last_name} (leave blank to cancel):"
    )

    if grade is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    grade = cast(int, grade)

    roster_response = roster.add_grade(first_name, last_name, grade)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nNo grade was recorded.")

    else:
        print(f"\n{roster_response.detail}")


# === view students ===


def view_students(roster: Roster) -> None:
    """
    Prints every student on the roster with their grades, in roster order.

    Args:
        roster (Roster): The active `Roster`.
    """
    helpers.display_banner("Roster")

    students = roster.students

    if not students:
        print("\nThere are no students on the roster.")
        return

    helpers.display_results(students, True, model_formatters.format_student_oneline)


def view_student_detail(roster: Roster) -> None:
    """
    Prompts for a student name and prints that student's details.

    Args:
        roster (Roster): The active `Roster`.
    """
    names = prompt_student_name()

    if names is None:
        helpers.returning_without_changes()
        return

    roster_response = roster.find_student(*names)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    student = roster_response.data["record"]

    print(f"\n{model_formatters.format_student_multiline(student)}")
