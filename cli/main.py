# cli/main.py

"""
Main Menu for the Roster CLI.

Parses command-line options, configures logging, builds the `Roster`, registers the console
observer, and dispatches to the student, report, calculation, and storage actions.
"""

import argparse
import logging
import os
from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import calculations_menu, reports_menu, students_menu
from cli.observers import ConsoleGradeObserver
from cli.path_utils import resolve_roster_path
from core.observers import LoggingGradeObserver
from models.roster import Roster

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # the default save target until the roster is saved or loaded elsewhere
    roster = Roster(resolve_roster_path(args.file))
    roster.register_observer(ConsoleGradeObserver())
    roster.register_observer(LoggingGradeObserver())

    if args.file is not None and os.path.isfile(roster.path):
        roster_response = roster.load(roster.path)

        if not roster_response.success:
            helpers.display_response_failure(roster_response)

        else:
            print(f"\n{roster_response.detail}")

    run_cli(roster)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Manage a roster of students and their grades.",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Roster file to load at start-up; also used as the default save location.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: WARNING).",
    )

    return parser.parse_args(argv)


def run_cli(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Main Menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("STUDENT ROSTER")
    options = [
        ("Add Student", students_menu.add_student),
        ("Add Grade", students_menu.add_grade),
        ("Generate Reports", reports_menu.run),
        ("Run Calculations", calculations_menu.run),
        ("View Students", students_menu.view_students),
        ("View Student Detail", students_menu.view_student_detail),
        ("Save Roster", save_roster),
        ("Load Roster", load_roster),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program(roster)

        elif callable(menu_response):
            menu_response(roster)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def save_roster(roster: Roster) -> None:
    """
    Prompts for a file path and writes the roster to it.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - Blank input reuses the current save location, or the default location when none is set.
        - Missing parent directories are created before writing.
    """
    current = roster.path or resolve_roster_path(None)

    path_input = helpers.prompt_user_input_or_none(
        f"Enter the file to save to (leave blank to use {current}):"
    )

    path = resolve_roster_path(path_input) if path_input is not None else current

    print("\nSaving Roster ...")

    helpers.save_with_feedback(roster, path)


def load_roster(roster: Roster) -> None:
    """
    Prompts for a file path and replaces the roster with its contents.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - The file path input is cancellable.
        - Unsaved changes must be confirmed before they are discarded.
    """
    if roster.has_unsaved_changes and not helpers.confirm_action(
        "Loading will discard unsaved changes. Do you wish to continue?"
    ):
        helpers.returning_without_changes()
        return

    path_input = helpers.prompt_user_input_or_cancel(
        "Enter the file to load (leave blank to cancel):"
    )

    if path_input is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    path_input = cast(str, path_input)

    print("\nLoading Roster ...")

    roster_response = roster.load(resolve_roster_path(path_input))

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"... {roster_response.detail}")


def exit_program(roster: Roster):
    """
    Offers to save unsaved changes, displays an exit banner, and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    helpers.prompt_if_dirty(roster)

    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    main()
