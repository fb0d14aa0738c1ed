# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Roster application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from cli.path_utils import ensure_parent_dir, resolve_roster_path
from core.response import Response
from models.roster import Roster


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            # retrieves action from (label, action) tuple
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === input and confirmation methods ===

# ---
# - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
# - `prompt_user_input_or_none()` returns `None` on blank input.
# - `confirm_action()` loops until the user enters a valid yes/no response.
# ---


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_unsaved_changes() -> bool:
    return confirm_action(
        "There are unsaved changes to the Roster. Do you want to save now?"
    )


def prompt_if_dirty(roster: Roster) -> None:
    if roster.has_unsaved_changes and confirm_unsaved_changes():
        save_with_feedback(roster, roster.path or resolve_roster_path(None))


def save_with_feedback(roster: Roster, path: str) -> bool:
    """
    Saves the roster to `path`, creating missing parent directories, and prints the outcome.

    Returns:
        True if the roster was saved, False otherwise.
    """
    try:
        ensure_parent_dir(path)

    except OSError as e:
        print(f"\nCould not create the directory for {path}: {e}")
        return False

    save_response = roster.save(path)

    if not save_response.success:
        display_response_failure(save_response)
        return False

    print(f"\n{save_response.detail}")
    return True


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_int_input_or_cancel(prompt: str) -> int | MenuSignal:
    """
    Prompts until the user enters an integer or leaves the input blank.

    Args:
        prompt (str): The message shown to the user.

    Returns:
        The parsed integer, or `MenuSignal.CANCEL` on blank input.
    """
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if response is MenuSignal.CANCEL:
            return MenuSignal.CANCEL

        try:
            return int(response)

        except ValueError:
            print(f"\nInvalid input: '{response}' is not a whole number.")


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
