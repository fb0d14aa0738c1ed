# cli/path_utils.py

import os

DEFAULT_ROSTER_FILENAME = "roster.txt"


def get_default_roster_path() -> str:
    """
    Returns the default roster file location: `~/Documents/Rosters/roster.txt`.
    """
    documents = os.path.join(os.path.expanduser("~"), "Documents")
    return os.path.join(documents, "Rosters", DEFAULT_ROSTER_FILENAME)


def resolve_roster_path(user_input: str | None) -> str:
    """
    Resolves a roster file path from user input or the default location.

    Args:
        user_input (str | None): An optional user-specified file path. If None or blank, the default path is used.

    Returns:
        An absolute path string with `~` expanded.
    """
    if user_input is None or not user_input.strip():
        return get_default_roster_path()

    return os.path.abspath(os.path.expanduser(user_input.strip()))


def ensure_parent_dir(file_path: str) -> None:
    """
    Creates the parent directory of `file_path` (including intermediate directories) if it does not exist.
    """
    parent = os.path.dirname(file_path)

    if parent:
        os.makedirs(parent, exist_ok=True)
