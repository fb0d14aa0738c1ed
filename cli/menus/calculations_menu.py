# cli/menus/calculations_menu.py

"""
Run Calculations menu for the Roster CLI.

Provides per-student calculations (average, highest, and lowest grade) through `StudentVisitor`
objects, and a Top Scorers view rendered from a composite display tree.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.roster import Roster
from models.visitors import find_student_visitor

TOP_SCORERS_DEPTH = 1


def run(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Run Calculations menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Run Calculations")
    options = [
        ("Average Grade per Student", lambda: print_visit(roster, "average")),
        ("Highest Grade per Student", lambda: print_visit(roster, "highest")),
        ("Lowest Grade per Student", lambda: print_visit(roster, "lowest")),
        ("Top Scorers", lambda: print_top_scorers(roster)),
    ]
    zero_option = "Return to Main Menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Main Menu")


def print_visit(roster: Roster, visitor_id: str) -> None:
    """
    Applies the selected visitor to every student and prints the results.

    Args:
        roster (Roster): The active `Roster`.
        visitor_id (str): A key of `models.visitors.STUDENT_VISITORS`.

    Notes:
        - Results for visited students are printed even when some students were skipped or failed.
    """
    visitor_response = find_student_visitor(visitor_id)

    if not visitor_response.success:
        helpers.display_response_failure(visitor_response)
        return

    visitor = visitor_response.data["visitor"]
    roster_response = roster.visit_students(visitor)

    helpers.display_banner(visitor.label)

    helpers.display_results(roster_response.data.get("results", []))

    if not roster_response.success:
        helpers.display_response_failure(roster_response)


def print_top_scorers(roster: Roster) -> None:
    roster_response = roster.build_top_scorers_tree("Students with the highest grade")

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"\n{roster_response.detail}")
    print(f"\n{roster_response.data['tree'].display(TOP_SCORERS_DEPTH)}")
