# cli/menus/reports_menu.py

"""
Generate Reports menu for the Roster CLI.

Each option hands the roster to a different `ReportStrategy` and prints the rendered text.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.reports import find_report_strategy
from models.roster import Roster


def run(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Generate Reports menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Generate Reports")
    options = [
        ("Grades Report", lambda: print_report(roster, "text")),
        ("Average Grades Report", lambda: print_report(roster, "average")),
        ("Grades Chart", lambda: print_report(roster, "chart")),
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


def print_report(roster: Roster, strategy_id: str) -> None:
    strategy_response = find_report_strategy(strategy_id)

    if not strategy_response.success:
        helpers.display_response_failure(strategy_response)
        return

    roster_response = roster.generate_report(strategy_response.data["strategy"])

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"\n{roster_response.data['report']}")
