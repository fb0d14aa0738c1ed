# core/formatters.py

# all pure text utilities
# must never import from models!

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

CENTS = Decimal("0.01")

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    if not items:
        return ""

    if len(items) == 1:
        return str(items[0])

    if len(items) == 2:
        return " and ".join(str(item) for item in items)

    return ", ".join(str(item) for item in items[:-1]) + ", and " + str(items[-1])


# === grade formatters ===


def format_grades(grades: list[int]) -> str:
    return ", ".join(str(grade) for grade in grades) if grades else "[NO GRADES]"


def format_average(average: Decimal) -> str:
    with localcontext() as ctx:
        # room for every integer digit plus the two decimal places
        ctx.prec = max(ctx.prec, average.adjusted() + 4)
        return str(average.quantize(CENTS, rounding=ROUND_HALF_UP))


def format_bar(length: int, marker: str = "*") -> str:
    return marker * max(length, 0)
