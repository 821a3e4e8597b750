from datetime import date
from typing import Optional

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _month_day(d: date) -> str:
    return f"{MONTH_NAMES[d.month - 1]} {d.day}"


def format_date_range(start: date, end: date, current_year: Optional[int] = None) -> str:
    """
    Human-readable range for tournament listings.

    - different years:            "December 20, 2023 - January 5, 2024"
    - same year, not this year:   "July 15 - July 25, 2023"
    - same year, this year:       "July 15 - July 25"

    `current_year` defaults to today's year; pass it explicitly for
    deterministic output.
    """
    if current_year is None:
        current_year = date.today().year

    if start.year != end.year:
        return f"{_month_day(start)}, {start.year} - {_month_day(end)}, {end.year}"
    if start.year != current_year:
        return f"{_month_day(start)} - {_month_day(end)}, {start.year}"
    return f"{_month_day(start)} - {_month_day(end)}"
