from datetime import date

import pytest

from app.services.formatting import format_date_range


@pytest.mark.parametrize("start, end, current_year, expected", [
    (date(2023, 7, 15), date(2023, 7, 25), 2023, "July 15 - July 25"),
    (date(2023, 7, 15), date(2023, 7, 25), 2024, "July 15 - July 25, 2023"),
    (date(2023, 12, 20), date(2024, 1, 5), 2024, "December 20, 2023 - January 5, 2024"),
    (date(2023, 12, 20), date(2024, 1, 5), 2023, "December 20, 2023 - January 5, 2024"),
    (date(2023, 3, 5), date(2023, 4, 9), 2023, "March 5 - April 9"),
])
def test_format_date_range(start, end, current_year, expected):
    assert format_date_range(start, end, current_year) == expected


def test_defaults_to_current_calendar_year():
    this_year = date.today().year
    assert format_date_range(date(this_year, 1, 2), date(this_year, 1, 3)) == "January 2 - January 3"
