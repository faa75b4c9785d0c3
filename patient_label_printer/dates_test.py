from datetime import date, timedelta

import pytest

from .dates import format_date_ddmmyyyy


@pytest.mark.parametrize("text, expected", [
    ("15031985", "15/03/1985"),
    ("15/03/1985", "15/03/1985"),
    ("  01012000 ", "01/01/2000"),
    ("29022024", "29/02/2024"),
    ("31/12/1999", "31/12/1999"),
])
def test_valid_dates_are_normalised(text, expected):
    assert format_date_ddmmyyyy(text) == expected


@pytest.mark.parametrize("text", [
    "",
    "1503198",
    "150319851",
    "15-03-1985",
    "15/3/1985",
    "15/031985",
    "abcdefgh",
    "30021999",
    "29022023",
    "15131985",
    "00011990",
    "01000000",
    "32/01/2000",
])
def test_invalid_dates_are_rejected(text):
    assert format_date_ddmmyyyy(text) is None


def test_every_day_of_a_leap_year_round_trips():
    day = date(2024, 1, 1)
    while day.year == 2024:
        text = day.strftime("%d%m%Y")
        assert format_date_ddmmyyyy(text) == day.strftime("%d/%m/%Y")
        day += timedelta(days=1)
