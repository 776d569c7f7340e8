from datetime import date, datetime

import pytest

from hronline.common.datetime_utils import (
    DateConventions,
    format_date,
    format_date_display,
    format_time,
    is_weekend,
    parse_clock,
    parse_date,
)
from hronline.common.validators import format_coordinates, parse_plain_int


def test_format_date_has_no_leading_zero():
    assert format_date(date(2025, 5, 3)) == "3 Mei 2025"
    assert format_date(date(2024, 10, 15)) == "15 Oktober 2024"


def test_format_time_appends_zone_tag():
    assert format_time(datetime(2025, 5, 3, 8, 5)) == "08:05 WIB"
    assert format_time(datetime(2025, 5, 3, 17, 0)) == "17:00 WIB"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 Mei 2025", date(2025, 5, 3)),
        ("03 Mei 2025", date(2025, 5, 3)),
        ("1 Januari 2024", date(2024, 1, 1)),
        ("31 desember 2023", date(2023, 12, 31)),
        ("31 Februari 2025", None),
        ("3 May 2025", None),
        ("Mei 2025", None),
        ("", None),
    ],
)
def test_parse_date(text, expected):
    assert parse_date(text) == expected


def test_custom_month_table():
    english = DateConventions(
        month_names=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
        zone_tag="UTC",
    )

    assert format_date(date(2025, 5, 3), english) == "3 May 2025"
    assert parse_date("3 May 2025", english) == date(2025, 5, 3)
    assert format_time(datetime(2025, 5, 3, 9, 0), english) == "09:00 UTC"


def test_month_table_must_have_twelve_names():
    with pytest.raises(ValueError):
        DateConventions(month_names=("Januari",))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("08:05 WIB", (8, 5)),
        ("17:00", (17, 0)),
        ("ab:cd WIB", (0, 0)),
        ("9", (9, 0)),
        ("", (0, 0)),
        ("0_8:3_0 WIB", (0, 0)),
        ("+8:05 WIB", (0, 5)),
        ("08: 05 WIB", (8, 0)),
    ],
)
def test_parse_clock(text, expected):
    assert parse_clock(text) == expected


def test_is_weekend():
    assert is_weekend("3 Mei 2025") is True  # Saturday
    assert is_weekend("4 Mei 2025") is True  # Sunday
    assert is_weekend("5 Mei 2025") is False
    assert is_weekend("bukan tanggal") is False


def test_format_date_display():
    assert format_date_display("03 Mei 2025") == "3 Mei"
    assert format_date_display("bukan tanggal") == "bukan tanggal"


def test_format_coordinates():
    assert format_coordinates(-6.2, 106.816666) == "Lat: -6.2000, Lon: 106.8167"


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-7", -7), ("007", 7), ("1_000", None), (" 42", None), ("+5", None), ("", None), ("4 2", None)],
)
def test_parse_plain_int(text, expected):
    assert parse_plain_int(text) == expected
