# tests/test_time.py

import pytest
import random
from datetime import date, datetime, timedelta, timezone

from marketday.core.errors import MissingDateError
from marketday.core.time import civil_date, day_diff, format_date, parse_date, to_jdn


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert to_jdn(date(1970, 1, 1)) == 2440588


def test_day_diff_matches_date_arithmetic():
    random.seed(42)
    for _ in range(2000):
        a = date(1900, 1, 1) + timedelta(days=random.randint(0, 80000))
        b = date(1900, 1, 1) + timedelta(days=random.randint(0, 80000))
        assert day_diff(a, b) == (b - a).days
        assert day_diff(b, a) == -day_diff(a, b)


def test_day_diff_ignores_time_of_day():
    a = datetime(2025, 3, 29, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    b = datetime(2025, 3, 30, 0, 15)
    assert day_diff(a, b) == 1


def test_civil_date():
    assert civil_date(datetime(2025, 8, 12, 18, 0)) == date(2025, 8, 12)
    assert civil_date(date(2025, 8, 12)) == date(2025, 8, 12)


def test_parse_date():
    assert parse_date("2025-08-12") == date(2025, 8, 12)
    assert parse_date(" 2025-8-2 ") == date(2025, 8, 2)
    assert parse_date(date(2025, 8, 12)) == date(2025, 8, 12)
    assert parse_date(datetime(2025, 8, 12, 7, 30)) == date(2025, 8, 12)


@pytest.mark.parametrize("bad", [None, "", "   ", "2025-02-30", "2025-08", "yesterday", 20250812])
def test_parse_date_rejects(bad):
    with pytest.raises(MissingDateError):
        parse_date(bad)


def test_format_date():
    assert format_date(date(2025, 8, 2)) == "2025-08-02"
