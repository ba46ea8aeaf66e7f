# tests/test_cycle.py

import pytest
import random
from datetime import date, datetime, timedelta, timezone

import numpy as np

from marketday.engines.cycle import (
    cycle_number,
    day_index_at,
    day_indices_between,
    dates_between,
    safe_mod,
)

ANCHOR = date(2025, 8, 12)
ORIE = 1


@pytest.mark.parametrize(
    "query, expected",
    [
        (date(2025, 8, 12), 1),  # same day
        (date(2025, 8, 16), 1),  # one full cycle later
        (date(2025, 8, 13), 2),  # next day
        (date(2025, 8, 8), 1),   # one full cycle earlier
        (date(2025, 8, 9), 2),   # three days earlier
        (date(2025, 8, 11), 0),
        (date(2025, 8, 15), 0),
        (date(2025, 7, 6), 0),   # 37 days earlier
    ],
)
def test_igbo_scenarios(query, expected):
    assert day_index_at(ANCHOR, ORIE, 4, query) == expected


def test_safe_mod_negative_dividends():
    for n in range(-50, 51):
        for m in range(1, 9):
            r = safe_mod(n, m)
            assert 0 <= r < m
            assert (n - r) % m == 0


def test_safe_mod_on_arrays():
    arr = np.arange(-20, 21)
    out = safe_mod(arr, 4)
    assert out.min() >= 0 and out.max() < 4
    assert list(out[:4]) == [0, 1, 2, 3]


def test_identity():
    random.seed(42)
    for _ in range(1000):
        n = random.randint(1, 12)
        i = random.randrange(n)
        d = date(2025, 1, 1) + timedelta(days=random.randint(-200000, 200000))
        assert day_index_at(d, i, n, d) == i


def test_periodicity():
    random.seed(42)
    for _ in range(1000):
        n = random.randint(1, 12)
        i = random.randrange(n)
        q = ANCHOR + timedelta(days=random.randint(-5000, 5000))
        k = random.randint(-300, 300)
        shifted = q + timedelta(days=k * n)
        assert day_index_at(ANCHOR, i, n, shifted) == day_index_at(ANCHOR, i, n, q)


def test_reversibility():
    random.seed(42)
    for _ in range(1000):
        n = random.randint(1, 12)
        ai = random.randrange(n)
        a = date(2000, 1, 1) + timedelta(days=random.randint(0, 20000))
        q = date(2000, 1, 1) + timedelta(days=random.randint(0, 20000))
        idx = day_index_at(a, ai, n, q)
        assert 0 <= idx < n
        assert day_index_at(q, idx, n, a) == ai


def test_degenerate_cycle():
    for delta in (-1000, -37, -1, 0, 1, 4, 365, 100000):
        assert day_index_at(ANCHOR, 0, 1, ANCHOR + timedelta(days=delta)) == 0


def test_spans_years_and_leap_days():
    # 2024 is a leap year: 366 days from 2024-08-12 to 2025-08-12, 366 % 4 == 2.
    assert day_index_at(ANCHOR, ORIE, 4, date(2024, 8, 12)) == 3
    # 2025-08-12 -> 2026-08-12 is 365 days, 365 % 4 == 1.
    assert day_index_at(ANCHOR, ORIE, 4, date(2026, 8, 12)) == 2


def test_datetimes_are_reduced_to_dates():
    late = datetime(2025, 8, 13, 23, 59, tzinfo=timezone.utc)
    early = datetime(2025, 8, 12, 0, 1)
    assert day_index_at(early, ORIE, 4, late) == 2


def test_invalid_cycle_length():
    with pytest.raises(ValueError):
        day_index_at(ANCHOR, 0, 0, ANCHOR)
    with pytest.raises(TypeError):
        day_index_at(ANCHOR, 0, 4.0, ANCHOR)


def test_cycle_number():
    assert cycle_number(ANCHOR, ORIE, 4, ANCHOR) == 0
    assert cycle_number(ANCHOR, ORIE, 4, date(2025, 8, 11)) == 0  # Eke opens the anchor's cycle
    assert cycle_number(ANCHOR, ORIE, 4, date(2025, 8, 15)) == 1
    assert cycle_number(ANCHOR, ORIE, 4, date(2025, 8, 10)) == -1


def test_vectorized_matches_scalar():
    start, end = date(2024, 12, 1), date(2025, 9, 30)
    idx = day_indices_between(ANCHOR, ORIE, 4, start, end)
    days = dates_between(start, end)
    assert len(idx) == len(days) == (end - start).days + 1
    assert days[0] == start and days[-1] == end
    for d, i in zip(days, idx):
        assert int(i) == day_index_at(ANCHOR, ORIE, 4, d)


def test_vectorized_empty_range():
    idx = day_indices_between(ANCHOR, ORIE, 4, date(2025, 8, 2), date(2025, 8, 1))
    assert idx.size == 0
    assert dates_between(date(2025, 8, 2), date(2025, 8, 1)) == []
