"""
marketday.engines.cycle
-----------------------
Projection of a known (date, day index) pair onto other civil dates for
fixed-length day cycles.

Dates are reduced to whole days before any subtraction, so the day count
between two dates is always an exact integer.
"""

from __future__ import annotations

from datetime import date
from typing import List, TypeVar

import numpy as np

from ..core.time import civil_date, day_diff

IntOrArray = TypeVar("IntOrArray", int, np.ndarray)


def safe_mod(n: IntOrArray, m: int) -> IntOrArray:
    """
    Non-negative modulo: result lies in [0, m) for every integer n and m > 0.

    Written as ((n % m) + m) % m so it holds for numpy arrays and any other
    remainder that may carry the dividend's sign.
    """
    return ((n % m) + m) % m


def check_cycle_length(cycle_length: int) -> int:
    if isinstance(cycle_length, bool) or not isinstance(cycle_length, (int, np.integer)):
        raise TypeError(f"cycle_length must be an int, got {type(cycle_length).__name__}")
    if cycle_length < 1:
        raise ValueError(f"cycle_length must be positive, got {cycle_length}")
    return int(cycle_length)


def day_index_at(anchor_date: date, anchor_index: int, cycle_length: int, query_date: date) -> int:
    """
    Day index of query_date in a cycle where anchor_date falls on anchor_index.

    Symmetric under swapping the pair: if i = day_index_at(a, ai, n, q) then
    day_index_at(q, i, n, a) == ai.
    """
    n = check_cycle_length(cycle_length)
    diff_days = day_diff(anchor_date, query_date)
    offset = safe_mod(diff_days, n)
    return safe_mod(anchor_index + offset, n)


def cycle_number(anchor_date: date, anchor_index: int, cycle_length: int, query_date: date) -> int:
    """Signed count of full cycles started since the anchor's cycle (0 for the anchor's own)."""
    n = check_cycle_length(cycle_length)
    return (anchor_index + day_diff(anchor_date, query_date)) // n


def day_indices_between(
    anchor_date: date,
    anchor_index: int,
    cycle_length: int,
    start: date,
    end: date,
) -> np.ndarray:
    """
    Vectorized day_index_at for every date in [start, end] (inclusive).

    Returns an empty array when end precedes start.
    """
    n = check_cycle_length(cycle_length)
    a = np.datetime64(civil_date(anchor_date), "D")
    days = np.arange(np.datetime64(civil_date(start), "D"), np.datetime64(civil_date(end), "D") + 1)
    diffs = (days - a).astype(np.int64)
    return safe_mod(anchor_index + safe_mod(diffs, n), n)


def dates_between(start: date, end: date) -> List[date]:
    """Civil dates in [start, end] (inclusive), matching day_indices_between."""
    days = np.arange(np.datetime64(civil_date(start), "D"), np.datetime64(civil_date(end), "D") + 1)
    return days.tolist()
