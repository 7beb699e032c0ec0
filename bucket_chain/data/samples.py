"""Sample bucket sets for demonstration and smoke tests."""

from __future__ import annotations

from datetime import datetime
from typing import List, Sequence


def make_date_buckets(
    days_per_bucket: Sequence[Sequence[int]],
    year: int = 2023,
    month: int = 1,
) -> List[List[datetime]]:
    """Build buckets of dates from day-of-month numbers.

    ``make_date_buckets([[1, 4], [2]])`` gives
    ``[[2023-01-01, 2023-01-04], [2023-01-02]]``.
    """
    return [[datetime(year, month, day) for day in days] for days in days_per_bucket]


def create_sample_buckets() -> List[List[datetime]]:
    """Three small buckets with both dead ends and branching."""
    return make_date_buckets([[1, 4, 5], [2, 3], [6, 7]])
