"""Shared fixtures and synthetic data factories for bucket chain tests."""

from __future__ import annotations

import itertools
from datetime import datetime
from typing import List, Sequence

import pytest

from bucket_chain.data.samples import make_date_buckets
from bucket_chain.data.sanity import is_chronological
from bucket_chain.engine.config.bucket_chain_config import BucketChainConfig
from bucket_chain.engine.pipeline.chain_pipeline import BucketChainPipeline


# ---------------------------------------------------------------------------
# Synthetic data factories
# ---------------------------------------------------------------------------

def d(day: int, month: int = 1, year: int = 2023) -> datetime:
    """Shorthand date."""
    return datetime(year, month, day)


def make_buckets(*days: Sequence[int]) -> List[List[datetime]]:
    """``make_buckets([1, 4], [2])`` -> January 2023 date buckets."""
    return make_date_buckets(days)


def brute_force_chains(buckets) -> List[list]:
    """Every strictly increasing pick of one element per bucket, index order."""
    if not buckets:
        return []
    return [
        list(combo)
        for combo in itertools.product(*buckets)
        if is_chronological(list(combo))
    ]


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------

@pytest.fixture
def maximal_branching():
    """Two valid choices at each of four transitions."""
    return make_buckets([1], [2, 3], [4, 5], [6, 7], [8, 9])


@pytest.fixture
def dense_overlap():
    return make_buckets([1, 2, 3], [2, 4, 6], [3, 5, 7], [8, 9])


@pytest.fixture
def interleaved():
    return make_buckets([1], [2, 4], [3, 5], [6], [7, 8])


# ---------------------------------------------------------------------------
# Pipeline shortcut fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def pipeline():
    """A pipeline with default config."""
    return BucketChainPipeline(config=BucketChainConfig())
