"""Console rendering of buckets, annotation tables and chains."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Sequence

import numpy as np

from bucket_chain.data.schema import AnnotationTable, Bucket, Chain, Timestamp


def format_timestamp(ts: Timestamp, date_format: str = "%Y-%m-%d") -> str:
    if isinstance(ts, np.datetime64):
        ts = ts.astype("datetime64[us]").item()
    if isinstance(ts, (datetime, date)):
        return ts.strftime(date_format)
    return str(ts)


def _join(values: Sequence[Timestamp], date_format: str) -> str:
    return ", ".join(format_timestamp(v, date_format) for v in values)


def format_buckets(buckets: Sequence[Bucket], date_format: str = "%Y-%m-%d") -> str:
    lines: List[str] = []
    for i, bucket in enumerate(buckets):
        lines.append(f"Bucket {i}: [{_join(bucket, date_format)}]")
    return "\n".join(lines)


def format_table(table: AnnotationTable) -> str:
    return "\n".join(
        f"Bucket {i}: [{', '.join(str(v) for v in row)}]" for i, row in enumerate(table)
    )


def format_chains(chains: Sequence[Chain], date_format: str = "%Y-%m-%d") -> str:
    return "\n".join(f"[{_join(chain, date_format)}]" for chain in chains)
