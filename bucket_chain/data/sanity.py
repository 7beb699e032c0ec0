"""Sanity-check utilities for bucket inputs and annotation tables.

Three levels of verification:

1. **Input order** -- every bucket must be ascending (ties allowed).
2. **Table shape** -- one row per bucket, one entry per timestamp, entries
   either ``NO_SUCCESSOR`` or a valid index into the next bucket.
3. **Annotation report** -- per-row counts of sentinels and of entries that
   break successor validity or sentinel correctness, as a human-readable
   summary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from bucket_chain.data.schema import NO_SUCCESSOR, AnnotationTable, Bucket, Chain


class AnnotationTableError(ValueError):
    """Annotation table does not match the shape of its buckets."""


class UnsortedBucketError(ValueError):
    """A bucket is not in ascending order."""


# ======================================================================
# Input order
# ======================================================================

def is_bucket_sorted(bucket: Bucket) -> bool:
    return all(bucket[k] <= bucket[k + 1] for k in range(len(bucket) - 1))


def find_unsorted_buckets(buckets: Optional[Sequence[Bucket]]) -> List[int]:
    """Return indices of buckets that are not ascending."""
    if buckets is None or len(buckets) == 0:
        return []
    return [i for i, bucket in enumerate(buckets) if not is_bucket_sorted(bucket)]


def is_chronological(chain: Chain) -> bool:
    """True when every element is strictly later than the one before it."""
    return all(chain[k] < chain[k + 1] for k in range(len(chain) - 1))


# ======================================================================
# Table shape
# ======================================================================

def validate_annotation_table(
    buckets: Sequence[Bucket],
    table: AnnotationTable,
) -> None:
    """Raise :class:`AnnotationTableError` if *table* cannot index *buckets*.

    Rows for the last bucket, and rows followed by an empty bucket, are only
    checked for length: their values never index anything.
    """
    if len(table) != len(buckets):
        raise AnnotationTableError(
            f"table has {len(table)} rows but there are {len(buckets)} buckets"
        )
    for i, (bucket, row) in enumerate(zip(buckets, table)):
        if len(row) != len(bucket):
            raise AnnotationTableError(
                f"row {i} has {len(row)} entries but bucket {i} has {len(bucket)}"
            )
        if i == len(buckets) - 1:
            continue
        next_len = len(buckets[i + 1])
        if next_len == 0:
            continue
        for j, value in enumerate(row):
            if value != NO_SUCCESSOR and not 0 <= value < next_len:
                raise AnnotationTableError(
                    f"entry [{i}][{j}] = {value} is outside bucket {i + 1} "
                    f"(length {next_len})"
                )


# ======================================================================
# Annotation report
# ======================================================================

@dataclass
class RowReport:
    """Counts for one annotated row (bucket ``bucket_idx`` vs. the next)."""

    bucket_idx: int
    num_entries: int
    num_sentinel: int
    invalid_successors: List[int] = field(default_factory=list)
    missed_successors: List[int] = field(default_factory=list)

    @property
    def sentinel_ratio(self) -> float:
        if self.num_entries == 0:
            return 0.0
        return self.num_sentinel / self.num_entries


@dataclass
class AnnotationReport:
    rows: List[RowReport] = field(default_factory=list)

    @property
    def num_invalid_successors(self) -> int:
        return sum(len(r.invalid_successors) for r in self.rows)

    @property
    def num_missed_successors(self) -> int:
        return sum(len(r.missed_successors) for r in self.rows)

    @property
    def is_consistent(self) -> bool:
        return self.num_invalid_successors == 0 and self.num_missed_successors == 0


def check_annotation(buckets: Sequence[Bucket], table: AnnotationTable) -> AnnotationReport:
    """Check successor validity and sentinel correctness for every row.

    ``invalid_successors`` lists element indices whose annotated successor is
    not strictly later.  ``missed_successors`` lists element indices marked
    ``NO_SUCCESSOR`` although some later timestamp exists in the next bucket.
    """
    validate_annotation_table(buckets, table)
    report = AnnotationReport()
    for i in range(len(buckets) - 1):
        source, target = buckets[i], buckets[i + 1]
        row = np.asarray(table[i], dtype=np.int64)
        row_report = RowReport(
            bucket_idx=i,
            num_entries=int(row.size),
            num_sentinel=int(np.count_nonzero(row == NO_SUCCESSOR)),
        )
        if len(target) == 0:
            report.rows.append(row_report)
            continue
        for j, k in enumerate(row.tolist()):
            if k == NO_SUCCESSOR:
                if any(source[j] < t for t in target):
                    row_report.missed_successors.append(j)
            elif not source[j] < target[k]:
                row_report.invalid_successors.append(j)
        report.rows.append(row_report)
    return report


def print_annotation_report(buckets: Sequence[Bucket], table: AnnotationTable) -> str:
    """Print and return a human-readable annotation report."""
    report = check_annotation(buckets, table)
    lines = [f"=== Annotation: {len(buckets)} buckets ==="]
    for r in report.rows:
        lines.append(
            f"  Bucket {r.bucket_idx} -> {r.bucket_idx + 1}: "
            f"{r.num_sentinel}/{r.num_entries} without successor "
            f"({r.sentinel_ratio:.1%})"
        )
        if r.invalid_successors:
            lines.append(f"    not strictly later: {r.invalid_successors}")
        if r.missed_successors:
            lines.append(f"    later successor exists: {r.missed_successors}")

    if not report.is_consistent:
        lines.append(
            f"  WARNING: {report.num_invalid_successors} invalid and "
            f"{report.num_missed_successors} missed successor(s)"
        )

    text = "\n".join(lines)
    print(text)
    return text
