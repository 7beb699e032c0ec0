"""Enumeration of legal chains from an annotation table.

A chain takes one timestamp per bucket.  From element ``j`` of bucket ``i``
the search continues at ``table[i][j]`` (the primary successor) and then at
every larger index of bucket ``i + 1``.  ``NO_SUCCESSOR`` ends the branch.

Result order: start index in bucket 0 ascending, then depth-first with
successor indices ascending.

The output is exponential in the number of buckets in the worst case; use
:func:`iter_legal_permutations` with ``itertools.islice`` to bound it, or
:func:`count_legal_permutations` to size it first.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

import numpy as np

from bucket_chain.data.sanity import validate_annotation_table
from bucket_chain.data.schema import NO_SUCCESSOR, AnnotationTable, Bucket, Chain


def _backtrack(
    buckets: Sequence[Bucket],
    table: AnnotationTable,
    bucket_idx: int,
    element_idx: int,
    current: List,
    strict: bool,
) -> Iterator[Chain]:
    current.append(buckets[bucket_idx][element_idx])
    try:
        if bucket_idx == len(buckets) - 1:
            yield list(current)
            return

        next_idx = table[bucket_idx][element_idx]
        if next_idx == NO_SUCCESSOR:
            return

        target = buckets[bucket_idx + 1]
        for k in range(next_idx, len(target)):
            if strict and not current[-1] < target[k]:
                continue
            yield from _backtrack(buckets, table, bucket_idx + 1, k, current, strict)
    finally:
        current.pop()


def iter_legal_permutations(
    buckets: Optional[Sequence[Bucket]],
    table: AnnotationTable,
    strict: bool = True,
    validate: bool = True,
) -> Iterator[Chain]:
    """Lazily yield every chain reachable through *table*.

    Args:
        buckets: The annotated buckets.
        table: Annotation table for *buckets*; need not come from the
            annotator as long as it has the same shape.
        strict: Skip successors that are not strictly later than the
            current element.  With ``False`` every index from the primary
            successor upward is followed unchecked.
        validate: Check the table shape before enumerating.

    Raises:
        AnnotationTableError: If ``validate`` and *table* is malformed.
    """
    if buckets is None or len(buckets) == 0:
        return
    if validate:
        validate_annotation_table(buckets, table)

    current: List = []
    for start_idx in range(len(buckets[0])):
        yield from _backtrack(buckets, table, 0, start_idx, current, strict)


def build_legal_permutations(
    buckets: Optional[Sequence[Bucket]],
    table: AnnotationTable,
    strict: bool = True,
    validate: bool = True,
) -> List[Chain]:
    """Return every chain reachable through *table* as a list."""
    return list(iter_legal_permutations(buckets, table, strict=strict, validate=validate))


def count_legal_permutations(
    buckets: Optional[Sequence[Bucket]],
    table: AnnotationTable,
    strict: bool = True,
) -> int:
    """Number of chains :func:`build_legal_permutations` would return.

    Right-to-left dynamic program over suffix sums, so the cost is linear in
    the number of timestamps.  Counts are kept as Python ints (object dtype)
    since they grow exponentially.  Assumes ascending buckets.
    """
    if buckets is None or len(buckets) == 0:
        return 0
    validate_annotation_table(buckets, table)

    counts = np.ones(len(buckets[-1]), dtype=object)
    for i in range(len(buckets) - 2, -1, -1):
        source, target = buckets[i], buckets[i + 1]
        # suffix[k] = chains starting anywhere in target[k:]
        suffix = np.append(np.cumsum(counts[::-1])[::-1], 0)
        row_counts = np.zeros(len(source), dtype=object)
        for j, next_idx in enumerate(table[i]):
            if next_idx == NO_SUCCESSOR or len(target) == 0:
                continue
            start = next_idx
            if strict:
                while start < len(target) and not source[j] < target[start]:
                    start += 1
            row_counts[j] = suffix[start]
        counts = row_counts

    return int(sum(counts.tolist()))
