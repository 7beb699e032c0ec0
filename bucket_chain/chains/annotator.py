"""Compatibility annotation of adjacent buckets.

For each timestamp in bucket ``i`` the table records an index into bucket
``i + 1`` where a chain may continue, or ``NO_SUCCESSOR`` when no chain can
pass through that timestamp.

Two strategies produce tables of the same shape:

- ``cowalk``: a single right-to-left pass per bucket pair with two cursors.
  The cursor in the next bucket is shared by all elements of the pair and
  only ever moves left, so each pair costs O(len(a) + len(b)).
- ``search``: an independent binary search per element giving the minimal
  strictly-later index.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from typing import List, Optional, Sequence

from bucket_chain.data.schema import NO_SUCCESSOR, AnnotationTable, Bucket

logger = logging.getLogger(__name__)

STRATEGIES = ("cowalk", "search")


def init_annotation_table(buckets: Sequence[Bucket]) -> AnnotationTable:
    """Zero-filled table with one row per bucket, one entry per timestamp."""
    return [[0] * len(bucket) for bucket in buckets]


def _process_bucket_pair(
    source: Bucket,
    target: Bucket,
    row: List[int],
) -> None:
    """Annotate *row* (parallel to *source*) against *target* in place."""
    if len(source) == 0 or len(target) == 0:
        return

    a = len(source) - 1
    b = len(target) - 1

    while a >= 0:
        while a >= 0 and source[a] >= target[b]:
            row[a] = NO_SUCCESSOR
            a -= 1

        if a < 0:
            break

        # b is shared across outer steps and never reset
        while b > 0 and target[b] >= source[a]:
            b -= 1

        row[a] = b
        a -= 1


def process_buckets(buckets: Optional[Sequence[Bucket]]) -> AnnotationTable:
    """Annotate every bucket pair with the two-cursor co-walk.

    Pairs are processed right to left.  The last bucket's row keeps its
    zero default and is never consulted by the enumerator.  A pair with an
    empty side performs no comparisons and leaves its row at zero.

    Args:
        buckets: Ascending buckets.  ``None`` or empty gives ``[]``.

    Returns:
        Annotation table shaped like *buckets*.
    """
    if buckets is None or len(buckets) == 0:
        return []

    table = init_annotation_table(buckets)
    pair_idx = len(buckets) - 2

    while pair_idx >= 0:
        _process_bucket_pair(buckets[pair_idx], buckets[pair_idx + 1], table[pair_idx])
        pair_idx -= 1

    logger.debug(
        "Annotated %d bucket pair(s), %d sentinel entries",
        max(len(buckets) - 1, 0),
        sum(row.count(NO_SUCCESSOR) for row in table),
    )
    return table


def annotate_with_search(buckets: Optional[Sequence[Bucket]]) -> AnnotationTable:
    """Annotate each element with its minimal strictly-later successor.

    Relies on *buckets* being ascending; gives ``NO_SUCCESSOR`` when the next
    bucket has no later timestamp.  A row followed by an empty bucket keeps
    its zero default, as in :func:`process_buckets`.
    """
    if buckets is None or len(buckets) == 0:
        return []

    table = init_annotation_table(buckets)
    for i in range(len(buckets) - 1):
        target = buckets[i + 1]
        if len(target) == 0:
            continue
        row = table[i]
        for j, ts in enumerate(buckets[i]):
            k = bisect_right(target, ts)
            row[j] = k if k < len(target) else NO_SUCCESSOR
    return table


def annotate(buckets: Optional[Sequence[Bucket]], strategy: str = "cowalk") -> AnnotationTable:
    """Dispatch to the annotation strategy named by *strategy*."""
    if strategy == "cowalk":
        return process_buckets(buckets)
    if strategy == "search":
        return annotate_with_search(buckets)
    raise ValueError(f"Unknown annotation strategy: {strategy!r} (expected one of {STRATEGIES})")
