"""Unified data schema for bucket chaining.

Every downstream module (annotator, enumerator, pipeline) consumes plain
bucket sequences.  Loaders and sample factories produce them.

Conventions
-----------
- ``Bucket``          : ascending sequence of timestamps, ties allowed.
- ``AnnotationTable`` : one row per bucket, one int per timestamp; either an
  index into the next bucket or ``NO_SUCCESSOR``.
- ``Chain``           : one timestamp per bucket, strictly increasing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, Union

import numpy as np


Timestamp = Union[datetime, float, int, np.datetime64]
Bucket = Sequence[Timestamp]
AnnotationTable = List[List[int]]
Chain = List[Timestamp]

NO_SUCCESSOR = -1


@dataclass(frozen=True)
class EventData:
    """A single event observed at ``timestamp``."""

    timestamp: Timestamp
    payload: Optional[Any] = None


def buckets_from_events(groups: Iterable[Iterable[EventData]]) -> List[List[Timestamp]]:
    """Turn groups of events into buckets of sorted timestamps."""
    return [sorted(event.timestamp for event in group) for group in groups]


def bucket_shape(buckets: Optional[Sequence[Bucket]]) -> List[int]:
    if buckets is None or len(buckets) == 0:
        return []
    return [len(bucket) for bucket in buckets]
