"""JSON bucket file loader.

Accepted layouts::

    [["2023-01-01", "2023-01-04"], ["2023-01-02"]]
    {"buckets": [[1.0, 4.0], [2.0]]}

Strings are parsed as ISO-8601 datetimes, numbers are kept as-is.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, List, Union

from bucket_chain.data.schema import Timestamp


def _parse_timestamp(value: Any) -> Timestamp:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Unsupported timestamp value: {value!r}")
    return value


def parse_buckets(raw: Any) -> List[List[Timestamp]]:
    """Convert decoded JSON into a list of buckets."""
    if isinstance(raw, dict):
        if "buckets" not in raw:
            raise ValueError("JSON object must contain a 'buckets' key")
        raw = raw["buckets"]
    if not isinstance(raw, list):
        raise ValueError("Buckets must be a JSON list of lists")
    buckets: List[List[Timestamp]] = []
    for i, item in enumerate(raw):
        if not isinstance(item, list):
            raise ValueError(f"Bucket {i} is not a list")
        buckets.append([_parse_timestamp(v) for v in item])
    return buckets


def load_buckets_json(json_path: Union[str, Path]) -> List[List[Timestamp]]:
    """Load a JSON bucket file."""
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"Bucket file not found: {json_path}")
    with json_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return parse_buckets(raw)
