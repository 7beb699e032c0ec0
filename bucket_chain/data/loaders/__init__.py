"""Data loaders for bucket chaining."""

from bucket_chain.data.loaders.json_buckets import (
    load_buckets_json,
    parse_buckets,
)

__all__ = [
    "load_buckets_json",
    "parse_buckets",
]
