"""Data module for bucket chaining.

Includes the bucket schema, loaders, sample sets and sanity checks.
"""

from bucket_chain.data.schema import (
    NO_SUCCESSOR,
    AnnotationTable,
    Bucket,
    Chain,
    EventData,
    Timestamp,
    bucket_shape,
    buckets_from_events,
)
from bucket_chain.data.loaders import load_buckets_json, parse_buckets
from bucket_chain.data.samples import create_sample_buckets, make_date_buckets
from bucket_chain.data.sanity import (
    AnnotationReport,
    AnnotationTableError,
    RowReport,
    UnsortedBucketError,
    check_annotation,
    find_unsorted_buckets,
    is_bucket_sorted,
    is_chronological,
    print_annotation_report,
    validate_annotation_table,
)

__all__ = [
    # Schema
    "NO_SUCCESSOR",
    "AnnotationTable",
    "Bucket",
    "Chain",
    "EventData",
    "Timestamp",
    "bucket_shape",
    "buckets_from_events",
    # Loaders
    "load_buckets_json",
    "parse_buckets",
    # Samples
    "create_sample_buckets",
    "make_date_buckets",
    # Sanity
    "AnnotationReport",
    "AnnotationTableError",
    "RowReport",
    "UnsortedBucketError",
    "check_annotation",
    "find_unsorted_buckets",
    "is_bucket_sorted",
    "is_chronological",
    "print_annotation_report",
    "validate_annotation_table",
]
