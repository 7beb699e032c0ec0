"""Chain construction: compatibility annotation and chain enumeration."""

from bucket_chain.chains.annotator import (
    STRATEGIES,
    annotate,
    annotate_with_search,
    init_annotation_table,
    process_buckets,
)
from bucket_chain.chains.enumerator import (
    build_legal_permutations,
    count_legal_permutations,
    iter_legal_permutations,
)
from bucket_chain.chains.formatting import (
    format_buckets,
    format_chains,
    format_table,
    format_timestamp,
)

__all__ = [
    # Annotation
    "STRATEGIES",
    "annotate",
    "annotate_with_search",
    "init_annotation_table",
    "process_buckets",
    # Enumeration
    "build_legal_permutations",
    "count_legal_permutations",
    "iter_legal_permutations",
    # Formatting
    "format_buckets",
    "format_chains",
    "format_table",
    "format_timestamp",
]
