"""Bucket chain runtime pipeline.

- Step 1: input precondition check (ascending buckets)
- Step 2: compatibility annotation (configured strategy)
- Step 3: lazy chain enumeration with an optional bound on the chain count

The pipeline holds no state between runs; each ``run`` builds a fresh table.
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from bucket_chain.chains.annotator import annotate
from bucket_chain.chains.enumerator import iter_legal_permutations
from bucket_chain.data.sanity import UnsortedBucketError, find_unsorted_buckets
from bucket_chain.data.schema import AnnotationTable, Bucket, Chain
from bucket_chain.engine.config.bucket_chain_config import BucketChainConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChainResult:
    """Output of one pipeline run.

    Attributes:
        table: Annotation table for the input buckets.
        chains: Enumerated chains, in enumeration order.
        truncated: True when ``max_chains`` stopped the enumeration early.
        num_buckets: Number of input buckets.
        elapsed_s: Wall time of the run in seconds.
    """

    table: AnnotationTable
    chains: List[Chain]
    truncated: bool = False
    num_buckets: int = 0
    elapsed_s: float = 0.0

    @property
    def num_chains(self) -> int:
        return len(self.chains)


class BucketChainPipeline:
    """Annotate buckets and enumerate their legal chains."""

    def __init__(self, config: Optional[BucketChainConfig] = None):
        self.config = config or BucketChainConfig()

    def _check_input(self, buckets: Sequence[Bucket]) -> None:
        unsorted = find_unsorted_buckets(buckets)
        if not unsorted:
            return
        if self.config.input.on_unsorted == "raise":
            raise UnsortedBucketError(f"Buckets not in ascending order: {unsorted}")
        logger.warning(
            "Buckets %s are not in ascending order; annotation is unreliable", unsorted
        )

    def annotate(self, buckets: Optional[Sequence[Bucket]]) -> AnnotationTable:
        return annotate(buckets, strategy=self.config.annotator.strategy)

    def enumerate(self, buckets: Optional[Sequence[Bucket]], table: AnnotationTable):
        """Return ``(chains, truncated)`` honouring ``max_chains``."""
        cfg = self.config.enumeration
        chains_iter = iter_legal_permutations(
            buckets, table, strict=cfg.strict, validate=cfg.validate_table
        )
        if cfg.max_chains is None:
            return list(chains_iter), False

        chains = list(itertools.islice(chains_iter, cfg.max_chains + 1))
        if len(chains) > cfg.max_chains:
            return chains[: cfg.max_chains], True
        return chains, False

    def run(self, buckets: Optional[Sequence[Bucket]]) -> ChainResult:
        t0 = time.perf_counter()
        if buckets is None:
            buckets = []

        if self.config.input.check_sorted:
            self._check_input(buckets)

        table = self.annotate(buckets)
        if self.config.verbose:
            logger.info("Annotation table: %s", table)
        chains, truncated = self.enumerate(buckets, table)
        elapsed = time.perf_counter() - t0

        if truncated:
            logger.warning(
                "Enumeration stopped after %d chains (max_chains)", len(chains)
            )
        logger.info(
            "Built %d chain(s) over %d bucket(s) in %.3fs (strategy=%s)",
            len(chains),
            len(buckets),
            elapsed,
            self.config.annotator.strategy,
        )
        return ChainResult(
            table=table,
            chains=chains,
            truncated=truncated,
            num_buckets=len(buckets),
            elapsed_s=elapsed,
        )
