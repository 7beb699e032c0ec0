#!/usr/bin/env python3
"""Bucket chain runner script.

Annotates a bucket file and prints every legal chain.

Usage:
    # Built-in sample buckets
    python scripts/run_bucket_chains.py

    # Buckets from a JSON file, at most 100 chains
    python scripts/run_bucket_chains.py --input buckets.json --max-chains 100

    # YAML config, search-based annotation
    python scripts/run_bucket_chains.py --config configs/default.yaml --strategy search
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bucket_chain.chains.annotator import STRATEGIES
from bucket_chain.chains.formatting import format_buckets, format_chains, format_table
from bucket_chain.data.loaders.json_buckets import load_buckets_json
from bucket_chain.data.samples import create_sample_buckets
from bucket_chain.engine.config.bucket_chain_config import (
    BucketChainConfig,
    load_bucket_chain_config,
)
from bucket_chain.engine.pipeline.chain_pipeline import BucketChainPipeline

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Enumerate legal chains across time buckets")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON bucket file (defaults to the built-in sample)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file"
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help="Annotation strategy (overrides config)"
    )
    parser.add_argument(
        "--max-chains",
        type=int,
        default=None,
        help="Stop after this many chains"
    )
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Follow annotated successors without the strictly-later check"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log the annotation table"
    )

    args = parser.parse_args()

    config = load_bucket_chain_config(args.config) if args.config else BucketChainConfig()
    if args.strategy is not None:
        config.annotator.strategy = args.strategy
    if args.max_chains is not None:
        config.enumeration.max_chains = args.max_chains
    if args.no_strict:
        config.enumeration.strict = False
    if args.verbose:
        config.verbose = True

    if args.input is not None:
        buckets = load_buckets_json(args.input)
        logger.info(f"Loaded {len(buckets)} buckets from {args.input}")
    else:
        buckets = create_sample_buckets()

    date_format = config.format.date_format
    result = BucketChainPipeline(config).run(buckets)

    print("=" * 60)
    print("Buckets")
    print("=" * 60)
    print(format_buckets(buckets, date_format))
    print()
    print("Annotation table")
    print("-" * 60)
    print(format_table(result.table))
    print()
    print(f"Legal chains: {result.num_chains}" + (" (truncated)" if result.truncated else ""))
    print("-" * 60)
    print(format_chains(result.chains, date_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
