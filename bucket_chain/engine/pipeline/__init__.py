"""Bucket chain pipeline module."""

from bucket_chain.engine.pipeline.chain_pipeline import (
    BucketChainPipeline,
    ChainResult,
)

__all__ = [
    "BucketChainPipeline",
    "ChainResult",
]
