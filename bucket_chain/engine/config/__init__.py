"""Bucket chain configuration system.

Configuration can be loaded from YAML files or created programmatically.

Usage:
    from bucket_chain.engine.config import load_bucket_chain_config

    config = load_bucket_chain_config("configs/default.yaml")
    print(config.annotator.strategy)
    print(config.enumeration.max_chains)
"""

from bucket_chain.engine.config.bucket_chain_config import (
    AnnotatorConfig,
    BucketChainConfig,
    EnumerationConfig,
    FormatConfig,
    InputConfig,
    load_bucket_chain_config,
    save_bucket_chain_config,
)

__all__ = [
    "AnnotatorConfig",
    "BucketChainConfig",
    "EnumerationConfig",
    "FormatConfig",
    "InputConfig",
    "load_bucket_chain_config",
    "save_bucket_chain_config",
]
