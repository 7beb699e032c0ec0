"""Bucket chain pipeline configuration dataclasses.

Defaults reproduce the plain annotate-then-enumerate behaviour: co-walk
annotation, strict chain checks, no bound on the number of chains.
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


# =============================================================================
# Stage Configs
# =============================================================================

@dataclass
class AnnotatorConfig:
    """Compatibility annotation configuration.

    strategy: ``"cowalk"`` (two-cursor pass per bucket pair) or ``"search"``
        (binary search for the minimal strictly-later successor).
    """
    strategy: str = "cowalk"


@dataclass
class EnumerationConfig:
    """Chain enumeration configuration."""
    strict: bool = True            # skip successors that are not strictly later
    validate_table: bool = True    # fail fast on malformed annotation tables
    max_chains: Optional[int] = None  # None = unlimited


@dataclass
class InputConfig:
    """Input precondition handling."""
    check_sorted: bool = True
    on_unsorted: str = "warn"  # "warn" or "raise"


@dataclass
class FormatConfig:
    """Console rendering configuration."""
    date_format: str = "%Y-%m-%d"


# =============================================================================
# Main Config
# =============================================================================

@dataclass
class BucketChainConfig:
    """Main bucket chain pipeline configuration."""
    annotator: AnnotatorConfig = field(default_factory=AnnotatorConfig)
    enumeration: EnumerationConfig = field(default_factory=EnumerationConfig)
    input: InputConfig = field(default_factory=InputConfig)
    format: FormatConfig = field(default_factory=FormatConfig)

    # Global settings
    verbose: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)


# =============================================================================
# YAML Loading / Saving
# =============================================================================

def _build_from_dict(cls, raw: Dict[str, Any]):
    """Recursively construct dataclass from a dict."""
    if not isinstance(raw, dict):
        return cls()
    kwargs = {}
    for name, field_info in cls.__dataclass_fields__.items():
        if name not in raw:
            continue
        val = raw[name]
        ft = field_info.type
        # Resolve string annotations
        if isinstance(ft, str):
            module = sys.modules.get(cls.__module__)
            ft = getattr(module, ft, ft) if module else ft
        if hasattr(ft, "__dataclass_fields__") and isinstance(val, dict):
            kwargs[name] = _build_from_dict(ft, val)
        else:
            kwargs[name] = val
    return cls(**kwargs)


def load_bucket_chain_config(path: Union[str, Path]) -> BucketChainConfig:
    """Load BucketChainConfig from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return _build_from_dict(BucketChainConfig, data)


def save_bucket_chain_config(config: BucketChainConfig, path: Union[str, Path]) -> None:
    """Save BucketChainConfig to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, sort_keys=False)
