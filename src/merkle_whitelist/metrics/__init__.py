"""
Merkle Whitelist - Metrics Module

Prometheus metrics for tree builds and proof extraction.
"""

from merkle_whitelist.metrics.merkle_metrics import (
    MerkleMetrics,
    get_merkle_metrics,
)

__all__ = [
    "MerkleMetrics",
    "get_merkle_metrics",
]
