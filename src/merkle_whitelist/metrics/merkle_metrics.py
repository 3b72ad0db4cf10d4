"""
Merkle Whitelist - Merkle Metrics

Prometheus metrics for tree construction and proof extraction.

Metrics Categories:
- Merkle tree building
- Proof extraction and verification
"""

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

import structlog

logger = structlog.get_logger(__name__)


class MerkleMetrics:
    """
    Centralized metrics for the Merkle whitelist tooling.

    Provides visibility into:
    - Tree build times and sizes
    - Proof extraction times and outcomes
    - Proof verification results
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        """Initialize all Merkle metrics."""
        self._registry = registry
        self._init_tree_metrics()
        self._init_proof_metrics()

    def _init_tree_metrics(self) -> None:
        """Initialize tree building metrics."""
        self.build_duration = Histogram(
            "merkle_whitelist_build_duration_seconds",
            "Merkle tree build time",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
            registry=self._registry,
        )
        self.tree_size = Histogram(
            "merkle_whitelist_tree_size",
            "Number of leaves in Merkle tree",
            buckets=[10, 50, 100, 500, 1000, 5000, 10000, 50000],
            registry=self._registry,
        )

    def _init_proof_metrics(self) -> None:
        """Initialize proof metrics."""
        self.proof_duration = Histogram(
            "merkle_whitelist_proof_duration_seconds",
            "Merkle proof extraction time",
            buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05],
            registry=self._registry,
        )
        self.proofs_total = Counter(
            "merkle_whitelist_proofs_total",
            "Proof requests by outcome",
            ["result"],
            registry=self._registry,
        )
        self.verifications_total = Counter(
            "merkle_whitelist_verifications_total",
            "Merkle proof verifications",
            ["result"],
            registry=self._registry,
        )

    def record_build(self, leaf_count: int, duration: float) -> None:
        """Record a tree build."""
        self.build_duration.observe(duration)
        self.tree_size.observe(leaf_count)

    def record_proof(self, found: bool, duration: float) -> None:
        """Record a proof extraction."""
        result = "found" if found else "not_found"
        self.proofs_total.labels(result=result).inc()
        self.proof_duration.observe(duration)

    def record_verification(self, valid: bool) -> None:
        """Record a proof verification."""
        result = "valid" if valid else "invalid"
        self.verifications_total.labels(result=result).inc()


# Singleton instance
_merkle_metrics: MerkleMetrics | None = None


def get_merkle_metrics() -> MerkleMetrics:
    """Get global Merkle metrics instance."""
    global _merkle_metrics
    if _merkle_metrics is None:
        _merkle_metrics = MerkleMetrics()
        logger.debug("Merkle metrics initialized")
    return _merkle_metrics
