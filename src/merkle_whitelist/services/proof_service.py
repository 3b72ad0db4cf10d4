"""
Merkle Whitelist - Proof Service

Orchestrates the whitelist proof run:
1. Build the Merkle tree over the ordered address list
2. Extract the inclusion proof for the target address
3. Verify the proof against the root
4. Render the tree dump and the summary
"""

import json
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import structlog

from merkle_whitelist.crypto.merkle import MerkleProof, MerkleTree, verify_proof
from merkle_whitelist.metrics import MerkleMetrics

logger = structlog.get_logger(__name__)


@dataclass
class ProofReport:
    """Result of a proof run for one target address."""

    target_address: str
    tree: MerkleTree
    proof: MerkleProof

    @property
    def root_hash(self) -> str:
        return self.tree.root_hash

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "target_address": self.target_address,
            "root_hash": self.root_hash,
            "leaf_count": self.tree.leaf_count,
            "proof": self.proof.to_dict(),
        }


class ProofService:
    """
    Builds whitelist trees and extracts proofs for target addresses.

    Metrics are recorded only when a MerkleMetrics instance is supplied.
    """

    def __init__(self, metrics: MerkleMetrics | None = None) -> None:
        self._metrics = metrics

    def build_tree(self, addresses: Sequence[str]) -> MerkleTree:
        """
        Build the Merkle tree over the ordered address list.

        Raises:
            EmptyTreeError: If addresses is empty
        """
        started = time.perf_counter()
        tree = MerkleTree.from_leaves(addresses)
        duration = time.perf_counter() - started

        if self._metrics:
            self._metrics.record_build(tree.leaf_count, duration)

        logger.info(
            "Merkle tree built",
            leaf_count=tree.leaf_count,
            depth=tree.depth,
            root_hash=tree.root_hash,
            duration_ms=round(duration * 1000, 3),
        )
        return tree

    def generate_report(self, addresses: Sequence[str], target_address: str) -> ProofReport:
        """
        Build the tree and extract the proof for one address.

        A missing target is not an error; the report carries a NOT_FOUND proof.
        """
        tree = self.build_tree(addresses)

        started = time.perf_counter()
        proof = tree.get_proof_for(target_address)
        duration = time.perf_counter() - started

        if self._metrics:
            self._metrics.record_proof(proof.found, duration)

        if not proof.found:
            logger.warning(
                "Target address not in whitelist",
                target_address=target_address,
                target_hash=proof.target_hash,
            )
            return ProofReport(target_address=target_address, tree=tree, proof=proof)

        valid = verify_proof(proof)
        if self._metrics:
            self._metrics.record_verification(valid)
        if not valid:
            logger.error(
                "Generated proof does not verify",
                target_address=target_address,
                root_hash=tree.root_hash,
            )

        logger.info(
            "Proof generated",
            target_address=target_address,
            leaf_index=proof.leaf_index,
            proof_length=len(proof.proof_path),
        )
        return ProofReport(target_address=target_address, tree=tree, proof=proof)

    @staticmethod
    def render_tree(tree: MerkleTree) -> str:
        """Human-readable dump of the full tree."""
        return f"Merkle Tree: {json.dumps(tree.to_dict(), indent=2)}"

    @staticmethod
    def render_summary(report: ProofReport) -> str:
        """Root hash and proof lines for the target address."""
        lines = [f"Merkle Root: {report.root_hash}"]
        if report.proof.found:
            lines.append(f"Merkle Proof for {report.target_address}: {json.dumps(report.proof.hashes)}")
        else:
            lines.append(f"Merkle Proof for {report.target_address}: not found in whitelist")
        return "\n".join(lines)
