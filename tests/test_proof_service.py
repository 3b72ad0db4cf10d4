"""
Unit tests for the proof orchestration service.
"""

import json

import pytest

from merkle_whitelist.crypto.hasher import leaf_hash, pair_hash
from merkle_whitelist.crypto.merkle import EmptyTreeError, ProofStatus, verify_proof
from merkle_whitelist.metrics import MerkleMetrics
from merkle_whitelist.services.proof_service import ProofService


class TestProofService:
    """Tests for ProofService."""

    def test_generate_report_found(self, sample_addresses: list[str], target_address: str) -> None:
        """Test a report for an address in the whitelist."""
        report = ProofService().generate_report(sample_addresses, target_address)

        assert report.target_address == target_address
        assert report.proof.status == ProofStatus.FOUND
        assert report.proof.leaf_index == 2
        assert report.tree.leaf_count == 5
        assert verify_proof(report.proof)

    def test_generate_report_not_found(self, sample_addresses: list[str]) -> None:
        """Test a report for an address outside the whitelist."""
        report = ProofService().generate_report(sample_addresses, "0x0000000000000000000000000000000000000000")

        assert report.proof.status == ProofStatus.NOT_FOUND
        assert report.proof.proof_path == []

    def test_generate_report_empty(self, target_address: str) -> None:
        """Test that an empty whitelist raises EmptyTreeError."""
        with pytest.raises(EmptyTreeError):
            ProofService().generate_report([], target_address)

    def test_report_to_dict(self, sample_addresses: list[str], target_address: str) -> None:
        """Test report serialization."""
        report = ProofService().generate_report(sample_addresses, target_address)
        data = report.to_dict()

        assert data["root_hash"] == report.tree.root_hash
        assert data["leaf_count"] == 5
        assert data["proof"]["status"] == "found"

    def test_render_tree(self) -> None:
        """Test the tree dump is labelled JSON."""
        service = ProofService()
        tree = service.build_tree(["0xAAA", "0xBBB"])

        output = service.render_tree(tree)
        prefix = "Merkle Tree: "

        assert output.startswith(prefix)
        assert json.loads(output[len(prefix):]) == tree.to_dict()

    def test_render_summary_found(self) -> None:
        """Test summary lines for a found target."""
        service = ProofService()
        report = service.generate_report(["0xAAA", "0xBBB"], "0xAAA")

        lines = service.render_summary(report).splitlines()

        assert lines[0] == f"Merkle Root: {pair_hash(leaf_hash('0xAAA'), leaf_hash('0xBBB'))}"
        assert lines[1] == f'Merkle Proof for 0xAAA: ["{leaf_hash("0xBBB")}"]'

    def test_render_summary_not_found(self) -> None:
        """Test summary lines for a missing target."""
        service = ProofService()
        report = service.generate_report(["0xAAA"], "0xCCC")

        summary = service.render_summary(report)

        assert "not found" in summary
        assert summary.startswith(f"Merkle Root: {leaf_hash('0xAAA')}")

    def test_render_summary_is_plain_text(self) -> None:
        """Test that summary lines carry no terminal colour codes."""
        service = ProofService()
        report = service.generate_report(["0xAAA", "0xBBB"], "0xAAA")

        assert "\x1b[" not in service.render_summary(report)
        assert "\x1b[" not in service.render_tree(report.tree)


class TestProofServiceMetrics:
    """Tests for metrics recording."""

    def test_records_found_proof(
        self,
        metrics: MerkleMetrics,
        sample_addresses: list[str],
        target_address: str,
    ) -> None:
        """Test build, proof and verification metrics for a found target."""
        ProofService(metrics).generate_report(sample_addresses, target_address)
        registry = metrics._registry

        assert registry.get_sample_value("merkle_whitelist_tree_size_count") == 1.0
        assert registry.get_sample_value("merkle_whitelist_tree_size_sum") == 5.0
        assert registry.get_sample_value("merkle_whitelist_proofs_total", {"result": "found"}) == 1.0
        assert registry.get_sample_value("merkle_whitelist_verifications_total", {"result": "valid"}) == 1.0

    def test_records_not_found_proof(self, metrics: MerkleMetrics) -> None:
        """Test that a missing target is counted and not verified."""
        ProofService(metrics).generate_report(["0xAAA"], "0xBBB")
        registry = metrics._registry

        assert registry.get_sample_value("merkle_whitelist_proofs_total", {"result": "not_found"}) == 1.0
        assert registry.get_sample_value("merkle_whitelist_verifications_total", {"result": "valid"}) is None
