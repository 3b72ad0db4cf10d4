"""
Merkle Whitelist - Cryptographic Utilities

Provides Keccak-256 hashing, Merkle tree construction, proof extraction,
and verification.
"""

from merkle_whitelist.crypto.hasher import (
    InvalidDigestError,
    leaf_hash,
    normalize_digest,
    pair_hash,
)
from merkle_whitelist.crypto.merkle import (
    EmptyTreeError,
    MerkleNode,
    MerkleProof,
    MerkleTree,
    MerkleTreeError,
    ProofDirection,
    ProofElement,
    ProofStatus,
    verify_proof,
)

__all__ = [
    "EmptyTreeError",
    "InvalidDigestError",
    "MerkleNode",
    "MerkleProof",
    "MerkleTree",
    "MerkleTreeError",
    "ProofDirection",
    "ProofElement",
    "ProofStatus",
    "leaf_hash",
    "normalize_digest",
    "pair_hash",
    "verify_proof",
]
