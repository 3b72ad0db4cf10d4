"""
Merkle Whitelist

Builds a Keccak-256 Merkle tree over a whitelist of addresses and extracts
inclusion proofs for individual addresses.
"""

__version__ = "1.0.0"
