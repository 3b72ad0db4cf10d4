"""
Merkle Whitelist - Keccak-256 Hashing

Leaf and parent hash functions shared by the tree builder and the proof
verifier.

Digests are handled as 64-character lowercase hex strings. A parent hash is
the Keccak-256 of the two children's hex strings concatenated as text, which
keeps roots compatible with the whitelist tooling that produced the address
lists.
"""

import re

from eth_utils import keccak

DIGEST_HEX_LENGTH = 64

_HEX_DIGEST = re.compile(r"^[0-9a-f]{64}$")


class InvalidDigestError(ValueError):
    """Value is not a hex-encoded 32-byte digest."""

    pass


def leaf_hash(value: bytes | str) -> str:
    """
    Compute the hash of a single leaf value.

    Args:
        value: Raw leaf data; strings are UTF-8 encoded

    Returns:
        Hex-encoded Keccak-256 hash
    """
    if isinstance(value, str):
        return keccak(text=value).hex()
    return keccak(primitive=value).hex()


def pair_hash(left: str, right: str) -> str:
    """
    Compute the hash of an internal node.

    Args:
        left: Hash of left child (hex string)
        right: Hash of right child (hex string)

    Returns:
        Hex-encoded Keccak-256 hash of ``left + right``
    """
    return keccak(text=left + right).hex()


def normalize_digest(value: str) -> str:
    """
    Bring a digest into canonical form (lowercase, no ``0x`` prefix).

    Raises:
        InvalidDigestError: If the value is not 64 hex characters
    """
    digest = value.strip().lower()
    if digest.startswith("0x"):
        digest = digest[2:]
    if not _HEX_DIGEST.match(digest):
        raise InvalidDigestError(f"Invalid digest: {value!r}")
    return digest
