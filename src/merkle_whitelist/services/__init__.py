"""
Merkle Whitelist - Services Package

Provides the address file reader and the proof orchestration service.
"""

from merkle_whitelist.services.address_source import AddressSource, AddressSourceError
from merkle_whitelist.services.proof_service import ProofReport, ProofService

__all__ = [
    "AddressSource",
    "AddressSourceError",
    "ProofReport",
    "ProofService",
]
