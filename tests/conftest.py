"""
Pytest configuration and shared fixtures for Merkle whitelist tests.
"""

from pathlib import Path

import pytest
from prometheus_client import CollectorRegistry

from merkle_whitelist.core.config import Settings
from merkle_whitelist.metrics import MerkleMetrics

DEFAULT_TARGET = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"


@pytest.fixture
def target_address() -> str:
    """The default target address."""
    return DEFAULT_TARGET


@pytest.fixture
def sample_addresses(target_address: str) -> list[str]:
    """Create a small whitelist containing the default target address."""
    return [
        "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4",
        "0xAb8483F64d9C6d1EcF9b849Ae677dD3315835cb2",
        target_address,
        "0x4B20993Bc481177ec7E8f571ceCaE8A9e22C02db",
        "0x78731D3Ca6b7E34aC0F824c42a7cC18A495cabaB",
    ]


@pytest.fixture
def addresses_file(tmp_path: Path, sample_addresses: list[str]) -> Path:
    """Write the sample whitelist to a file, one address per line."""
    path = tmp_path / "eligible_addresses.txt"
    path.write_text("\n".join(sample_addresses) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def metrics() -> MerkleMetrics:
    """Create metrics bound to an isolated registry."""
    return MerkleMetrics(registry=CollectorRegistry())


@pytest.fixture
def whitelist_settings(addresses_file: Path, target_address: str) -> Settings:
    """Create settings pointing at the sample whitelist."""
    return Settings(
        ADDRESSES_FILE=str(addresses_file),
        TARGET_ADDRESS=target_address,
        METRICS_ENABLED=False,
    )
