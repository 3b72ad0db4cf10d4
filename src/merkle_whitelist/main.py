"""
Merkle Whitelist - Main Entry Point

Builds the whitelist Merkle tree from the configured address file and prints
the tree, its root and the inclusion proof for the configured target address.
"""

import sys

import structlog

from merkle_whitelist.core.config import Settings, get_settings
from merkle_whitelist.core.logging import setup_logging
from merkle_whitelist.crypto.merkle import EmptyTreeError
from merkle_whitelist.metrics import get_merkle_metrics
from merkle_whitelist.services.address_source import AddressSource, AddressSourceError
from merkle_whitelist.services.proof_service import ProofService

logger = structlog.get_logger(__name__)


def run(settings: Settings) -> int:
    """Execute one proof run; returns the process exit status."""
    logger.info(
        "Starting Merkle whitelist run",
        app=settings.APP_NAME,
        version=settings.VERSION,
        environment=settings.ENV,
        addresses_file=settings.ADDRESSES_FILE,
    )

    source = AddressSource(settings.ADDRESSES_FILE)
    service = ProofService(get_merkle_metrics() if settings.METRICS_ENABLED else None)

    try:
        addresses = source.read_addresses()
        report = service.generate_report(addresses, settings.TARGET_ADDRESS)
    except AddressSourceError as e:
        logger.error("Address file unreadable", error=str(e))
        return 1
    except EmptyTreeError as e:
        logger.error("Address file is empty", path=str(source.path), error=str(e))
        return 1

    print(service.render_tree(report.tree))
    print(service.render_summary(report))
    return 0


def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
