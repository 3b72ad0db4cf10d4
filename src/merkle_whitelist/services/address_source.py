"""
Merkle Whitelist - Address Source

Reads the ordered whitelist of addresses from a line-oriented text file.
"""

from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class AddressSourceError(Exception):
    """Address list could not be read."""

    pass


class AddressSource:
    """
    Line-oriented address file, one address per line.

    Lines are returned in file order with the line terminator (``\\n`` or
    ``\\r\\n``) removed and no other normalization, so the leaf hashes match
    the bytes in the file. A trailing newline at end of file does not produce
    an extra entry.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_addresses(self) -> list[str]:
        """
        Read all addresses from the file.

        Raises:
            AddressSourceError: If the file cannot be opened or is not UTF-8
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise AddressSourceError(f"Failed to read addresses from {self._path}: {e}") from e

        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        addresses = [line.removesuffix("\r") for line in lines]

        logger.debug("Addresses loaded", path=str(self._path), count=len(addresses))
        return addresses
