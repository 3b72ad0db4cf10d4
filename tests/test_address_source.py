"""
Unit tests for the address file reader.
"""

from pathlib import Path

import pytest

from merkle_whitelist.services.address_source import AddressSource, AddressSourceError


class TestAddressSource:
    """Tests for AddressSource."""

    def test_reads_in_file_order(self, addresses_file: Path, sample_addresses: list[str]) -> None:
        """Test that addresses come back in file order."""
        source = AddressSource(addresses_file)

        assert source.read_addresses() == sample_addresses

    def test_no_trailing_newline(self, tmp_path: Path) -> None:
        """Test a file without a final newline."""
        path = tmp_path / "addresses.txt"
        path.write_text("0xAAA\n0xBBB", encoding="utf-8")

        assert AddressSource(path).read_addresses() == ["0xAAA", "0xBBB"]

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        """Test that CRLF terminators are removed."""
        path = tmp_path / "addresses.txt"
        path.write_bytes(b"0xAAA\r\n0xBBB\r\n")

        assert AddressSource(path).read_addresses() == ["0xAAA", "0xBBB"]

    def test_lines_are_not_normalized(self, tmp_path: Path) -> None:
        """Test that whitespace and blank lines are kept verbatim."""
        path = tmp_path / "addresses.txt"
        path.write_text(" 0xAAA\n\n0xBBB \n", encoding="utf-8")

        assert AddressSource(path).read_addresses() == [" 0xAAA", "", "0xBBB "]

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file yields no addresses."""
        path = tmp_path / "addresses.txt"
        path.write_text("", encoding="utf-8")

        assert AddressSource(path).read_addresses() == []

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file raises AddressSourceError."""
        source = AddressSource(tmp_path / "missing.txt")

        with pytest.raises(AddressSourceError, match="missing.txt"):
            source.read_addresses()

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        """Test that undecodable content raises AddressSourceError."""
        path = tmp_path / "addresses.txt"
        path.write_bytes(b"0xAAA\n\xff\xfe\n")

        with pytest.raises(AddressSourceError):
            AddressSource(path).read_addresses()
