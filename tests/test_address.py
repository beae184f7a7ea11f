"""Tests for address and hash normalisation."""

import pytest

from payerindex.domain.errors import ValidationError
from payerindex.utils.address import normalize_address, normalize_transaction_hash

LOWER = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
CHECKSUM = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


class TestNormalizeAddress:
    """Tests for normalize_address."""

    def test_lowercase_is_canonical(self):
        """Test canonical addresses pass through."""
        assert normalize_address(LOWER) == LOWER

    def test_checksum_address(self):
        """Test checksummed addresses are lowercased."""
        assert normalize_address(CHECKSUM) == LOWER

    def test_raw_bytes(self):
        """Test 20 raw bytes are accepted."""
        assert normalize_address(bytes.fromhex(LOWER[2:])) == LOWER

    @pytest.mark.parametrize("value", ["", "0x1234", "not an address", LOWER + "00", 1])
    def test_invalid(self, value):
        """Test invalid addresses raise ValidationError."""
        with pytest.raises(ValidationError, match="Invalid address"):
            normalize_address(value)


class TestNormalizeTransactionHash:
    """Tests for normalize_transaction_hash."""

    def test_uppercase_hex(self):
        """Test hashes are lowercased."""
        value = "0x" + "AB" * 32
        assert normalize_transaction_hash(value) == "0x" + "ab" * 32

    def test_missing_prefix(self):
        """Test the 0x prefix is added."""
        assert normalize_transaction_hash("cd" * 32) == "0x" + "cd" * 32

    def test_raw_bytes(self):
        """Test 32 raw bytes are accepted."""
        assert normalize_transaction_hash(b"\x01" * 32) == "0x" + "01" * 32

    @pytest.mark.parametrize("value", ["", "0x1234", "0x" + "zz" * 32, "0x" + "a" * 63, b"\x01" * 20])
    def test_invalid(self, value):
        """Test invalid hashes raise ValidationError."""
        with pytest.raises(ValidationError, match="Invalid transaction hash"):
            normalize_transaction_hash(value)
