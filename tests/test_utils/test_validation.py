"""
Tests for address and transaction-hash validation.

Tests cover:
- Checksummed and lowercase addresses
- Wrong checksums and uppercase addresses
- Malformed input of every shape
- Raising validators and their normalized output
"""

import pytest
from eth_utils import to_checksum_address

from mantle_operator.errors import InvalidAddressError, InvalidHashError, ValidationError
from mantle_operator.utils.validation import (
    is_valid_address,
    is_valid_tx_hash,
    validate_address,
    validate_tx_hash,
)

CHECKSUMMED = to_checksum_address("0x09bc4e0d864854c6afb6eb9a9cdf58ac190d0df9")


def flip_first_letter(address: str) -> str:
    """Swap the case of the first hex letter, breaking the checksum."""
    index = next(i for i, ch in enumerate(address) if i > 1 and ch.isalpha())
    return address[:index] + address[index].swapcase() + address[index + 1:]


# =============================================================================
# is_valid_address Tests
# =============================================================================


class TestIsValidAddress:
    """Tests for the address predicate."""

    def test_checksummed_address(self) -> None:
        assert is_valid_address(CHECKSUMMED) is True

    def test_lowercase_address(self) -> None:
        assert is_valid_address(CHECKSUMMED.lower()) is True

    def test_lowercase_digits_only(self) -> None:
        assert is_valid_address("0x" + "1" * 40) is True

    def test_wrong_checksum_rejected(self) -> None:
        """A single flipped letter case breaks the checksum."""
        assert is_valid_address(flip_first_letter(CHECKSUMMED)) is False

    def test_all_uppercase_rejected(self) -> None:
        assert is_valid_address("0x" + CHECKSUMMED[2:].upper()) is False

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "0x",
            CHECKSUMMED[2:],
            CHECKSUMMED[:-1],
            CHECKSUMMED + "9",
            "0x" + "g" * 40,
            " 0x" + "1" * 40,
            "0X" + "1" * 40,
        ],
    )
    def test_malformed_rejected(self, value: str) -> None:
        assert is_valid_address(value) is False

    @pytest.mark.parametrize("value", [None, 123, b"0x" + b"1" * 40, ["0x" + "1" * 40]])
    def test_non_string_rejected(self, value) -> None:
        """Predicate never raises on foreign types."""
        assert is_valid_address(value) is False


# =============================================================================
# is_valid_tx_hash Tests
# =============================================================================


class TestIsValidTxHash:
    """Tests for the transaction-hash predicate."""

    def test_valid_hash(self) -> None:
        assert is_valid_tx_hash("0x" + "a" * 64) is True

    def test_mixed_case_hash(self) -> None:
        assert is_valid_tx_hash("0x" + "aB" * 32) is True

    @pytest.mark.parametrize(
        "value",
        [
            "0x" + "a" * 63,
            "0x" + "a" * 65,
            "a" * 66,
            "0x" + "z" * 64,
            "",
            None,
        ],
    )
    def test_invalid_hash(self, value) -> None:
        assert is_valid_tx_hash(value) is False


# =============================================================================
# Raising Validators
# =============================================================================


class TestValidateAddress:
    """Tests for validate_address()."""

    def test_returns_checksum_form(self) -> None:
        assert validate_address(CHECKSUMMED.lower()) == CHECKSUMMED

    def test_checksummed_passes_through(self) -> None:
        assert validate_address(CHECKSUMMED) == CHECKSUMMED

    def test_missing_address(self) -> None:
        with pytest.raises(InvalidAddressError) as exc_info:
            validate_address("", "receiver")

        assert exc_info.value.field == "receiver"
        assert "required" in str(exc_info.value)

    def test_bad_checksum_raises(self) -> None:
        with pytest.raises(InvalidAddressError) as exc_info:
            validate_address(flip_first_letter(CHECKSUMMED))

        assert exc_info.value.code == "INVALID_ADDRESS"
        assert isinstance(exc_info.value, ValidationError)


class TestValidateTxHash:
    """Tests for validate_tx_hash()."""

    def test_returns_lowercase(self) -> None:
        assert validate_tx_hash("0x" + "AB" * 32) == "0x" + "ab" * 32

    def test_invalid_raises(self) -> None:
        with pytest.raises(InvalidHashError) as exc_info:
            validate_tx_hash("0x1234")

        assert exc_info.value.code == "INVALID_HASH"
        assert exc_info.value.details["tx_hash"] == "0x1234"

    def test_none_raises(self) -> None:
        with pytest.raises(InvalidHashError):
            validate_tx_hash(None)
