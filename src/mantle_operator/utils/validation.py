"""
Validation utilities for the mantle-operator package.

Provides predicates and raising validators for:
- Ethereum addresses (checksummed or all-lowercase)
- Transaction hashes (0x + 64 hex digits)

Predicates never raise; validators raise ValidationError subclasses.
"""

from __future__ import annotations

import re
from typing import Any

from eth_typing import ChecksumAddress
from eth_utils import is_checksum_address, to_checksum_address

from mantle_operator.errors import InvalidAddressError, InvalidHashError

ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")
TX_HASH_PATTERN = re.compile(r"0x[0-9a-fA-F]{64}")


def is_valid_address(address: Any) -> bool:
    """
    Check whether ``address`` is an acceptable Mantle address.

    Accepted forms are the exact EIP-55 checksum encoding and the
    all-lowercase encoding. Mixed case with a wrong checksum is rejected,
    and so is any all-uppercase address that is not also its own checksum.

    Args:
        address: Any value.

    Returns:
        True if valid, False otherwise (never raises).

    Example:
        >>> is_valid_address("0x09bc4e0d864854c6afb6eb9a9cdf58ac190d0df9")
        True
        >>> is_valid_address("0x09BC4E0d864854c6afb6eb9a9cdf58ac190d0df9")
        False
    """
    if not isinstance(address, str) or not ADDRESS_PATTERN.fullmatch(address):
        return False
    if address == address.lower():
        return True
    return is_checksum_address(address)


def is_valid_tx_hash(tx_hash: Any) -> bool:
    """Check whether ``tx_hash`` is 0x followed by exactly 64 hex digits."""
    return isinstance(tx_hash, str) and bool(TX_HASH_PATTERN.fullmatch(tx_hash))


def validate_address(address: Any, field_name: str = "address") -> ChecksumAddress:
    """
    Validate an address and return its checksum form.

    Raises:
        InvalidAddressError: If the address is missing, malformed or
            carries a wrong checksum
    """
    if not address:
        raise InvalidAddressError("", field=field_name, reason=f"{field_name} is required")
    if not is_valid_address(address):
        raise InvalidAddressError(
            str(address),
            field=field_name,
            reason="must be 0x followed by 40 hex characters, checksummed or lowercase",
        )
    return to_checksum_address(address)


def validate_tx_hash(tx_hash: Any, field_name: str = "tx_hash") -> str:
    """
    Validate a transaction hash and return it lowercased.

    Raises:
        InvalidHashError: If the hash is malformed
    """
    if not is_valid_tx_hash(tx_hash):
        raise InvalidHashError("" if tx_hash is None else str(tx_hash), field=field_name)
    return tx_hash.lower()


__all__ = [
    "ADDRESS_PATTERN",
    "TX_HASH_PATTERN",
    "is_valid_address",
    "is_valid_tx_hash",
    "validate_address",
    "validate_tx_hash",
]
