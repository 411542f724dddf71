"""
Typed errors raised by fail-loud operations.

Read operations (balances, gas resolution, history) never raise these for
transport failures; they are reserved for invalid input, missing
transactions and failed submissions.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from mantle_operator.errors.base import MantleError


class ValidationError(MantleError):
    """Raised when input validation fails."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


class InvalidAddressError(ValidationError):
    """
    Raised when an address is malformed or carries a wrong checksum.

    Example:
        >>> raise InvalidAddressError("0xnot-an-address", field="receiver")
    """

    code = "INVALID_ADDRESS"

    def __init__(
        self,
        address: str,
        *,
        field: str = "address",
        reason: Optional[str] = None,
    ) -> None:
        message = f"Invalid {field}: {address!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(
            message,
            details={"address": address, "field": field, "reason": reason},
        )
        self.address = address
        self.field = field
        self.reason = reason


class InvalidHashError(ValidationError):
    """Raised when a transaction hash is not 0x followed by 64 hex digits."""

    code = "INVALID_HASH"

    def __init__(self, tx_hash: str, *, field: str = "tx_hash") -> None:
        super().__init__(
            f"Invalid {field}: {tx_hash!r} (must be 0x followed by 64 hex characters)",
            details={"tx_hash": tx_hash, "field": field},
        )
        self.field = field


class InvalidAmountError(ValidationError):
    """Raised when an amount cannot be converted to base units."""

    code = "INVALID_AMOUNT"

    def __init__(self, amount: str, *, reason: str) -> None:
        super().__init__(
            f"Invalid amount {amount!r}: {reason}",
            details={"amount": amount, "reason": reason},
        )
        self.amount = amount
        self.reason = reason


class InvalidSignerKeyError(ValidationError):
    """Raised when a signer key cannot be loaded. The key is never echoed."""

    code = "INVALID_SIGNER_KEY"

    def __init__(self) -> None:
        super().__init__("Invalid private key format (key not shown for security)")


class UnknownTokenError(MantleError):
    """
    Raised when a token symbol is not in the registry and no contract
    address override was supplied.
    """

    code = "UNKNOWN_TOKEN"

    def __init__(self, symbol: str, *, network: Optional[str] = None) -> None:
        message = f"Contract address of token {symbol!r} not available"
        if network:
            message += f" on {network}"
        super().__init__(
            message,
            details={"symbol": symbol, "network": network},
        )
        self.symbol = symbol


class TransactionNotFoundError(MantleError):
    """Raised when a transaction lookup returns nothing."""

    code = "NOT_FOUND"

    def __init__(self, tx_hash: str) -> None:
        super().__init__(f"Transaction not found: {tx_hash}", tx_hash=tx_hash)


class SubmissionFailedError(MantleError):
    """
    Raised when a transfer could not be signed or broadcast.

    The underlying exception is chained as ``__cause__``.
    """

    code = "SUBMISSION_FAILED"

    def __init__(
        self,
        message: str,
        *,
        tx_hash: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            tx_hash=tx_hash,
            details=details,
        )


class WalletSessionRequiredError(MantleError):
    """Raised when a signing client is requested but no wallet session is connected."""

    code = "WALLET_SESSION_REQUIRED"

    def __init__(self, operation: Optional[str] = None) -> None:
        message = "A connected wallet session is required for signing operations"
        if operation:
            message += f" ({operation})"
        super().__init__(
            message,
            details={"operation": operation},
        )


class RpcError(MantleError):
    """Raised when an RPC/provider request fails on a fail-loud path."""

    code = "RPC_ERROR"

    def __init__(
        self,
        message: str,
        *,
        tx_hash: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, tx_hash=tx_hash, details=details)


class IndexerError(MantleError):
    """
    Raised inside the history client when the indexer responds with a
    non-success status or an unusable payload.

    The public history operation converts this into an empty result.
    """

    code = "INDEXER_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            details={"status_code": status_code, "url": url},
        )
        self.status_code = status_code
        self.url = url
