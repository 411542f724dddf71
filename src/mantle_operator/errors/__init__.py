"""
Exception hierarchy for the mantle-operator package.

MantleError
├── ValidationError
│   ├── InvalidAddressError
│   ├── InvalidHashError
│   ├── InvalidAmountError
│   └── InvalidSignerKeyError
├── UnknownTokenError
├── TransactionNotFoundError
├── SubmissionFailedError
├── WalletSessionRequiredError
├── RpcError
└── IndexerError
"""

from mantle_operator.errors.base import MantleError
from mantle_operator.errors.chain import (
    IndexerError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidHashError,
    InvalidSignerKeyError,
    RpcError,
    SubmissionFailedError,
    TransactionNotFoundError,
    UnknownTokenError,
    ValidationError,
    WalletSessionRequiredError,
)

__all__ = [
    "MantleError",
    "ValidationError",
    "InvalidAddressError",
    "InvalidHashError",
    "InvalidAmountError",
    "InvalidSignerKeyError",
    "UnknownTokenError",
    "TransactionNotFoundError",
    "SubmissionFailedError",
    "WalletSessionRequiredError",
    "RpcError",
    "IndexerError",
]
