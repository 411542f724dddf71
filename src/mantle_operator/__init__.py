"""
mantle-operator - wallet-side chain access for the Mantle L2.

This package provides the on-chain half of a Mantle wallet: balances,
transfers, gas estimation that copes with the sequencer's block-limit
answers, indexed history, and receipt-level transaction detail.

Quick Start:
    >>> from mantle_operator import MantleClient
    >>> import asyncio
    >>>
    >>> async def main():
    ...     client = MantleClient.create("mantle")
    ...     balance = await client.get_native_balance(
    ...         "0x09bc4e0d864854c6afb6eb9a9cdf58ac190d0df9"
    ...     )
    ...     print(f"Balance: {balance} MNT")
    ...
    >>> asyncio.run(main())

Modules:
- `client`: MantleClient facade
- `chain`: client selection, balances, gas, submission and detail decoding
- `indexer`: normalized transaction history
- `config`: network registry and indexer settings
- `errors`: exception hierarchy
- `utils`: validation, unit conversion, logging and fallback helpers
"""

from mantle_operator.version import __version__, __version_info__

# Client
from mantle_operator.client import MantleClient

# Chain components
from mantle_operator.chain import (
    BalanceReader,
    ClientHandle,
    ClientSelector,
    GasLimitResolver,
    TransactionDetailDecoder,
    TransactionSubmitter,
    WalletSession,
    compensate_for_l1_base_fee,
    resolve_token,
)

# History
from mantle_operator.indexer import TransactionHistoryClient

# Configuration
from mantle_operator.config import (
    NETWORKS,
    IndexerConfig,
    Network,
    NetworkConfig,
    TokenDescriptor,
    get_network,
    network_from_env,
)

# Models
from mantle_operator.models import (
    GasQuote,
    GasQuoteSource,
    NormalizedTransactionSummary,
    PendingTransactionRequest,
    SubmittedTransaction,
    TokenTransfer,
    TransactionDetail,
    TxStatus,
)

# Errors
from mantle_operator.errors import (
    IndexerError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidHashError,
    InvalidSignerKeyError,
    MantleError,
    RpcError,
    SubmissionFailedError,
    TransactionNotFoundError,
    UnknownTokenError,
    ValidationError,
    WalletSessionRequiredError,
)

# Utilities
from mantle_operator.utils import (
    configure_logging,
    from_base_units,
    get_logger,
    is_valid_address,
    is_valid_tx_hash,
    to_base_units,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Client
    "MantleClient",
    # Chain
    "BalanceReader",
    "ClientHandle",
    "ClientSelector",
    "GasLimitResolver",
    "TransactionDetailDecoder",
    "TransactionSubmitter",
    "WalletSession",
    "compensate_for_l1_base_fee",
    "resolve_token",
    "TransactionHistoryClient",
    # Config
    "NETWORKS",
    "IndexerConfig",
    "Network",
    "NetworkConfig",
    "TokenDescriptor",
    "get_network",
    "network_from_env",
    # Models
    "GasQuote",
    "GasQuoteSource",
    "NormalizedTransactionSummary",
    "PendingTransactionRequest",
    "SubmittedTransaction",
    "TokenTransfer",
    "TransactionDetail",
    "TxStatus",
    # Errors
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
    # Utilities
    "configure_logging",
    "get_logger",
    "is_valid_address",
    "is_valid_tx_hash",
    "to_base_units",
    "from_base_units",
]
