"""Third-party transaction-history indexer integration."""

from mantle_operator.indexer.history import TransactionHistoryClient
from mantle_operator.indexer.types import (
    IndexerAsset,
    IndexerPage,
    IndexerResponse,
    IndexerTransaction,
)

__all__ = [
    "TransactionHistoryClient",
    "IndexerAsset",
    "IndexerPage",
    "IndexerResponse",
    "IndexerTransaction",
]
