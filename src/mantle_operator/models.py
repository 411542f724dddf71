from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

__all__ = [
    "GasQuoteSource",
    "GasQuote",
    "TxStatus",
    "PendingTransactionRequest",
    "SubmittedTransaction",
    "TokenTransfer",
    "TransactionDetail",
    "NormalizedTransactionSummary",
]


class GasQuoteSource(str, Enum):
    RPC = "rpc"  # trusted sequencer estimate
    L1_FLOOR = "l1_floor"  # inflated floor derived from the oracle's l1BaseFee
    MINIMAL = "minimal"  # suspect estimate with a low l1BaseFee
    FALLBACK = "fallback"  # something failed; plain-transfer default


class TxStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"


@dataclass(frozen=True)
class GasQuote:
    limit: int
    source: GasQuoteSource = GasQuoteSource.RPC

    def __int__(self) -> int:
        return self.limit


@dataclass(frozen=True)
class PendingTransactionRequest:
    """A fully-priced legacy transaction, ready to be signed once.

    Attributes:
        sender: Checksummed sender address
        receiver: Checksummed receiver (the token contract for token transfers)
        value_wei: Native value in wei
        gas_limit: Resolved gas limit
        gas_price_wei: Legacy gas price in wei
        nonce: Sender nonce
        chain_id: EIP-155 chain id
        data: Call data (``0x`` for native transfers)
        tx_type: Always ``legacy``; EIP-1559 fields are never set
    """
    sender: str
    receiver: str
    value_wei: int
    gas_limit: int
    gas_price_wei: int
    nonce: int
    chain_id: int
    data: str = "0x"
    tx_type: str = "legacy"

    def to_tx_params(self) -> Dict[str, Any]:
        # gasPrice without maxFeePerGas makes eth_account sign a type-0 transaction
        return {
            "from": self.sender,
            "to": self.receiver,
            "value": self.value_wei,
            "gas": self.gas_limit,
            "gasPrice": self.gas_price_wei,
            "nonce": self.nonce,
            "chainId": self.chain_id,
            "data": self.data,
        }


@dataclass(frozen=True)
class SubmittedTransaction:
    tx_hash: str
    request: PendingTransactionRequest


@dataclass(frozen=True)
class TokenTransfer:
    """ERC-20 Transfer decoded from a receipt log without a known ABI."""
    from_address: str
    to_address: str
    value: Decimal
    symbol: str
    decimals: int
    contract_address: str


@dataclass(frozen=True)
class TransactionDetail:
    """Transaction, receipt and block merged into one record.

    ``gas_used``, ``gas_fee`` are ``None`` while the transaction is pending.
    ``gas_price`` is in gwei, ``value`` and ``gas_fee`` in the native unit.
    """
    hash: str
    from_address: str
    to_address: Optional[str]
    value: Decimal
    symbol: str
    block_number: Optional[int]
    timestamp: Optional[int]
    confirmations: int
    gas_limit: int
    gas_used: Optional[int]
    gas_price: Decimal
    gas_fee: Optional[Decimal]
    nonce: int
    input: str
    status: TxStatus
    is_error: bool
    token_transfer: Optional[TokenTransfer] = None
    logs: List[Dict[str, Any]] = field(default_factory=list)
    type: Optional[int] = None


@dataclass(frozen=True)
class NormalizedTransactionSummary:
    """One history row normalized from an indexer record.

    The indexer does not expose raw gas components, so ``gas_used`` and
    ``gas_price`` (wei) are synthesized from ``transaction_fee`` as if the
    transaction were a plain 21,000-gas transfer.
    """
    hash: str
    from_address: Optional[str]
    to_address: Optional[str]
    value: Decimal
    symbol: str
    timestamp: int
    block_number: Optional[int]
    is_received: bool
    is_sent: bool
    gas_used: int
    gas_price: int
    transaction_fee: Decimal
    is_token_transfer: bool
    contract_address: Optional[str] = None
    token_name: Optional[str] = None
    amount_usd: Optional[Decimal] = None
    tx_type: Optional[str] = None
    tx_cost: Optional[Decimal] = None
    is_error: bool = False
    confirmations: int = 0
    nonce: int = 0
    input: str = "0x"
