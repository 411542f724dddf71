"""
Transaction detail reconstruction.

Merges a transaction, its receipt, the current chain height and the
transaction's block into one TransactionDetail, and tries to decode a single
ERC-20 ``Transfer`` event from the receipt logs without knowing the token's
ABI in advance.

Token decoding is advisory: a missing or undecodable Transfer log leaves
``token_transfer`` empty and never fails the lookup.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from eth_abi import decode
from web3 import Web3
from web3.exceptions import TransactionNotFound

from mantle_operator.abis import ERC20_ABI
from mantle_operator.chain.selector import ClientHandle, ClientSelector
from mantle_operator.constants import (
    FALLBACK_TOKEN_DECIMALS,
    FALLBACK_TOKEN_SYMBOL,
    TRANSFER_EVENT_TOPIC,
)
from mantle_operator.errors import MantleError, RpcError, TransactionNotFoundError
from mantle_operator.models import TokenTransfer, TransactionDetail, TxStatus
from mantle_operator.utils.fallback import with_fallback
from mantle_operator.utils.logging import get_logger
from mantle_operator.utils.units import from_base_units
from mantle_operator.utils.validation import validate_tx_hash

_logger = get_logger(__name__)

GWEI_DECIMALS = 9


def _hex(value: Any) -> str:
    """Render HexBytes/bytes as 0x-hex; pass strings through."""
    if isinstance(value, (bytes, bytearray)):
        return Web3.to_hex(value)
    return str(value)


def _topic_address(topic: Any) -> str:
    # The address is the low 20 bytes; padding bytes are not checked
    return Web3.to_checksum_address(Web3.to_bytes(hexstr=_hex(topic))[-20:])


def _log_to_dict(log: Any) -> Dict[str, Any]:
    return {
        "address": log.get("address"),
        "topics": [_hex(topic) for topic in log.get("topics", [])],
        "data": _hex(log.get("data", "0x")),
        "log_index": log.get("logIndex"),
        "block_number": log.get("blockNumber"),
        "transaction_hash": _hex(log["transactionHash"]) if log.get("transactionHash") else None,
    }


def find_transfer_log(logs: List[Any]) -> Optional[Any]:
    """Return the first log whose topic 0 is the ERC-20 Transfer signature."""
    for log in logs:
        topics = log.get("topics") or []
        if topics and _hex(topics[0]).lower() == TRANSFER_EVENT_TOPIC:
            return log
    return None


def map_status(receipt: Optional[Any]) -> TxStatus:
    if receipt is None:
        return TxStatus.PENDING
    return TxStatus.SUCCESS if receipt.get("status") == 1 else TxStatus.FAILED


class TransactionDetailDecoder:
    """Builds TransactionDetail records from chain reads."""

    def __init__(self, selector: ClientSelector) -> None:
        self._selector = selector

    async def get_detail(self, tx_hash: str) -> TransactionDetail:
        """
        Get the full detail record for ``tx_hash``.

        Args:
            tx_hash: 0x-prefixed 32-byte transaction hash

        Returns:
            TransactionDetail

        Raises:
            InvalidHashError: If the hash is malformed
            TransactionNotFoundError: If the node does not know the transaction
            RpcError: If any other chain read fails
        """
        tx_hash = validate_tx_hash(tx_hash)
        client = self._selector.get_client(requires_signing=False)

        try:
            tx, receipt, current_block = await asyncio.gather(
                self._get_transaction(client, tx_hash),
                self._get_receipt(client, tx_hash),
                client.w3.eth.block_number,
            )
            if tx is None:
                raise TransactionNotFoundError(tx_hash)

            block_number = tx.get("blockNumber")
            block = await client.w3.eth.get_block(block_number) if block_number is not None else None
        except MantleError:
            raise
        except Exception as e:
            _logger.error(
                "Transaction detail lookup failed",
                extra={"tx_hash": tx_hash, "error": str(e)},
            )
            raise RpcError(f"Transaction detail lookup failed: {e}", tx_hash=tx_hash) from e

        token_transfer = None
        logs = list(receipt.get("logs") or []) if receipt is not None else []
        if logs:
            token_transfer = await self._decode_token_transfer(client, logs)

        return self._build_detail(tx, receipt, block, int(current_block), token_transfer, logs)

    @staticmethod
    async def _get_transaction(client: ClientHandle, tx_hash: str) -> Optional[Any]:
        try:
            return await client.w3.eth.get_transaction(tx_hash)
        except TransactionNotFound:
            return None

    @staticmethod
    async def _get_receipt(client: ClientHandle, tx_hash: str) -> Optional[Any]:
        # No receipt yet means the transaction is still pending
        try:
            return await client.w3.eth.get_transaction_receipt(tx_hash)
        except TransactionNotFound:
            return None

    def _build_detail(
        self,
        tx: Any,
        receipt: Optional[Any],
        block: Optional[Any],
        current_block: int,
        token_transfer: Optional[TokenTransfer],
        logs: List[Any],
    ) -> TransactionDetail:
        network = self._selector.network
        block_number = tx.get("blockNumber")
        tx_gas_price = tx.get("gasPrice") or 0

        gas_used = receipt.get("gasUsed") if receipt is not None else None
        effective_price = receipt.get("effectiveGasPrice") if receipt is not None else None
        if effective_price is None:
            effective_price = tx.get("gasPrice")
        gas_fee = None
        if gas_used is not None and effective_price is not None:
            gas_fee = from_base_units(gas_used * effective_price, network.native_decimals)

        status = map_status(receipt)
        tx_type = tx.get("type")

        return TransactionDetail(
            hash=_hex(tx.get("hash")),
            from_address=tx.get("from"),
            to_address=tx.get("to"),
            value=from_base_units(tx.get("value") or 0, network.native_decimals),
            symbol=network.native_symbol,
            block_number=block_number,
            timestamp=block.get("timestamp") if block is not None else None,
            confirmations=max(current_block - block_number, 0) if block_number is not None else 0,
            gas_limit=int(tx.get("gas") or 0),
            gas_used=int(gas_used) if gas_used is not None else None,
            gas_price=from_base_units(tx_gas_price, GWEI_DECIMALS),
            gas_fee=gas_fee,
            nonce=int(tx.get("nonce") or 0),
            input=_hex(tx.get("input") or "0x"),
            status=status,
            is_error=status == TxStatus.FAILED,
            token_transfer=token_transfer,
            logs=[_log_to_dict(log) for log in logs],
            type=int(tx_type, 16) if isinstance(tx_type, str) else tx_type,
        )

    async def _decode_token_transfer(self, client: ClientHandle, logs: List[Any]) -> Optional[TokenTransfer]:
        transfer_log = find_transfer_log(logs)
        if transfer_log is None:
            return None

        try:
            contract_address = Web3.to_checksum_address(transfer_log["address"])
            topics = transfer_log["topics"]
            from_address = _topic_address(topics[1])
            to_address = _topic_address(topics[2])
            (raw_value,) = decode(["uint256"], Web3.to_bytes(hexstr=_hex(transfer_log["data"])))

            contract = client.w3.eth.contract(address=contract_address, abi=ERC20_ABI)
            context = {"contract": contract_address}
            # Non-standard tokens may omit either method; default each independently
            symbol, decimals = await asyncio.gather(
                with_fallback(
                    lambda: contract.functions.symbol().call(),
                    FALLBACK_TOKEN_SYMBOL,
                    label="Token symbol read",
                    logger=_logger,
                    level=logging.DEBUG,
                    context=context,
                ),
                with_fallback(
                    lambda: contract.functions.decimals().call(),
                    FALLBACK_TOKEN_DECIMALS,
                    label="Token decimals read",
                    logger=_logger,
                    level=logging.DEBUG,
                    context=context,
                ),
            )

            return TokenTransfer(
                from_address=from_address,
                to_address=to_address,
                value=from_base_units(raw_value, int(decimals)),
                symbol=str(symbol),
                decimals=int(decimals),
                contract_address=contract_address,
            )
        except Exception as e:
            _logger.warning(
                "Could not decode token transfer event",
                extra={"error": str(e), "contract": transfer_log.get("address")},
            )
            return None


__all__ = ["TransactionDetailDecoder", "find_transfer_log", "map_status"]
