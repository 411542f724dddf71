"""
Transaction history from the Mobula wallet-transactions API.

The indexer is a black box returning one page of raw records per request.
Each record on the target network is flattened into a
NormalizedTransactionSummary. Indexer failures never reach the caller:
a non-success status, a transport error or an unusable payload all yield
an empty page.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from mantle_operator.config import IndexerConfig, NetworkConfig
from mantle_operator.constants import (
    DEFAULT_PAGE_SIZE,
    INTRINSIC_TRANSFER_GAS,
    NATIVE_ASSET_SENTINEL,
    NATIVE_TX_TYPE,
)
from mantle_operator.errors import IndexerError, ValidationError
from mantle_operator.indexer.types import IndexerResponse, IndexerTransaction
from mantle_operator.models import NormalizedTransactionSummary
from mantle_operator.utils.fallback import with_fallback
from mantle_operator.utils.logging import get_logger
from mantle_operator.utils.validation import validate_address

_logger = get_logger(__name__)


class TransactionHistoryClient:
    """
    Paged, normalized transaction history for one wallet.

    Example:
        ```python
        history = TransactionHistoryClient(get_network(), IndexerConfig.from_env())
        rows = await history.get_history("0x...", page=2, page_size=25)
        ```
    """

    def __init__(self, network: NetworkConfig, config: Optional[IndexerConfig] = None) -> None:
        self._network = network
        self._config = config or IndexerConfig()

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def get_history(
        self,
        address: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[NormalizedTransactionSummary]:
        """
        Get one page of normalized history for ``address``.

        Args:
            address: Wallet address
            page: 1-based page number
            page_size: Records per page

        Returns:
            Normalized rows; empty on any indexer failure

        Raises:
            InvalidAddressError: If the address is invalid
            ValidationError: If page or page_size is below 1
        """
        owner = validate_address(address)
        if page < 1 or page_size < 1:
            raise ValidationError("page and page_size must be at least 1")

        blockchain = self._network.indexer_blockchain
        if not blockchain:
            _logger.warning(
                "History indexer does not cover this network",
                extra={"network": self._network.name.value},
            )
            return []

        records = await with_fallback(
            lambda: self._fetch_page(address, blockchain, page, page_size),
            [],
            label="Transaction history fetch",
            logger=_logger,
            context={"address": owner, "page": page},
        )

        summaries = []
        for raw in records:
            summary = self._normalize(raw, owner, blockchain)
            if summary is not None:
                summaries.append(summary)
        return summaries

    async def _fetch_page(
        self,
        address: str,
        blockchain: str,
        page: int,
        page_size: int,
    ) -> List[Dict[str, Any]]:
        params = {
            "wallet": address,
            "blockchain": blockchain,
            "limit": page_size,
            "offset": (page - 1) * page_size,
        }
        headers = {"Authorization": self._config.api_key} if self._config.api_key else {}

        async with httpx.AsyncClient(timeout=httpx.Timeout(self._config.timeout)) as client:
            response = await client.get(self._config.base_url, params=params, headers=headers)

            if not 200 <= response.status_code < 300:
                raise IndexerError(
                    f"Indexer returned HTTP {response.status_code}",
                    status_code=response.status_code,
                    url=self._config.base_url,
                )

            envelope = IndexerResponse.model_validate(response.json())

        if envelope.data is None:
            return []
        return envelope.data.transactions

    def _normalize(
        self,
        raw: Dict[str, Any],
        owner: str,
        blockchain: str,
    ) -> Optional[NormalizedTransactionSummary]:
        try:
            record = IndexerTransaction.model_validate(raw)
        except PydanticValidationError as e:
            _logger.debug(
                "Skipping malformed indexer record",
                extra={"error": str(e), "hash": raw.get("hash") if isinstance(raw, dict) else None},
            )
            return None

        if (record.blockchain or "").lower() != blockchain.lower():
            return None

        is_received = bool(record.to_address) and record.to_address.lower() == owner.lower()

        # tx_cost is the total fee in MNT; synthesize gas as a plain transfer
        fee = record.tx_cost or Decimal(0)
        if fee > 0:
            gas_used = INTRINSIC_TRANSFER_GAS
            gas_price = int(fee.scaleb(self._network.native_decimals) / INTRINSIC_TRANSFER_GAS)
        else:
            gas_used = 0
            gas_price = 0

        contract = record.contract
        if contract and contract.lower() == NATIVE_ASSET_SENTINEL:
            contract = None

        asset = record.asset
        return NormalizedTransactionSummary(
            hash=record.hash,
            from_address=record.from_address,
            to_address=record.to_address,
            value=record.amount or Decimal(0),
            symbol=(asset.symbol if asset and asset.symbol else self._network.native_symbol),
            timestamp=int(record.timestamp // 1000),
            block_number=record.block_number,
            is_received=is_received,
            is_sent=not is_received,
            gas_used=gas_used,
            gas_price=gas_price,
            transaction_fee=fee,
            is_token_transfer=record.type != NATIVE_TX_TYPE,
            contract_address=contract,
            token_name=asset.name if asset else None,
            amount_usd=record.amount_usd,
            tx_type=record.type,
            tx_cost=record.tx_cost,
        )


__all__ = ["TransactionHistoryClient"]
