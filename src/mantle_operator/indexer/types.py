"""
Raw record types returned by the Mobula wallet-transactions API.

Only the fields the normalizer reads are declared; anything else in the
payload is ignored.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class IndexerAsset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    symbol: Optional[str] = None
    name: Optional[str] = None


class IndexerTransaction(BaseModel):
    """
    One raw transaction record.

    ``timestamp`` is in milliseconds; the API has shipped it both as
    ``timestamp`` and ``timestamp_ms``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    hash: str = Field(..., min_length=1)
    from_address: Optional[str] = Field(default=None, alias="from")
    to_address: Optional[str] = Field(default=None, alias="to")
    amount: Optional[Decimal] = None
    asset: Optional[IndexerAsset] = None
    timestamp: float = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("timestamp", "timestamp_ms"),
    )
    block_number: Optional[int] = None
    blockchain: Optional[str] = None
    tx_cost: Optional[Decimal] = None
    contract: Optional[str] = None
    type: Optional[str] = None
    amount_usd: Optional[Decimal] = None


class IndexerPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Records stay raw so one malformed row does not discard the page
    transactions: List[Dict[str, Any]] = Field(default_factory=list)


class IndexerResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: Optional[IndexerPage] = None


__all__ = ["IndexerAsset", "IndexerTransaction", "IndexerPage", "IndexerResponse"]
