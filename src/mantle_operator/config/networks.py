"""
Network configuration for the Mantle chain layer.

Every network carries its own immutable token registry, so callers that
target a different deployment inject a different NetworkConfig instead of
patching module globals.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from mantle_operator.constants import (
    INDEXER_TIMEOUT_SECONDS,
    NATIVE_DECIMALS,
    NATIVE_SYMBOL,
    PROVIDER_TIMEOUT_SECONDS,
)

__all__ = [
    "Network",
    "TokenDescriptor",
    "NetworkConfig",
    "IndexerConfig",
    "NETWORKS",
    "MANTLE_GAS_ORACLE",
    "get_network",
    "network_from_env",
]

# L1 gas price oracle predeploy (same address on every Mantle network)
MANTLE_GAS_ORACLE = "0x420000000000000000000000000000000000000F"


class Network(str, Enum):
    MANTLE = "mantle"
    MANTLE_SEPOLIA = "mantle-sepolia"


class TokenDescriptor(BaseModel):
    """
    A registered fungible token.

    Decimals are fixed per token; balance reads never query ``decimals()``.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., min_length=1, description="Lowercase lookup symbol")
    contract_address: str = Field(..., pattern=r"^0x[a-fA-F0-9]{40}$")
    decimals: int = Field(..., ge=0, le=36)


class NetworkConfig(BaseModel):
    """
    Immutable per-network configuration.

    Example:
        ```python
        config = get_network(Network.MANTLE, rpc_url="https://my-node.example")
        usdc = config.find_token("USDC")
        ```
    """

    model_config = ConfigDict(frozen=True)

    name: Network
    chain_id: int = Field(..., gt=0)
    rpc_url: str
    native_symbol: str = NATIVE_SYMBOL
    native_decimals: int = NATIVE_DECIMALS
    gas_oracle: str = MANTLE_GAS_ORACLE
    indexer_blockchain: Optional[str] = Field(
        default=None,
        description="Blockchain tag used by the history indexer; None disables history",
    )
    tokens: Tuple[TokenDescriptor, ...] = ()
    timeout: int = Field(default=PROVIDER_TIMEOUT_SECONDS, ge=1, description="RPC timeout in seconds")

    def find_token(self, symbol: Optional[str]) -> Optional[TokenDescriptor]:
        """Look up a registered token by symbol (case-insensitive)."""
        if not symbol:
            return None
        wanted = symbol.lower()
        for token in self.tokens:
            if token.symbol == wanted:
                return token
        return None


class IndexerConfig(BaseModel):
    """Configuration for the transaction-history indexer (Mobula)."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default="https://api.mobula.io/api/1/wallet/transactions",
        description="Wallet transactions endpoint",
    )
    timeout: int = Field(
        default=INDEXER_TIMEOUT_SECONDS,
        ge=1,
        description="Request timeout in seconds",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Optional API key, sent as the Authorization header",
    )

    @classmethod
    def from_env(cls) -> "IndexerConfig":
        """Build from ``MOBULA_API_URL`` / ``MOBULA_API_KEY`` when set."""
        overrides: Dict[str, str] = {}
        if os.environ.get("MOBULA_API_URL"):
            overrides["base_url"] = os.environ["MOBULA_API_URL"]
        if os.environ.get("MOBULA_API_KEY"):
            overrides["api_key"] = os.environ["MOBULA_API_KEY"]
        return cls(**overrides)


NETWORKS: Dict[Network, NetworkConfig] = {
    Network.MANTLE: NetworkConfig(
        name=Network.MANTLE,
        chain_id=5000,
        rpc_url="https://rpc.mantle.xyz",
        indexer_blockchain="mantle",
        tokens=(
            TokenDescriptor(
                symbol="usdc",
                contract_address="0x09Bc4E0D864854c6aFB6eB9A9cdF58aC190D0dF9",
                decimals=6,
            ),
            TokenDescriptor(
                symbol="usdt",
                contract_address="0x201EBa5CC46D216Ce6DC03F6a759e8E766e956aE",
                decimals=6,
            ),
            TokenDescriptor(
                symbol="wmnt",
                contract_address="0x78c1b0C915c4FAA5FffA6CAbf0219DA63d7f4cb8",
                decimals=18,
            ),
        ),
    ),
    Network.MANTLE_SEPOLIA: NetworkConfig(
        name=Network.MANTLE_SEPOLIA,
        chain_id=5003,
        rpc_url="https://rpc.sepolia.mantle.xyz",
        # No registered tokens or indexer coverage yet; pass contract_address explicitly.
    ),
}


def get_network(
    network: Union[str, Network] = Network.MANTLE,
    rpc_url: Optional[str] = None,
) -> NetworkConfig:
    """
    Return the configuration for ``network``, optionally with a custom RPC URL.

    Raises:
        ValueError: If the network name is unknown
    """
    cfg = NETWORKS[Network(network)]
    if rpc_url:
        return cfg.model_copy(update={"rpc_url": rpc_url})
    return cfg


def network_from_env() -> NetworkConfig:
    """Resolve the network from ``MANTLE_NETWORK`` and ``MANTLE_RPC_URL``."""
    return get_network(
        os.environ.get("MANTLE_NETWORK", Network.MANTLE.value),
        rpc_url=os.environ.get("MANTLE_RPC_URL"),
    )
