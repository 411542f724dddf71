"""Network and indexer configuration."""

from mantle_operator.config.networks import (
    MANTLE_GAS_ORACLE,
    NETWORKS,
    IndexerConfig,
    Network,
    NetworkConfig,
    TokenDescriptor,
    get_network,
    network_from_env,
)

__all__ = [
    "MANTLE_GAS_ORACLE",
    "NETWORKS",
    "IndexerConfig",
    "Network",
    "NetworkConfig",
    "TokenDescriptor",
    "get_network",
    "network_from_env",
]
