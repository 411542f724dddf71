"""Constants for the mantle-operator package.

Gas constants in this module are empirical calibrations against the live
Mantle sequencer.
"""

# Native asset
NATIVE_DECIMALS = 18
NATIVE_SYMBOL = "MNT"

# Gas Constants (Mantle L2)
INTRINSIC_TRANSFER_GAS = 21_000  # cost of a plain value transfer; terminal fallback
SUSPECT_ESTIMATE_THRESHOLD = 1_000_000  # estimates above this are treated as a block-limit echo
SEQUENCER_SENTINEL_GAS_LIMIT = 89_000_000  # stands in for "sequencer refused to estimate"
L1_BASE_FEE_THRESHOLD = 21_000  # oracle l1BaseFee above this needs an inflated floor
L1_BASE_FEE_MARGIN = 1_000_000  # added on top of l1BaseFee for the inflated floor
SEQUENCER_GAS_FLOOR = 80_000_000  # "super buffer" known to clear the sequencer's intrinsic check

# Token Constants
DEFAULT_TOKEN_DECIMALS = 6  # registered stablecoins; used for unregistered overrides too
FALLBACK_TOKEN_SYMBOL = "TOKEN"
FALLBACK_TOKEN_DECIMALS = 18

# keccak256("Transfer(address,address,uint256)")
TRANSFER_EVENT_TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"

# Indexer Constants
DEFAULT_PAGE_SIZE = 50
NATIVE_ASSET_SENTINEL = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"
NATIVE_TX_TYPE = "native"

# Network Constants
PROVIDER_TIMEOUT_SECONDS = 30
INDEXER_TIMEOUT_SECONDS = 30

__all__ = [
    "NATIVE_DECIMALS",
    "NATIVE_SYMBOL",
    "INTRINSIC_TRANSFER_GAS",
    "SUSPECT_ESTIMATE_THRESHOLD",
    "SEQUENCER_SENTINEL_GAS_LIMIT",
    "L1_BASE_FEE_THRESHOLD",
    "L1_BASE_FEE_MARGIN",
    "SEQUENCER_GAS_FLOOR",
    "DEFAULT_TOKEN_DECIMALS",
    "FALLBACK_TOKEN_SYMBOL",
    "FALLBACK_TOKEN_DECIMALS",
    "TRANSFER_EVENT_TOPIC",
    "DEFAULT_PAGE_SIZE",
    "NATIVE_ASSET_SENTINEL",
    "NATIVE_TX_TYPE",
    "PROVIDER_TIMEOUT_SECONDS",
    "INDEXER_TIMEOUT_SECONDS",
]
