"""
Utilities for the mantle-operator package.
"""

from mantle_operator.utils.fallback import with_fallback
from mantle_operator.utils.logging import (
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)
from mantle_operator.utils.units import from_base_units, to_base_units, to_decimal
from mantle_operator.utils.validation import (
    is_valid_address,
    is_valid_tx_hash,
    validate_address,
    validate_tx_hash,
)

__all__ = [
    # Validation
    "is_valid_address",
    "is_valid_tx_hash",
    "validate_address",
    "validate_tx_hash",
    # Units
    "to_decimal",
    "to_base_units",
    "from_base_units",
    # Structured logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
    # Resilience
    "with_fallback",
]
