"""Token lookup against a network's registry."""

from __future__ import annotations

from typing import Optional

from web3 import Web3

from mantle_operator.config import NetworkConfig, TokenDescriptor
from mantle_operator.constants import DEFAULT_TOKEN_DECIMALS
from mantle_operator.errors import UnknownTokenError
from mantle_operator.utils.validation import validate_address


def resolve_token(
    network: NetworkConfig,
    symbol: Optional[str],
    contract_address: Optional[str] = None,
    decimals: Optional[int] = None,
) -> TokenDescriptor:
    """
    Resolve a token from the registry, falling back to an explicit contract.

    The registry wins when both are available. Unregistered tokens use
    ``decimals`` if given, otherwise the stablecoin default of 6.

    Raises:
        UnknownTokenError: If the symbol is not registered and no contract
            address was supplied
        InvalidAddressError: If the supplied contract address is malformed
    """
    registered = network.find_token(symbol)
    if registered is not None:
        return registered.model_copy(
            update={"contract_address": Web3.to_checksum_address(registered.contract_address)}
        )

    if not contract_address:
        raise UnknownTokenError(symbol or "", network=network.name.value)

    return TokenDescriptor(
        symbol=(symbol or "token").lower(),
        contract_address=validate_address(contract_address, "contract_address"),
        decimals=DEFAULT_TOKEN_DECIMALS if decimals is None else decimals,
    )


__all__ = ["resolve_token"]
