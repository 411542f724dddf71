"""
Native and ERC-20 balance reads.

Balances are read through the public endpoint only. Transport failures are
logged and reported as a zero balance; invalid input still raises.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from mantle_operator.abis import ERC20_ABI
from mantle_operator.chain.selector import ClientSelector
from mantle_operator.chain.tokens import resolve_token
from mantle_operator.utils.fallback import with_fallback
from mantle_operator.utils.logging import get_logger
from mantle_operator.utils.units import from_base_units
from mantle_operator.utils.validation import validate_address

_logger = get_logger(__name__)


class BalanceReader:
    """
    Reads native (MNT) and registered token balances.

    Example:
        >>> reader = BalanceReader(ClientSelector(get_network()))
        >>> await reader.get_native_balance("0x...")
        Decimal('12.5')
        >>> await reader.get_token_balance("0x...", "usdc")
        Decimal('100.000000')
    """

    def __init__(self, selector: ClientSelector) -> None:
        self._selector = selector

    async def get_native_balance(self, address: str) -> Decimal:
        """
        Get the native balance of ``address`` in MNT.

        Raises:
            InvalidAddressError: If the address is invalid
        """
        owner = validate_address(address)
        network = self._selector.network

        async def read() -> Decimal:
            client = self._selector.get_client(requires_signing=False)
            balance_wei = await client.w3.eth.get_balance(owner)
            return from_base_units(balance_wei, network.native_decimals)

        return await with_fallback(
            read,
            Decimal(0),
            label="Native balance read",
            logger=_logger,
            context={"address": owner},
        )

    async def get_token_balance(
        self,
        address: str,
        token_symbol: Optional[str],
        contract_address: Optional[str] = None,
        decimals: Optional[int] = None,
    ) -> Decimal:
        """
        Get the ERC-20 balance of ``address``.

        Args:
            address: Token holder
            token_symbol: Registered symbol (``usdc``, ``usdt``, ``wmnt``)
            contract_address: Contract to use when the symbol is not registered
            decimals: Decimals for an unregistered contract (default 6)

        Raises:
            InvalidAddressError: If the holder or contract address is invalid
            UnknownTokenError: If neither the registry nor the override
                supplies a contract address
        """
        owner = validate_address(address)
        token = resolve_token(self._selector.network, token_symbol, contract_address, decimals)

        async def read() -> Decimal:
            client = self._selector.get_client(requires_signing=False)
            contract = client.w3.eth.contract(address=token.contract_address, abi=ERC20_ABI)
            raw = await contract.functions.balanceOf(owner).call()
            return from_base_units(raw, token.decimals)

        return await with_fallback(
            read,
            Decimal(0),
            label="Token balance read",
            logger=_logger,
            context={"address": owner, "token": token.symbol, "contract": token.contract_address},
        )


__all__ = ["BalanceReader"]
