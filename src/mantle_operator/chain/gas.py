"""
Gas-limit resolution for the Mantle sequencer.

The Mantle sequencer does not always answer ``eth_estimateGas`` honestly.
When it cannot (or will not) simulate a transfer it tends to echo the block
gas limit (~89M) instead of rejecting the call, and a transaction sent with
a naive limit is then either overpriced or rejected by the intrinsic-gas
check tied to L1 rollup costs.

Resolution order:

1. Ask the RPC for an estimate. If the call fails, assume the sentinel
   block-limit answer (89,000,000).
2. An estimate at or below 1,000,000 is trusted and returned unchanged.
3. A larger estimate is suspect. Read ``l1BaseFee`` from the L1 gas price
   oracle predeploy:

   - above 21,000: return ``max(l1BaseFee + 1,000,000, 80,000,000)``
   - otherwise: return 21,000
   - oracle unreachable: return 21,000

4. Anything else that fails collapses to 21,000.

``resolve`` never raises.
"""

from __future__ import annotations

from typing import Union

from web3 import Web3

from mantle_operator.abis import GAS_ORACLE_ABI
from mantle_operator.chain.selector import ClientHandle, ClientSelector
from mantle_operator.constants import (
    INTRINSIC_TRANSFER_GAS,
    L1_BASE_FEE_MARGIN,
    L1_BASE_FEE_THRESHOLD,
    SEQUENCER_GAS_FLOOR,
    SEQUENCER_SENTINEL_GAS_LIMIT,
    SUSPECT_ESTIMATE_THRESHOLD,
)
from mantle_operator.models import GasQuote, GasQuoteSource
from mantle_operator.utils.fallback import with_fallback
from mantle_operator.utils.logging import get_logger
from mantle_operator.utils.units import Amount, to_base_units

_logger = get_logger(__name__)


def compensate_for_l1_base_fee(l1_base_fee: int) -> GasQuote:
    """
    Derive a gas limit for a suspect estimate from the oracle's L1 base fee.

    Example:
        >>> compensate_for_l1_base_fee(90_000_000).limit
        91000000
        >>> compensate_for_l1_base_fee(50_000_000).limit
        80000000
        >>> compensate_for_l1_base_fee(20_000).limit
        21000
    """
    if l1_base_fee > L1_BASE_FEE_THRESHOLD:
        return GasQuote(
            limit=max(l1_base_fee + L1_BASE_FEE_MARGIN, SEQUENCER_GAS_FLOOR),
            source=GasQuoteSource.L1_FLOOR,
        )
    return GasQuote(limit=INTRINSIC_TRANSFER_GAS, source=GasQuoteSource.MINIMAL)


class GasLimitResolver:
    """Resolves safe gas limits for native transfers on Mantle."""

    def __init__(self, selector: ClientSelector) -> None:
        self._selector = selector

    def _oracle(self, client: ClientHandle):
        return client.w3.eth.contract(
            address=Web3.to_checksum_address(self._selector.network.gas_oracle),
            abi=GAS_ORACLE_ABI,
        )

    async def resolve(self, sender: str, receiver: str, amount: Amount) -> GasQuote:
        """
        Resolve the gas limit for sending ``amount`` MNT from ``sender`` to
        ``receiver``.

        Args:
            sender: Sender address
            receiver: Receiver address
            amount: Amount in MNT

        Returns:
            GasQuote; never raises
        """
        try:
            return await self._resolve(sender, receiver, amount)
        except Exception as e:
            _logger.warning(
                "Gas estimation failed completely, using default",
                extra={"error": str(e), "default": INTRINSIC_TRANSFER_GAS},
            )
            return GasQuote(limit=INTRINSIC_TRANSFER_GAS, source=GasQuoteSource.FALLBACK)

    async def _resolve(self, sender: str, receiver: str, amount: Amount) -> GasQuote:
        client = self._selector.get_client(requires_signing=False)
        tx = {
            "from": Web3.to_checksum_address(sender),
            "to": Web3.to_checksum_address(receiver),
            "value": to_base_units(amount, self._selector.network.native_decimals),
        }

        try:
            limit = int(await client.w3.eth.estimate_gas(tx))
        except Exception as e:
            # Usually an unfunded sender or a sequencer simulation error
            _logger.warning(
                "Gas estimation RPC call failed, assuming sequencer sentinel",
                extra={"error": str(e), "sentinel": SEQUENCER_SENTINEL_GAS_LIMIT},
            )
            limit = SEQUENCER_SENTINEL_GAS_LIMIT

        if limit <= SUSPECT_ESTIMATE_THRESHOLD:
            return GasQuote(limit=limit, source=GasQuoteSource.RPC)

        try:
            l1_base_fee = int(await self._oracle(client).functions.l1BaseFee().call())
        except Exception as e:
            _logger.warning(
                "L1 base fee read failed for suspect estimate, using minimal limit",
                extra={"error": str(e), "estimate": limit},
            )
            return GasQuote(limit=INTRINSIC_TRANSFER_GAS, source=GasQuoteSource.FALLBACK)

        quote = compensate_for_l1_base_fee(l1_base_fee)
        _logger.debug(
            "Compensated suspect gas estimate",
            extra={"estimate": limit, "l1_base_fee": l1_base_fee, "limit": quote.limit},
        )
        return quote

    async def get_l1_fee(self, data: Union[str, bytes] = "0x") -> int:
        """
        Quote the L1 data fee (wei) for serialized transaction ``data``.

        Returns 0 if the oracle cannot be reached.
        """
        payload = Web3.to_bytes(hexstr=data) if isinstance(data, str) else bytes(data)

        async def read() -> int:
            client = self._selector.get_client(requires_signing=False)
            return int(await self._oracle(client).functions.getL1Fee(payload).call())

        return await with_fallback(read, 0, label="L1 fee quote", logger=_logger)


__all__ = ["GasLimitResolver", "compensate_for_l1_base_fee"]
