"""
Native and token transfer submission.

Every transfer is signed locally with ``eth_account`` as a legacy (type-0,
``gasPrice``) transaction and broadcast through the wallet session's
client. Mantle's rollup fee accounting is more reliable with legacy
transactions than with EIP-1559 ones.

Writes are fail-loud: anything that goes wrong after input validation is
raised as SubmissionFailedError so the caller knows the transfer did not
happen. Broadcast transactions are not tracked afterwards.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional, Tuple

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from mantle_operator.abis import ERC20_ABI
from mantle_operator.chain.gas import GasLimitResolver
from mantle_operator.chain.selector import ClientHandle, ClientSelector
from mantle_operator.chain.tokens import resolve_token
from mantle_operator.errors import InvalidSignerKeyError, SubmissionFailedError
from mantle_operator.models import PendingTransactionRequest, SubmittedTransaction
from mantle_operator.utils.logging import get_logger
from mantle_operator.utils.units import Amount, to_base_units
from mantle_operator.utils.validation import validate_address

_logger = get_logger(__name__)


def _error_reason(error: Exception) -> str:
    """Pull the node's message out of a web3 error when there is one."""
    if error.args and isinstance(error.args[0], dict):
        reason = error.args[0].get("message") or error.args[0].get("reason")
        if reason:
            return str(reason)
    return str(error) or type(error).__name__


def _load_signer(signer_key: str) -> LocalAccount:
    # Sanitize key errors so the key never ends up in a traceback
    try:
        return Account.from_key(signer_key)
    except Exception:
        raise InvalidSignerKeyError() from None


class TransactionSubmitter:
    """
    Builds, signs and broadcasts transfers.

    Example:
        >>> submitter = TransactionSubmitter(selector)
        >>> sent = await submitter.send_native(signer_key, "0x...", "0.5")
        >>> sent.tx_hash
        '0x...'
    """

    def __init__(
        self,
        selector: ClientSelector,
        gas_resolver: Optional[GasLimitResolver] = None,
    ) -> None:
        self._selector = selector
        self._gas = gas_resolver or GasLimitResolver(selector)

    async def send_native(
        self,
        signer_key: str,
        receiver: str,
        amount: Amount,
    ) -> SubmittedTransaction:
        """
        Send ``amount`` MNT to ``receiver``.

        Args:
            signer_key: Sender's private key
            receiver: Receiver address
            amount: Amount in MNT

        Returns:
            SubmittedTransaction with the broadcast hash

        Raises:
            InvalidAddressError: If the receiver is invalid
            InvalidAmountError: If the amount is invalid
            InvalidSignerKeyError: If the key cannot be loaded
            WalletSessionRequiredError: If no wallet session is connected
            SubmissionFailedError: If pricing, signing or broadcast fails
        """
        to_address = validate_address(receiver, "receiver")
        network = self._selector.network
        value_wei = to_base_units(amount, network.native_decimals)
        account = _load_signer(signer_key)
        client = self._selector.get_client(requires_signing=True, operation="send_native")

        try:
            quote = await self._gas.resolve(account.address, to_address, amount)
            gas_price, nonce = await self._price_and_nonce(client, account.address)
        except Exception as e:
            raise SubmissionFailedError(
                f"Could not prepare native transfer: {_error_reason(e)}",
                details={"receiver": to_address},
            ) from e

        request = PendingTransactionRequest(
            sender=account.address,
            receiver=to_address,
            value_wei=value_wei,
            gas_limit=quote.limit,
            gas_price_wei=gas_price,
            nonce=nonce,
            chain_id=network.chain_id,
        )
        _logger.debug(
            "Prepared native transfer",
            extra={"gas_limit": quote.limit, "gas_source": quote.source.value, "nonce": nonce},
        )
        return await self._sign_and_send(account, client, request)

    async def send_token(
        self,
        signer_key: str,
        token: Optional[str],
        amount: Amount,
        receiver: str,
        contract_address: Optional[str] = None,
        decimals: Optional[int] = None,
    ) -> SubmittedTransaction:
        """
        Send ``amount`` of an ERC-20 token to ``receiver``.

        The gas limit comes from the contract call's own estimate rather than
        from GasLimitResolver; the transaction is still legacy-priced.

        Args:
            signer_key: Sender's private key
            token: Registered symbol (``usdc``, ``usdt``, ``wmnt``)
            amount: Human-readable token amount
            receiver: Receiver address
            contract_address: Contract for an unregistered token
            decimals: Decimals for an unregistered token (default 6)

        Raises:
            UnknownTokenError: If the token cannot be resolved
            InvalidAddressError: If the receiver or contract is invalid
            InvalidAmountError: If the amount has too many decimal places
            InvalidSignerKeyError: If the key cannot be loaded
            WalletSessionRequiredError: If no wallet session is connected
            SubmissionFailedError: If building, signing or broadcast fails
        """
        to_address = validate_address(receiver, "receiver")
        network = self._selector.network
        descriptor = resolve_token(network, token, contract_address, decimals)
        value = to_base_units(amount, descriptor.decimals)
        account = _load_signer(signer_key)
        client = self._selector.get_client(requires_signing=True, operation="send_token")

        try:
            contract = client.w3.eth.contract(address=descriptor.contract_address, abi=ERC20_ABI)
            gas_price, nonce = await self._price_and_nonce(client, account.address)
            tx = await contract.functions.transfer(to_address, value).build_transaction(
                {
                    "from": account.address,
                    "nonce": nonce,
                    "gasPrice": gas_price,
                    "chainId": network.chain_id,
                    "value": 0,
                }
            )
        except Exception as e:
            raise SubmissionFailedError(
                f"Could not prepare {descriptor.symbol} transfer: {_error_reason(e)}",
                details={"receiver": to_address, "contract": descriptor.contract_address},
            ) from e

        data = tx["data"]
        request = PendingTransactionRequest(
            sender=account.address,
            receiver=descriptor.contract_address,
            value_wei=0,
            gas_limit=int(tx["gas"]),
            gas_price_wei=gas_price,
            nonce=nonce,
            chain_id=network.chain_id,
            data=data if isinstance(data, str) else Web3.to_hex(data),
        )
        return await self._sign_and_send(account, client, request)

    @staticmethod
    async def _price_and_nonce(client: ClientHandle, sender: str) -> Tuple[int, int]:
        gas_price, nonce = await asyncio.gather(
            client.w3.eth.gas_price,
            client.w3.eth.get_transaction_count(sender, "pending"),
        )
        return int(gas_price), int(nonce)

    @staticmethod
    async def _sign_and_send(
        account: LocalAccount,
        client: ClientHandle,
        request: PendingTransactionRequest,
    ) -> SubmittedTransaction:
        details: Dict[str, Any] = {
            "sender": request.sender,
            "receiver": request.receiver,
            "nonce": request.nonce,
            "gas_limit": request.gas_limit,
        }
        try:
            signed = account.sign_transaction(request.to_tx_params())
            tx_hash = await client.w3.eth.send_raw_transaction(signed.raw_transaction)
        except Exception as e:
            reason = _error_reason(e)
            _logger.error("Transaction broadcast failed", extra={**details, "error": reason})
            raise SubmissionFailedError(f"Transaction broadcast failed: {reason}", details=details) from e

        hash_hex = Web3.to_hex(tx_hash)
        _logger.info("Transaction submitted", extra={**details, "tx_hash": hash_hex})
        return SubmittedTransaction(tx_hash=hash_hex, request=request)


__all__ = ["TransactionSubmitter"]
