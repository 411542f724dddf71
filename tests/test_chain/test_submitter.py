"""
Tests for TransactionSubmitter.

Tests cover:
- Native transfers: gas, pricing, nonce, legacy signing and broadcast
- Token transfers: registry lookup, call data and overrides
- Failure handling: missing wallet session, bad keys, broadcast errors
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_account import Account
from eth_utils import to_checksum_address

from mantle_operator.chain.selector import ClientSelector, WalletSession
from mantle_operator.chain.submitter import TransactionSubmitter
from mantle_operator.config import get_network
from mantle_operator.errors import (
    InvalidAddressError,
    InvalidAmountError,
    InvalidSignerKeyError,
    SubmissionFailedError,
    UnknownTokenError,
    WalletSessionRequiredError,
)

from ..conftest import (
    AwaitableValue,
    CUSTOM_TOKEN,
    GWEI,
    RECEIVER,
    SENDER,
    SENDER_KEY,
    USDC_ADDRESS,
    make_w3,
)

TRANSFER_DATA = "0xa9059cbb" + "00" * 64


def make_token_contract(gas: int = 65_000) -> MagicMock:
    contract = MagicMock()
    contract.functions.transfer.return_value.build_transaction = AsyncMock(
        return_value={"gas": gas, "data": TRANSFER_DATA, "value": 0}
    )
    return contract


# =============================================================================
# send_native Tests
# =============================================================================


class TestSendNative:
    """Tests for TransactionSubmitter.send_native()."""

    @pytest.mark.asyncio
    async def test_happy_path(self, wallet_selector, wallet_w3) -> None:
        sent = await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "0.5")

        assert sent.tx_hash == "0x" + "ab" * 32
        request = sent.request
        assert request.sender == SENDER
        assert request.receiver == to_checksum_address(RECEIVER)
        assert request.value_wei == 500_000_000_000_000_000
        assert request.gas_limit == 21_000
        assert request.gas_price_wei == 20 * GWEI
        assert request.nonce == 7
        assert request.chain_id == 5000
        assert request.tx_type == "legacy"
        wallet_w3.eth.send_raw_transaction.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_signed_as_legacy_by_sender(self, wallet_selector, wallet_w3) -> None:
        await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "1")

        raw = wallet_w3.eth.send_raw_transaction.await_args.args[0]
        # Typed transactions start with 0x01/0x02; legacy ones are a bare RLP list
        assert raw[0] >= 0xC0
        assert Account.recover_transaction(raw) == SENDER

    @pytest.mark.asyncio
    async def test_tx_params_have_no_fee_market_fields(self, wallet_selector) -> None:
        sent = await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "1")

        params = sent.request.to_tx_params()
        assert "gasPrice" in params
        assert "maxFeePerGas" not in params
        assert "maxPriorityFeePerGas" not in params

    @pytest.mark.asyncio
    async def test_uses_pending_nonce(self, wallet_selector, wallet_w3) -> None:
        await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "1")

        wallet_w3.eth.get_transaction_count.assert_awaited_once_with(SENDER, "pending")

    @pytest.mark.asyncio
    async def test_suspect_estimate_is_compensated(self, wallet_selector, public_w3, oracle) -> None:
        public_w3.eth.estimate_gas = AsyncMock(return_value=89_000_000)
        oracle.functions.l1BaseFee.return_value.call = AsyncMock(return_value=50_000_000)

        sent = await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "1")

        assert sent.request.gas_limit == 80_000_000

    @pytest.mark.asyncio
    async def test_requires_wallet_session(self, selector, public_w3) -> None:
        with pytest.raises(WalletSessionRequiredError):
            await TransactionSubmitter(selector).send_native(SENDER_KEY, RECEIVER, "1")

        public_w3.eth.send_raw_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_receiver(self, wallet_selector, wallet_w3) -> None:
        with pytest.raises(InvalidAddressError) as exc_info:
            await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, "0x123", "1")

        assert exc_info.value.field == "receiver"
        wallet_w3.eth.send_raw_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_amount(self, wallet_selector) -> None:
        with pytest.raises(InvalidAmountError):
            await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "-1")

    @pytest.mark.asyncio
    async def test_invalid_key_is_not_echoed(self, wallet_selector) -> None:
        bad_key = "0x" + "zz" * 32

        with pytest.raises(InvalidSignerKeyError) as exc_info:
            await TransactionSubmitter(wallet_selector).send_native(bad_key, RECEIVER, "1")

        assert bad_key not in str(exc_info.value)
        assert exc_info.value.__cause__ is None

    @pytest.mark.asyncio
    async def test_broadcast_failure(self, wallet_selector, wallet_w3) -> None:
        error = ValueError({"code": -32000, "message": "nonce too low"})
        wallet_w3.eth.send_raw_transaction = AsyncMock(side_effect=error)

        with pytest.raises(SubmissionFailedError) as exc_info:
            await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "1")

        assert "nonce too low" in exc_info.value.message
        assert exc_info.value.code == "SUBMISSION_FAILED"
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_gas_price_failure(self, wallet_selector, wallet_w3) -> None:
        wallet_w3.eth.gas_price = AwaitableValue(ConnectionError("wallet rpc down"))

        with pytest.raises(SubmissionFailedError) as exc_info:
            await TransactionSubmitter(wallet_selector).send_native(SENDER_KEY, RECEIVER, "1")

        assert "wallet rpc down" in exc_info.value.message
        wallet_w3.eth.send_raw_transaction.assert_not_awaited()


# =============================================================================
# send_token Tests
# =============================================================================


class TestSendToken:
    """Tests for TransactionSubmitter.send_token()."""

    @pytest.fixture
    def usdc(self) -> MagicMock:
        return make_token_contract()

    @pytest.fixture
    def custom(self) -> MagicMock:
        return make_token_contract(gas=80_000)

    @pytest.fixture
    def token_wallet_w3(self, usdc: MagicMock, custom: MagicMock) -> MagicMock:
        return make_w3({USDC_ADDRESS: usdc, CUSTOM_TOKEN: custom})

    @pytest.fixture
    def submitter(self, web3_factory, token_wallet_w3) -> TransactionSubmitter:
        selector = ClientSelector(get_network(), WalletSession(token_wallet_w3), web3_factory)
        return TransactionSubmitter(selector)

    @pytest.mark.asyncio
    async def test_registered_token(self, submitter, usdc, token_wallet_w3) -> None:
        sent = await submitter.send_token(SENDER_KEY, "usdc", "1.5", RECEIVER)

        usdc.functions.transfer.assert_called_once_with(to_checksum_address(RECEIVER), 1_500_000)
        request = sent.request
        assert request.receiver == to_checksum_address(USDC_ADDRESS)
        assert request.value_wei == 0
        assert request.gas_limit == 65_000
        assert request.data == TRANSFER_DATA
        token_wallet_w3.eth.send_raw_transaction.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_build_is_legacy_priced(self, submitter, usdc) -> None:
        await submitter.send_token(SENDER_KEY, "usdc", "1", RECEIVER)

        meta = usdc.functions.transfer.return_value.build_transaction.await_args.args[0]
        assert meta["from"] == SENDER
        assert meta["gasPrice"] == 20 * GWEI
        assert meta["nonce"] == 7
        assert meta["chainId"] == 5000
        assert "maxFeePerGas" not in meta

    @pytest.mark.asyncio
    async def test_signed_by_sender(self, submitter, token_wallet_w3) -> None:
        await submitter.send_token(SENDER_KEY, "usdc", "1", RECEIVER)

        raw = token_wallet_w3.eth.send_raw_transaction.await_args.args[0]
        assert Account.recover_transaction(raw) == SENDER

    @pytest.mark.asyncio
    async def test_custom_contract_with_decimals(self, submitter, custom) -> None:
        sent = await submitter.send_token(
            SENDER_KEY, "abc", "2", RECEIVER, contract_address=CUSTOM_TOKEN, decimals=18
        )

        custom.functions.transfer.assert_called_once_with(to_checksum_address(RECEIVER), 2 * 10**18)
        assert sent.request.gas_limit == 80_000

    @pytest.mark.asyncio
    async def test_unknown_token(self, submitter, token_wallet_w3) -> None:
        with pytest.raises(UnknownTokenError):
            await submitter.send_token(SENDER_KEY, "doge", "1", RECEIVER)

        token_wallet_w3.eth.get_transaction_count.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_too_many_decimals(self, submitter) -> None:
        with pytest.raises(InvalidAmountError):
            await submitter.send_token(SENDER_KEY, "usdc", "0.0000001", RECEIVER)

    @pytest.mark.asyncio
    async def test_build_failure(self, submitter, usdc) -> None:
        usdc.functions.transfer.return_value.build_transaction = AsyncMock(
            side_effect=ValueError("execution reverted: transfer amount exceeds balance")
        )

        with pytest.raises(SubmissionFailedError) as exc_info:
            await submitter.send_token(SENDER_KEY, "usdc", "1", RECEIVER)

        assert "exceeds balance" in exc_info.value.message
        assert exc_info.value.details["contract"] == to_checksum_address(USDC_ADDRESS)

    @pytest.mark.asyncio
    async def test_requires_wallet_session(self, selector) -> None:
        with pytest.raises(WalletSessionRequiredError):
            await TransactionSubmitter(selector).send_token(SENDER_KEY, "usdc", "1", RECEIVER)
