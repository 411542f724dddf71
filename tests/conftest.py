"""
Shared fixtures for mantle-operator tests.

Chain access is replaced by MagicMock-based AsyncWeb3 stand-ins: async
methods are AsyncMocks and awaitable properties (``gas_price``,
``block_number``) are AwaitableValue instances.
"""

from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_account import Account

from mantle_operator.chain.selector import ClientSelector, WalletSession
from mantle_operator.config import MANTLE_GAS_ORACLE, NetworkConfig, get_network
from mantle_operator.constants import TRANSFER_EVENT_TOPIC


# =============================================================================
# Test Constants
# =============================================================================

# Deterministic throwaway key; never funded
SENDER_KEY = "0x" + "11" * 32
SENDER = Account.from_key(SENDER_KEY).address

# Lowercase addresses are always valid
RECEIVER = "0x1234567890123456789012345678901234567890"
HOLDER = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"

USDC_ADDRESS = "0x09Bc4E0D864854c6aFB6eB9A9cdF58aC190D0dF9"
USDT_ADDRESS = "0x201EBa5CC46D216Ce6DC03F6a759e8E766e956aE"
CUSTOM_TOKEN = "0x5555555555555555555555555555555555555555"

TX_HASH = "0x" + "a" * 64
BROADCAST_HASH = bytes.fromhex("ab" * 32)

GWEI = 10**9
ONE_MNT = 10**18


# =============================================================================
# Helpers
# =============================================================================


class AwaitableValue:
    """Awaitable stand-in for AsyncWeb3 properties like ``eth.gas_price``."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.awaited = 0

    def __await__(self):
        async def resolve():
            self.awaited += 1
            if isinstance(self.value, BaseException):
                raise self.value
            return self.value

        return resolve().__await__()


def make_contract(**calls: Any) -> MagicMock:
    """
    Create a contract stub whose ``functions.<name>(...).call()`` returns
    the given value, or raises it when it is an exception.
    """
    contract = MagicMock()
    for name, value in calls.items():
        function = getattr(contract.functions, name)
        if isinstance(value, BaseException):
            function.return_value.call = AsyncMock(side_effect=value)
        else:
            function.return_value.call = AsyncMock(return_value=value)
    return contract


def make_w3(contracts: Optional[Dict[str, MagicMock]] = None) -> MagicMock:
    """Create an AsyncWeb3 stand-in with healthy defaults."""
    w3 = MagicMock()
    w3.eth.get_balance = AsyncMock(return_value=ONE_MNT)
    w3.eth.estimate_gas = AsyncMock(return_value=21_000)
    w3.eth.gas_price = AwaitableValue(20 * GWEI)
    w3.eth.block_number = AwaitableValue(1_000)
    w3.eth.get_transaction_count = AsyncMock(return_value=7)
    w3.eth.send_raw_transaction = AsyncMock(return_value=BROADCAST_HASH)
    w3.eth.get_transaction = AsyncMock(return_value=None)
    w3.eth.get_transaction_receipt = AsyncMock(return_value=None)
    w3.eth.get_block = AsyncMock(return_value={"timestamp": 1_700_000_000})

    registry = {address.lower(): contract for address, contract in (contracts or {}).items()}
    fallback = MagicMock()

    def contract_for(address=None, abi=None):
        return registry.get(str(address).lower(), fallback)

    w3.eth.contract = MagicMock(side_effect=contract_for)
    return w3


def address_topic(address: str) -> bytes:
    """Left-pad an address to a 32-byte indexed topic."""
    return bytes(12) + bytes.fromhex(address[2:])


def transfer_log(
    contract: str,
    sender: str,
    receiver: str,
    value: int,
) -> Dict[str, Any]:
    """Build a receipt log for an ERC-20 Transfer event."""
    return {
        "address": contract,
        "topics": [
            bytes.fromhex(TRANSFER_EVENT_TOPIC[2:]),
            address_topic(sender),
            address_topic(receiver),
        ],
        "data": value.to_bytes(32, "big"),
        "logIndex": 0,
        "blockNumber": 990,
        "transactionHash": bytes.fromhex(TX_HASH[2:]),
    }


# =============================================================================
# Fixtures - Configuration
# =============================================================================


@pytest.fixture
def network() -> NetworkConfig:
    """Mantle mainnet configuration."""
    return get_network("mantle")


@pytest.fixture
def oracle() -> MagicMock:
    """L1 gas price oracle with a low base fee."""
    return make_contract(l1BaseFee=20_000, getL1Fee=123_456)


@pytest.fixture
def public_w3(oracle: MagicMock) -> MagicMock:
    """Read-only chain client stand-in."""
    return make_w3({MANTLE_GAS_ORACLE: oracle})


@pytest.fixture
def wallet_w3() -> MagicMock:
    """Wallet-session chain client stand-in."""
    return make_w3()


@pytest.fixture
def web3_factory(public_w3: MagicMock) -> MagicMock:
    """Factory that always returns ``public_w3``."""
    return MagicMock(return_value=public_w3)


@pytest.fixture
def selector(network: NetworkConfig, web3_factory: MagicMock) -> ClientSelector:
    """Selector without a wallet session."""
    return ClientSelector(network, web3_factory=web3_factory)


@pytest.fixture
def wallet_selector(
    network: NetworkConfig,
    web3_factory: MagicMock,
    wallet_w3: MagicMock,
) -> ClientSelector:
    """Selector with a connected wallet session."""
    return ClientSelector(network, WalletSession(wallet_w3, endpoint="wallet"), web3_factory)
