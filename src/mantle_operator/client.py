"""Mantle chain client for Python.

This module provides the MantleClient facade that wires the chain
components together for a UI or service:

- Address and transaction-hash validation
- Native (MNT) and ERC-20 balances
- Gas-limit resolution that survives the sequencer's block-limit estimates
- Legacy-format native and token transfers
- Normalized history from the Mobula indexer
- Transaction detail with ERC-20 Transfer decoding

Example:
    >>> from mantle_operator import MantleClient, Network
    >>> client = MantleClient.create(Network.MANTLE)
    >>> await client.get_native_balance("0x...")
    Decimal('1.25')
    >>> wallet = client.with_wallet_rpc("https://rpc.mantle.xyz")
    >>> sent = await wallet.send_native(private_key, "0x...", "0.1")
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional, Union

from mantle_operator.chain.balances import BalanceReader
from mantle_operator.chain.details import TransactionDetailDecoder
from mantle_operator.chain.gas import GasLimitResolver
from mantle_operator.chain.selector import (
    ClientHandle,
    ClientSelector,
    WalletSession,
    Web3Factory,
    default_web3_factory,
)
from mantle_operator.chain.submitter import TransactionSubmitter
from mantle_operator.config import IndexerConfig, Network, NetworkConfig, get_network
from mantle_operator.constants import DEFAULT_PAGE_SIZE
from mantle_operator.indexer.history import TransactionHistoryClient
from mantle_operator.models import (
    GasQuote,
    NormalizedTransactionSummary,
    SubmittedTransaction,
    TransactionDetail,
)
from mantle_operator.utils.units import Amount
from mantle_operator.utils.validation import is_valid_address, is_valid_tx_hash


class MantleClient:
    """Facade over the chain and indexer components for one network."""

    def __init__(
        self,
        network: NetworkConfig,
        wallet_session: Optional[WalletSession] = None,
        indexer: Optional[IndexerConfig] = None,
        web3_factory: Optional[Web3Factory] = None,
    ) -> None:
        self._network = network
        self._indexer_config = indexer or IndexerConfig()
        self._web3_factory = web3_factory
        self._selector = ClientSelector(network, wallet_session, web3_factory)
        self._balances = BalanceReader(self._selector)
        self._gas = GasLimitResolver(self._selector)
        self._submitter = TransactionSubmitter(self._selector, self._gas)
        self._details = TransactionDetailDecoder(self._selector)
        self._history = TransactionHistoryClient(network, self._indexer_config)

    @classmethod
    def create(
        cls,
        network: Union[str, Network, NetworkConfig] = Network.MANTLE,
        rpc_url: Optional[str] = None,
        wallet_rpc_url: Optional[str] = None,
        indexer: Optional[IndexerConfig] = None,
        web3_factory: Optional[Web3Factory] = None,
    ) -> "MantleClient":
        """
        Build a client for a named network.

        Args:
            network: Network name, enum member, or a full NetworkConfig
            rpc_url: Override for the public read endpoint
            wallet_rpc_url: Connect a wallet session at this endpoint
            indexer: History indexer settings
            web3_factory: Custom AsyncWeb3 builder (tests, custom middleware)
        """
        if isinstance(network, NetworkConfig):
            config = network.model_copy(update={"rpc_url": rpc_url}) if rpc_url else network
        else:
            config = get_network(network, rpc_url)

        session = None
        if wallet_rpc_url:
            session = WalletSession.connect(
                wallet_rpc_url, config.timeout, web3_factory or default_web3_factory
            )
        return cls(config, session, indexer, web3_factory)

    def with_wallet(self, session: Optional[WalletSession]) -> "MantleClient":
        """Return a client for the same network bound to ``session``."""
        return MantleClient(self._network, session, self._indexer_config, self._web3_factory)

    def with_wallet_rpc(self, rpc_url: str) -> "MantleClient":
        """Return a client whose wallet session signs through ``rpc_url``."""
        session = WalletSession.connect(
            rpc_url, self._network.timeout, self._web3_factory or default_web3_factory
        )
        return self.with_wallet(session)

    @property
    def network(self) -> NetworkConfig:
        return self._network

    @property
    def has_wallet(self) -> bool:
        return self._selector.has_wallet_session

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    @staticmethod
    def is_valid_address(address: str) -> bool:
        return is_valid_address(address)

    @staticmethod
    def is_valid_tx_hash(tx_hash: str) -> bool:
        return is_valid_tx_hash(tx_hash)

    def get_client(self, requires_signing: bool = False) -> ClientHandle:
        return self._selector.get_client(requires_signing)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    async def get_native_balance(self, address: str) -> Decimal:
        return await self._balances.get_native_balance(address)

    async def get_token_balance(
        self,
        address: str,
        token: Optional[str],
        contract_address: Optional[str] = None,
        decimals: Optional[int] = None,
    ) -> Decimal:
        return await self._balances.get_token_balance(address, token, contract_address, decimals)

    async def estimate_gas(self, sender: str, receiver: str, amount: Amount) -> GasQuote:
        return await self._gas.resolve(sender, receiver, amount)

    async def get_l1_fee(self, data: Union[str, bytes] = "0x") -> int:
        return await self._gas.get_l1_fee(data)

    async def get_history(
        self,
        address: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[NormalizedTransactionSummary]:
        return await self._history.get_history(address, page, page_size)

    async def get_detail(self, tx_hash: str) -> TransactionDetail:
        return await self._details.get_detail(tx_hash)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    async def send_native(self, signer_key: str, receiver: str, amount: Amount) -> SubmittedTransaction:
        return await self._submitter.send_native(signer_key, receiver, amount)

    async def send_token(
        self,
        signer_key: str,
        token: Optional[str],
        amount: Amount,
        receiver: str,
        contract_address: Optional[str] = None,
        decimals: Optional[int] = None,
    ) -> SubmittedTransaction:
        return await self._submitter.send_token(
            signer_key, token, amount, receiver, contract_address, decimals
        )


__all__ = ["MantleClient"]
