"""
Chain client selection.

Read operations get a client bound to the network's public RPC endpoint.
Signing operations get the client bound to the caller's connected wallet
session and fail loudly when there is none; they never fall back to the
public endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from web3 import AsyncHTTPProvider, AsyncWeb3

from mantle_operator.config import NetworkConfig
from mantle_operator.errors import WalletSessionRequiredError
from mantle_operator.utils.logging import get_logger

_logger = get_logger(__name__)

Web3Factory = Callable[[str, int], AsyncWeb3]


def default_web3_factory(rpc_url: str, timeout: int) -> AsyncWeb3:
    """Build an AsyncWeb3 over HTTP with a request timeout."""
    return AsyncWeb3(AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))


@dataclass(frozen=True)
class ClientHandle:
    w3: AsyncWeb3
    endpoint: str
    can_sign: bool


class WalletSession:
    """
    A user-approved wallet connection.

    The session only supplies the transport the user chose for signed
    traffic; keys are handed to the submitter per call and never stored here.

    Example:
        >>> session = WalletSession.connect("https://rpc.mantle.xyz")
        >>> selector = ClientSelector(get_network(), wallet_session=session)
    """

    def __init__(self, w3: AsyncWeb3, endpoint: str = "wallet") -> None:
        self._w3 = w3
        self._endpoint = endpoint

    @classmethod
    def connect(
        cls,
        rpc_url: str,
        timeout: int = 30,
        web3_factory: Web3Factory = default_web3_factory,
    ) -> "WalletSession":
        return cls(web3_factory(rpc_url, timeout), endpoint=rpc_url)

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    @property
    def endpoint(self) -> str:
        return self._endpoint


class ClientSelector:
    """Chooses between the public read-only client and the wallet-bound client."""

    def __init__(
        self,
        network: NetworkConfig,
        wallet_session: Optional[WalletSession] = None,
        web3_factory: Optional[Web3Factory] = None,
    ) -> None:
        self._network = network
        self._wallet_session = wallet_session
        self._web3_factory = web3_factory or default_web3_factory

    @property
    def network(self) -> NetworkConfig:
        return self._network

    @property
    def has_wallet_session(self) -> bool:
        return self._wallet_session is not None

    def with_wallet_session(self, session: Optional[WalletSession]) -> "ClientSelector":
        """Return a selector sharing this network config but bound to ``session``."""
        return ClientSelector(self._network, session, self._web3_factory)

    def get_client(self, requires_signing: bool, operation: Optional[str] = None) -> ClientHandle:
        """
        Get a chain client for an operation.

        Args:
            requires_signing: Whether the operation needs the wallet session
            operation: Operation name, used in errors and logs

        Returns:
            ClientHandle for the public endpoint or the wallet session

        Raises:
            WalletSessionRequiredError: If signing is required and no wallet
                session is connected
        """
        if not requires_signing:
            # Built per call: public handles are stateless and never shared
            return ClientHandle(
                w3=self._web3_factory(self._network.rpc_url, self._network.timeout),
                endpoint=self._network.rpc_url,
                can_sign=False,
            )

        if self._wallet_session is None:
            _logger.error(
                "Signing client requested without a wallet session",
                extra={"operation": operation, "network": self._network.name.value},
            )
            raise WalletSessionRequiredError(operation)

        return ClientHandle(
            w3=self._wallet_session.w3,
            endpoint=self._wallet_session.endpoint,
            can_sign=True,
        )


__all__ = [
    "ClientHandle",
    "ClientSelector",
    "WalletSession",
    "Web3Factory",
    "default_web3_factory",
]
