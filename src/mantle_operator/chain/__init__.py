"""
On-chain operations: client selection, balances, gas resolution,
submission and transaction detail decoding.
"""

from mantle_operator.chain.balances import BalanceReader
from mantle_operator.chain.details import TransactionDetailDecoder
from mantle_operator.chain.gas import GasLimitResolver, compensate_for_l1_base_fee
from mantle_operator.chain.selector import (
    ClientHandle,
    ClientSelector,
    WalletSession,
    default_web3_factory,
)
from mantle_operator.chain.submitter import TransactionSubmitter
from mantle_operator.chain.tokens import resolve_token

__all__ = [
    "BalanceReader",
    "ClientHandle",
    "ClientSelector",
    "GasLimitResolver",
    "TransactionDetailDecoder",
    "TransactionSubmitter",
    "WalletSession",
    "compensate_for_l1_base_fee",
    "default_web3_factory",
    "resolve_token",
]
