"""
Contract ABIs used by the chain layer.

Only the subset of each interface that this package calls is included.
"""

from __future__ import annotations

from typing import Any, Dict, List


def _view(name: str, inputs: List[Dict[str, str]], output_type: str) -> Dict[str, Any]:
    return {
        "inputs": inputs,
        "name": name,
        "outputs": [{"name": "", "type": output_type}],
        "stateMutability": "view",
        "type": "function",
    }


def _nonpayable(name: str, inputs: List[Dict[str, str]]) -> Dict[str, Any]:
    return {
        "inputs": inputs,
        "name": name,
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    }


def _event(name: str, first: str, second: str) -> Dict[str, Any]:
    return {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": first, "type": "address"},
            {"indexed": True, "name": second, "type": "address"},
            {"indexed": False, "name": "value", "type": "uint256"},
        ],
        "name": name,
        "type": "event",
    }


# ERC-20 ABI (metadata, balances, transfers, allowances)
ERC20_ABI: List[Dict[str, Any]] = [
    _view("name", [], "string"),
    _view("symbol", [], "string"),
    _view("decimals", [], "uint8"),
    _view("totalSupply", [], "uint256"),
    _view("balanceOf", [{"name": "_owner", "type": "address"}], "uint256"),
    _view(
        "allowance",
        [
            {"name": "_owner", "type": "address"},
            {"name": "_spender", "type": "address"},
        ],
        "uint256",
    ),
    _nonpayable(
        "transfer",
        [
            {"name": "_to", "type": "address"},
            {"name": "_value", "type": "uint256"},
        ],
    ),
    _nonpayable(
        "approve",
        [
            {"name": "_spender", "type": "address"},
            {"name": "_value", "type": "uint256"},
        ],
    ),
    _nonpayable(
        "transferFrom",
        [
            {"name": "_from", "type": "address"},
            {"name": "_to", "type": "address"},
            {"name": "_value", "type": "uint256"},
        ],
    ),
    _event("Transfer", "from", "to"),
    _event("Approval", "owner", "spender"),
]

# Mantle L1 gas price oracle predeploy
GAS_ORACLE_ABI: List[Dict[str, Any]] = [
    _view("getL1Fee", [{"name": "data", "type": "bytes"}], "uint256"),
    _view("l1BaseFee", [], "uint256"),
]

__all__ = ["ERC20_ABI", "GAS_ORACLE_ABI"]
