#!/usr/bin/env python3
"""
Send MNT or a registered token

Signs locally and broadcasts through the wallet RPC endpoint.

Usage:
    python examples/send_mnt.py <receiver> <amount> [token]

Environment Variables:
    SENDER_PRIVATE_KEY: Private key of the sending wallet (required)
    WALLET_RPC_URL: Endpoint used for signed traffic (default: public RPC)
    MANTLE_NETWORK: mantle or mantle-sepolia (default: mantle)
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from mantle_operator import MantleClient, MantleError
from mantle_operator.utils import enable_debug
from mantle_operator.config import network_from_env

SENDER_PRIVATE_KEY = os.getenv("SENDER_PRIVATE_KEY", "")


async def main(receiver: str, amount: str, token: str = "") -> None:
    network = network_from_env()
    client = MantleClient(network).with_wallet_rpc(os.getenv("WALLET_RPC_URL", network.rpc_url))

    if token:
        sent = await client.send_token(SENDER_PRIVATE_KEY, token, amount, receiver)
        label = token.upper()
    else:
        sent = await client.send_native(SENDER_PRIVATE_KEY, receiver, amount)
        label = network.native_symbol

    print(f"Sent {amount} {label} to {receiver}")
    print(f"  tx hash:   {sent.tx_hash}")
    print(f"  gas limit: {sent.request.gas_limit}")
    print(f"  nonce:     {sent.request.nonce}")


if __name__ == "__main__":
    if len(sys.argv) < 3 or not SENDER_PRIVATE_KEY:
        print(__doc__)
        sys.exit(1)
    if os.getenv("DEBUG"):
        enable_debug()
    try:
        asyncio.run(main(*sys.argv[1:4]))
    except MantleError as e:
        print(f"Error: {e}")
        sys.exit(1)
