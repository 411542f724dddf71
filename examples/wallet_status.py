#!/usr/bin/env python3
"""
Wallet Status

Prints native and token balances, a gas quote and the latest history page
for one wallet, and optionally the detail of one transaction.

Usage:
    python examples/wallet_status.py <address> [tx_hash]

Environment Variables:
    MANTLE_NETWORK: mantle or mantle-sepolia (default: mantle)
    MANTLE_RPC_URL: Custom read RPC endpoint
    MOBULA_API_KEY: Optional indexer API key
    LOG_LEVEL: Package log level (default: WARNING)
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from mantle_operator import MantleClient, MantleError, configure_logging
from mantle_operator.config import IndexerConfig, network_from_env


async def main(address: str, tx_hash: str = "") -> None:
    configure_logging(os.getenv("LOG_LEVEL", "WARNING"))
    client = MantleClient(network_from_env(), indexer=IndexerConfig.from_env())
    network = client.network

    print("=" * 60)
    print(f"Wallet {address} on {network.name.value} (chain {network.chain_id})")
    print("=" * 60)

    native = await client.get_native_balance(address)
    print(f"{network.native_symbol:>6}: {native}")
    for token in network.tokens:
        balance = await client.get_token_balance(address, token.symbol)
        print(f"{token.symbol.upper():>6}: {balance}")

    quote = await client.estimate_gas(address, address, "0")
    print(f"\nGas limit for a self-transfer: {quote.limit} ({quote.source.value})")
    print(f"L1 data fee for an empty payload: {await client.get_l1_fee()} wei")

    rows = await client.get_history(address, page=1, page_size=10)
    print(f"\nLatest {len(rows)} transactions:")
    for row in rows:
        direction = "IN " if row.is_received else "OUT"
        print(f"  {direction} {row.value} {row.symbol}  {row.hash}")

    if tx_hash:
        detail = await client.get_detail(tx_hash)
        print(f"\nTransaction {detail.hash}")
        print(f"  status:        {detail.status.value}")
        print(f"  block:         {detail.block_number} ({detail.confirmations} confirmations)")
        print(f"  value:         {detail.value} {detail.symbol}")
        print(f"  fee:           {detail.gas_fee} {detail.symbol}")
        if detail.token_transfer:
            transfer = detail.token_transfer
            print(f"  token:         {transfer.value} {transfer.symbol} -> {transfer.to_address}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    try:
        asyncio.run(main(*sys.argv[1:3]))
    except MantleError as e:
        print(f"Error: {e}")
        sys.exit(1)
