#!/usr/bin/env python3
"""
Open a BTC perp LONG with take profit and stop loss.

Before running this example, ensure you have a .env file with the following variables:
- PRIVATE_KEY: Private key of the trading wallet (use a dedicated, low-value key)
- MIRAGE_NETWORK: mainnet or testnet (optional, defaults to testnet)
- MIRAGE_MARKET_ADDRESS, MIRAGE_VAULT_ADDRESS, MIRAGE_VIEWS_ADDRESS: protocol contract addresses
- MIRAGE_RPC_URL: RPC endpoint (optional, defaults based on network)
"""

import asyncio
import logging
import os

from dotenv import load_dotenv

from mirage_sdk import (
    ChainClient,
    OpenPosition,
    Side,
    TransactionOrchestrator,
    build,
    derive_identity,
    get_config,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger("mirage.example")


async def main():
    load_dotenv()

    config = get_config()
    logger.info(f"Using {config.network.value}")

    # WARNING: in production inject keys from a secret manager, not a .env file
    identity = derive_identity(os.environ["PRIVATE_KEY"])
    logger.info(f"Account: {identity.address}")

    client = ChainClient(config)
    orchestrator = TransactionOrchestrator(client)

    intent = OpenPosition(
        market="BTCPERP",
        margin_symbol="mUSD",
        margin=1000,
        size=0.1,
        side=Side.LONG,
        entry_price=101000,
        slippage_bps=1000,
        take_profit=105000,
        stop_loss=95000,
    )

    logger.info("Opening position with take profit and stop loss...")
    descriptor = build(intent)
    logger.info(f"Payload: {descriptor.function_name}{descriptor.args}")

    result = await orchestrator.submit(descriptor, identity)
    logger.info(f"Transaction: {result.explorer_url} ({result.status.value})")


if __name__ == "__main__":
    asyncio.run(main())
