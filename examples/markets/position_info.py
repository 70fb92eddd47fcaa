#!/usr/bin/env python3
"""
Print the wallet's open positions across all perp markets.

Only needs the contract addresses from .env; PRIVATE_KEY is used to derive the address
unless ACCOUNT_ADDRESS is set.
"""

import asyncio
import logging
import os

from dotenv import load_dotenv

from mirage_sdk import ChainClient, MarketIds, PositionQuery, derive_identity, get_config

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger("mirage.example")


async def main():
    load_dotenv()

    config = get_config()
    account = os.environ.get("ACCOUNT_ADDRESS") or derive_identity(os.environ["PRIVATE_KEY"]).address

    query = PositionQuery(ChainClient(config))

    found = 0
    async for position in query.query_positions(account, [m.name for m in MarketIds]):
        found += 1
        logger.info(
            f"{position.market.name} #{position.position_id}: {position.side.name} {position.size} "
            f"@ {position.entry_price}, margin {position.margin}, liquidation {position.liquidation_price}"
        )

    if not found:
        logger.info(f"No open positions for {account}")


if __name__ == "__main__":
    asyncio.run(main())
