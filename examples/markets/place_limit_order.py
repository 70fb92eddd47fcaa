#!/usr/bin/env python3
"""
Place a LONG limit order on ETH perp that fires if the price dips, expiring in one day.

Uses the same .env variables as create_position.py.
"""

import asyncio
import logging
import os
import time

from dotenv import load_dotenv

from mirage_sdk import (
    ChainClient,
    ConfirmationTimeoutError,
    PlaceLimitOrder,
    Side,
    TransactionOrchestrator,
    TriggerCondition,
    derive_identity,
    get_config,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger("mirage.example")

ONE_DAY = 24 * 60 * 60


async def main():
    load_dotenv()

    config = get_config()
    identity = derive_identity(os.environ["PRIVATE_KEY"])
    orchestrator = TransactionOrchestrator(ChainClient(config))

    order = PlaceLimitOrder(
        market="ETHPERP",
        margin_symbol="mUSD",
        margin=200,
        size=0.5,
        side=Side.LONG,
        trigger_price=3200,
        slippage_bps=50,
        expiration=int(time.time()) + ONE_DAY,
        trigger_condition=TriggerCondition.BELOW,
        take_profit=3600,
        stop_loss=3000,
    )

    # Submit without waiting, then confirm separately
    pending = await orchestrator.execute(order, identity, wait=False)
    logger.info(f"Submitted with nonce {pending.sequence_number}: {pending.explorer_url}")

    try:
        result = await orchestrator.confirm(pending, deadline=30)
    except ConfirmationTimeoutError as e:
        logger.warning(f"{e} - check the explorer before placing the order again")
        return

    logger.info(f"Limit order {result.status.value}")


if __name__ == "__main__":
    asyncio.run(main())
