#!/usr/bin/env python3
"""
Create an APT/mUSD vault, deposit collateral and borrow against it.

Uses the same .env variables as examples/markets/create_position.py.
"""

import asyncio
import logging
import os

from dotenv import load_dotenv

from mirage_sdk import (
    ChainClient,
    CreateVaultAndBorrow,
    SubmissionRejectedError,
    TransactionOrchestrator,
    derive_identity,
    get_config,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger("mirage.example")


async def main():
    load_dotenv()

    config = get_config()
    logger.info(f"Using {config.network.value}")

    # WARNING: do not keep private keys in plain files in production
    identity = derive_identity(os.environ["PRIVATE_KEY"])
    logger.info(f"Account: {identity.address}")

    orchestrator = TransactionOrchestrator(ChainClient(config))

    collateral_to_add = 0.1
    borrow_to_take = 0.01

    try:
        result = await orchestrator.execute(
            CreateVaultAndBorrow("APT", "mUSD", collateral=collateral_to_add, borrow=borrow_to_take),
            identity,
        )
    except SubmissionRejectedError as e:
        logger.error(f"Vault creation rejected: {e.reason}")
        return

    logger.info(f"Add collateral transaction: {result.explorer_url}")
    logger.info(f"{collateral_to_add} added {borrow_to_take} borrowed!")


if __name__ == "__main__":
    asyncio.run(main())
