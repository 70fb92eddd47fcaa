"""
Pytest fixtures for the Mirage SDK tests.

Everything runs against FakeChainClient; no RPC endpoint or funded key is needed.
"""

import pytest

from mirage_sdk.config import Network, SdkConfig
from mirage_sdk.identity import SigningIdentity, derive_identity
from mirage_sdk.orchestrator import TransactionOrchestrator
from mirage_sdk.queries import PositionQuery
from tests.helpers import ONE_ETHER, FakeChainClient
from tests.helpers.config import (
    CONFIRMATION_TIMEOUT,
    MARKET_ADDRESS,
    POLL_INTERVAL,
    SECOND_TRADER_ADDRESS,
    SECOND_TRADER_PRIVATE_KEY,
    TRADER_ADDRESS,
    TRADER_PRIVATE_KEY,
    VAULT_ADDRESS,
    VIEWS_ADDRESS,
)


@pytest.fixture
def sdk_config() -> SdkConfig:
    return SdkConfig.for_network(
        Network.TESTNET,
        market_address=MARKET_ADDRESS,
        vault_address=VAULT_ADDRESS,
        views_address=VIEWS_ADDRESS,
        confirmation_timeout=CONFIRMATION_TIMEOUT,
        poll_interval=POLL_INTERVAL,
    )


@pytest.fixture
def trader() -> SigningIdentity:
    return derive_identity(TRADER_PRIVATE_KEY)


@pytest.fixture
def second_trader() -> SigningIdentity:
    return derive_identity(SECOND_TRADER_PRIVATE_KEY)


@pytest.fixture
def chain(sdk_config: SdkConfig) -> FakeChainClient:
    """Fake chain where both test traders hold 10 ETH for gas."""
    return FakeChainClient(
        sdk_config,
        balances={TRADER_ADDRESS: 10 * ONE_ETHER, SECOND_TRADER_ADDRESS: 10 * ONE_ETHER},
    )


@pytest.fixture
def orchestrator(chain: FakeChainClient) -> TransactionOrchestrator:
    return TransactionOrchestrator(chain)


@pytest.fixture
def position_query(chain: FakeChainClient) -> PositionQuery:
    return PositionQuery(chain)
