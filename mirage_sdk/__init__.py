"""
Mirage SDK - Python SDK for trading on the Mirage protocol.

This package provides:
- payloads: pure builders turning trading intents into contract calls
- orchestrator: build, sign, submit and confirm transactions
- queries: read-only position and vault views
"""

from mirage_sdk._version import SDK_VERSION
from mirage_sdk.chain import ChainClient
from mirage_sdk.config import Network, SdkConfig, get_config
from mirage_sdk.exceptions import (
    ChainUnavailableError,
    ConfirmationTimeoutError,
    ConfirmationUnknownError,
    InvalidIntentError,
    MirageSdkError,
    NotFoundError,
    SigningError,
    SubmissionRejectedError,
)
from mirage_sdk.identity import SigningIdentity, derive_identity
from mirage_sdk.orchestrator import SubmissionResult, TransactionOrchestrator
from mirage_sdk.payloads import (
    AddCollateralAndBorrow,
    CreateVaultAndBorrow,
    OpenPosition,
    PayloadDescriptor,
    PlaceLimitOrder,
    TradingIntent,
    build,
)
from mirage_sdk.queries import PositionQuery, PositionSnapshot, VaultSnapshot
from mirage_sdk.types import MarketIds, OrderType, Side, TransactionStatus, TriggerCondition

__all__ = [
    "SDK_VERSION",
    # Config
    "Network",
    "SdkConfig",
    "get_config",
    # Errors
    "ChainUnavailableError",
    "ConfirmationTimeoutError",
    "ConfirmationUnknownError",
    "InvalidIntentError",
    "MirageSdkError",
    "NotFoundError",
    "SigningError",
    "SubmissionRejectedError",
    # Identity
    "SigningIdentity",
    "derive_identity",
    # Payloads
    "AddCollateralAndBorrow",
    "CreateVaultAndBorrow",
    "OpenPosition",
    "PayloadDescriptor",
    "PlaceLimitOrder",
    "TradingIntent",
    "build",
    # Transactions
    "ChainClient",
    "SubmissionResult",
    "TransactionOrchestrator",
    # Queries
    "PositionQuery",
    "PositionSnapshot",
    "VaultSnapshot",
    # Types
    "MarketIds",
    "OrderType",
    "Side",
    "TransactionStatus",
    "TriggerCondition",
]
