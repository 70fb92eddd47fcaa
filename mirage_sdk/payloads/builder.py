from typing import Optional, Union

from mirage_sdk.exceptions import InvalidIntentError
from mirage_sdk.payloads.descriptor import PayloadDescriptor
from mirage_sdk.payloads.market import OpenPosition, PlaceLimitOrder, build_open_position, build_place_limit_order
from mirage_sdk.payloads.vault import (
    AddCollateralAndBorrow,
    CreateVaultAndBorrow,
    build_add_collateral_and_borrow,
    build_create_vault_and_borrow,
)

TradingIntent = Union[OpenPosition, PlaceLimitOrder, CreateVaultAndBorrow, AddCollateralAndBorrow]


def build(intent: TradingIntent, now: Optional[float] = None) -> PayloadDescriptor:
    """
    Translate a trading intent into a protocol payload. Pure: no network access.

    Args:
        intent (TradingIntent): One of OpenPosition, PlaceLimitOrder, CreateVaultAndBorrow, AddCollateralAndBorrow.
        now (float, optional): Unix time used to validate order expirations. Defaults to time.time().

    Returns:
        PayloadDescriptor: The encoded contract call.

    Raises:
        InvalidIntentError: If any field of the intent is invalid.
    """
    if isinstance(intent, OpenPosition):
        return build_open_position(intent)
    if isinstance(intent, PlaceLimitOrder):
        return build_place_limit_order(intent, now=now)
    if isinstance(intent, CreateVaultAndBorrow):
        return build_create_vault_and_borrow(intent)
    if isinstance(intent, AddCollateralAndBorrow):
        return build_add_collateral_and_borrow(intent)
    raise InvalidIntentError(f"Unsupported trading intent: {type(intent).__name__}")
