from mirage_sdk.payloads.builder import TradingIntent, build
from mirage_sdk.payloads.descriptor import PayloadDescriptor, encode_call
from mirage_sdk.payloads.market import (
    OpenPosition,
    PlaceLimitOrder,
    build_open_position,
    build_place_limit_order,
)
from mirage_sdk.payloads.vault import (
    AddCollateralAndBorrow,
    CreateVaultAndBorrow,
    build_add_collateral_and_borrow,
    build_create_vault_and_borrow,
    get_collection_id_for_vault_pair,
)

__all__ = [
    "AddCollateralAndBorrow",
    "CreateVaultAndBorrow",
    "OpenPosition",
    "PayloadDescriptor",
    "PlaceLimitOrder",
    "TradingIntent",
    "build",
    "build_add_collateral_and_borrow",
    "build_create_vault_and_borrow",
    "build_open_position",
    "build_place_limit_order",
    "encode_call",
    "get_collection_id_for_vault_pair",
]
