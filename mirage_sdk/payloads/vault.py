from dataclasses import dataclass

from mirage_sdk.consts import ADD_COLLATERAL_AND_BORROW, CREATE_VAULT_AND_BORROW, VAULT_COLLECTIONS
from mirage_sdk.exceptions import InvalidIntentError
from mirage_sdk.payloads import validation
from mirage_sdk.payloads.descriptor import PayloadDescriptor
from mirage_sdk.utils.scaling import Numeric


@dataclass(frozen=True)
class CreateVaultAndBorrow:
    """Open a new vault in the collateral/borrow collection, deposit collateral and borrow against it."""

    collateral_symbol: str  # e.g. APT
    borrow_symbol: str  # e.g. mUSD
    collateral: Numeric  # Collateral to deposit, in token units
    borrow: Numeric  # Amount to borrow, in token units


@dataclass(frozen=True)
class AddCollateralAndBorrow:
    """Top up an existing vault and/or borrow more from it."""

    vault_id: int
    collateral_symbol: str
    borrow_symbol: str
    collateral: Numeric
    borrow: Numeric


def get_collection_id_for_vault_pair(collateral_symbol: str, borrow_symbol: str) -> int:
    """Get the vault collection for a collateral/borrow pair."""
    for collection_id, pair in VAULT_COLLECTIONS.items():
        if pair == (collateral_symbol, borrow_symbol):
            return collection_id
    raise InvalidIntentError(
        f"No vault collection for {collateral_symbol}/{borrow_symbol}. "
        f"Available pairs: {['/'.join(p) for p in VAULT_COLLECTIONS.values()]}"
    )


def build_create_vault_and_borrow(intent: CreateVaultAndBorrow) -> PayloadDescriptor:
    collection_id = get_collection_id_for_vault_pair(intent.collateral_symbol, intent.borrow_symbol)
    collateral_token_id, collateral_decimals = validation.resolve_token(intent.collateral_symbol)
    borrow_token_id, borrow_decimals = validation.resolve_token(intent.borrow_symbol)

    collateral = validation.positive("Collateral", intent.collateral)
    borrow = validation.positive("Borrow amount", intent.borrow)

    return PayloadDescriptor(
        contract="vault",
        function=CREATE_VAULT_AND_BORROW,
        args=(
            collection_id,
            collateral_token_id,
            borrow_token_id,
            validation.to_fixed_point("Collateral", collateral, collateral_decimals),
            validation.to_fixed_point("Borrow amount", borrow, borrow_decimals),
        ),
    )


def build_add_collateral_and_borrow(intent: AddCollateralAndBorrow) -> PayloadDescriptor:
    get_collection_id_for_vault_pair(intent.collateral_symbol, intent.borrow_symbol)
    _, collateral_decimals = validation.resolve_token(intent.collateral_symbol)
    _, borrow_decimals = validation.resolve_token(intent.borrow_symbol)

    if isinstance(intent.vault_id, bool) or not isinstance(intent.vault_id, int) or intent.vault_id <= 0:
        raise InvalidIntentError(f"Vault id must be a positive integer, got {intent.vault_id!r}")

    collateral = validation.non_negative("Collateral", intent.collateral)
    borrow = validation.non_negative("Borrow amount", intent.borrow)
    if collateral == 0 and borrow == 0:
        raise InvalidIntentError("Nothing to do: collateral and borrow amount are both zero")

    return PayloadDescriptor(
        contract="vault",
        function=ADD_COLLATERAL_AND_BORROW,
        args=(
            intent.vault_id,
            validation.to_fixed_point("Collateral", collateral, collateral_decimals),
            validation.to_fixed_point("Borrow amount", borrow, borrow_decimals),
        ),
    )
