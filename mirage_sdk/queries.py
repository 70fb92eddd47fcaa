"""
Read-only views of positions and vaults.

Derived figures (liquidation price, maintenance margin, funding and interest)
come straight from the protocol's view contract; nothing is recomputed here.
Snapshots are rebuilt on every call and never cached.
"""

from typing import Optional

import logging
from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass
from decimal import Decimal

from mirage_sdk.chain.client import ChainClient
from mirage_sdk.consts import (
    GET_ACCOUNT_POSITION,
    GET_POSITION_INFO,
    GET_VAULT,
    MARGIN_TOKENS,
    POSITION_VIEW_RETURN_TYPES,
    PRICE_DECIMALS,
    SIZE_DECIMALS,
    TOKENS,
    VAULT_COLLECTIONS,
    VAULT_VIEW_RETURN_TYPES,
)
from mirage_sdk.exceptions import NetworkConfigurationError, NotFoundError
from mirage_sdk.payloads import validation
from mirage_sdk.types import MarketIds, Side
from mirage_sdk.utils.scaling import Numeric, descale

# All markets are margined in the same token
MARGIN_DECIMALS = TOKENS[MARGIN_TOKENS[0]][1]


@dataclass(frozen=True)
class PositionSnapshot:
    position_id: int
    market: MarketIds
    side: Side
    size: Decimal
    margin: Decimal
    entry_price: Decimal
    liquidation_price: Decimal
    maintenance_margin: Decimal
    funding_outstanding: Decimal
    take_profit: Optional[Decimal]
    stop_loss: Optional[Decimal]


@dataclass(frozen=True)
class VaultSnapshot:
    vault_id: int
    owner: str
    collateral_symbol: str
    borrow_symbol: str
    collateral: Decimal
    debt: Decimal
    collateralization_ratio: Decimal
    liquidation_price: Decimal
    interest_outstanding: Decimal


def _position_from_view(result: tuple) -> Optional[PositionSnapshot]:
    (
        exists,
        position_id,
        market_id,
        side,
        size,
        margin,
        entry_price,
        liquidation_price,
        maintenance_margin,
        funding_outstanding,
        take_profit,
        stop_loss,
    ) = result
    if not exists:
        return None

    try:
        market = MarketIds(market_id)
        side = Side(side)
    except ValueError as e:
        raise NetworkConfigurationError(
            f"Position {position_id} has an unrecognised market or side ({e}); the SDK may need upgrading"
        ) from e

    return PositionSnapshot(
        position_id=position_id,
        market=market,
        side=side,
        size=descale(size, SIZE_DECIMALS),
        margin=descale(margin, MARGIN_DECIMALS),
        entry_price=descale(entry_price, PRICE_DECIMALS),
        liquidation_price=descale(liquidation_price, PRICE_DECIMALS),
        maintenance_margin=descale(maintenance_margin, MARGIN_DECIMALS),
        funding_outstanding=descale(funding_outstanding, MARGIN_DECIMALS),
        take_profit=descale(take_profit, PRICE_DECIMALS) if take_profit else None,
        stop_loss=descale(stop_loss, PRICE_DECIMALS) if stop_loss else None,
    )


class PositionQuery:
    """Position and vault reads against the protocol's views contract."""

    def __init__(self, client: ChainClient):
        self.client = client
        self.logger = logging.getLogger("mirage.queries")

    async def query_positions(self, account: str, markets: Iterable[str]) -> AsyncIterator[PositionSnapshot]:
        """
        Yield the account's open position in each market.

        One view call is made per market, lazily as the caller iterates. Markets
        where the account has no position are skipped. The iterator cannot be
        restarted; call again for fresh data.
        """
        for market in markets:
            market_id = validation.resolve_market(market)
            result = await self.client.query_view(
                GET_ACCOUNT_POSITION, (account, int(market_id)), POSITION_VIEW_RETURN_TYPES
            )
            snapshot = _position_from_view(result)
            if snapshot is None:
                self.logger.debug(f"No open {market_id.name} position for {account}")
                continue
            yield snapshot

    async def query_position_info(
        self, position_id: int, mark_price: Numeric, quote_price: Numeric
    ) -> PositionSnapshot:
        """Value a position at the given mark and quote prices. Raises NotFoundError if it is not open."""
        mark_price_e18 = validation.to_fixed_point(
            "Mark price", validation.positive("Mark price", mark_price), PRICE_DECIMALS
        )
        quote_price_e18 = validation.to_fixed_point(
            "Quote price", validation.positive("Quote price", quote_price), PRICE_DECIMALS
        )

        result = await self.client.query_view(
            GET_POSITION_INFO, (position_id, mark_price_e18, quote_price_e18), POSITION_VIEW_RETURN_TYPES
        )
        snapshot = _position_from_view(result)
        if snapshot is None:
            raise NotFoundError(f"Position {position_id} not found")
        return snapshot

    async def query_vault(self, vault_id: int) -> VaultSnapshot:
        """Read a vault. Raises NotFoundError if it does not exist."""
        result = await self.client.query_view(GET_VAULT, (vault_id,), VAULT_VIEW_RETURN_TYPES)
        (
            exists,
            owner,
            collection_id,
            collateral,
            debt,
            collateralization_ratio,
            liquidation_price,
            interest_outstanding,
        ) = result
        if not exists:
            raise NotFoundError(f"Vault {vault_id} not found")

        if collection_id not in VAULT_COLLECTIONS:
            raise NetworkConfigurationError(
                f"Vault {vault_id} belongs to unknown collection {collection_id}; the SDK may need upgrading"
            )
        collateral_symbol, borrow_symbol = VAULT_COLLECTIONS[collection_id]
        collateral_decimals = TOKENS[collateral_symbol][1]
        borrow_decimals = TOKENS[borrow_symbol][1]

        return VaultSnapshot(
            vault_id=vault_id,
            owner=owner,
            collateral_symbol=collateral_symbol,
            borrow_symbol=borrow_symbol,
            collateral=descale(collateral, collateral_decimals),
            debt=descale(debt, borrow_decimals),
            collateralization_ratio=descale(collateralization_ratio, PRICE_DECIMALS),
            liquidation_price=descale(liquidation_price, PRICE_DECIMALS),
            interest_outstanding=descale(interest_outstanding, borrow_decimals),
        )
