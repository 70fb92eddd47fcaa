"""
Fluent builder for creating test trading intents.

Example usage:
    # BTC long at 101000 with TP/SL
    intent = PositionBuilder().long().entry("101000").tp("105000").sl("95000").build()

    # Limit order expiring in an hour
    order = PositionBuilder().market("ETHPERP").short().entry("3500").expires_at(now + 3600).build_limit()
"""

from typing import Optional

from dataclasses import dataclass

from mirage_sdk.payloads import OpenPosition, PlaceLimitOrder
from mirage_sdk.types import Side, TriggerCondition


@dataclass
class PositionBuilder:
    """
    Fluent builder for OpenPosition and PlaceLimitOrder.

    Defaults reproduce the BTC perp example: 1000 mUSD margin, 0.1 BTC LONG
    at 101000 with 1000 bps slippage. All setters return self.
    """

    _market: str = "BTCPERP"
    _margin_symbol: str = "mUSD"
    _margin: str = "1000"
    _size: str = "0.1"
    _side: Side = Side.LONG
    _entry: str = "101000"
    _slippage_bps: int = 1000
    _take_profit: Optional[str] = None
    _stop_loss: Optional[str] = None
    _expiration: int = 0
    _trigger_condition: Optional[TriggerCondition] = None
    _reduce_only: bool = False

    def market(self, symbol: str) -> "PositionBuilder":
        self._market = symbol
        return self

    def margin_symbol(self, symbol: str) -> "PositionBuilder":
        self._margin_symbol = symbol
        return self

    def margin(self, amount) -> "PositionBuilder":
        self._margin = amount
        return self

    def size(self, size) -> "PositionBuilder":
        self._size = size
        return self

    def long(self) -> "PositionBuilder":
        self._side = Side.LONG
        return self

    def short(self) -> "PositionBuilder":
        self._side = Side.SHORT
        return self

    def entry(self, price) -> "PositionBuilder":
        """Set the entry price (trigger price for limit orders)."""
        self._entry = price
        return self

    def slippage(self, bps: int) -> "PositionBuilder":
        self._slippage_bps = bps
        return self

    def tp(self, price) -> "PositionBuilder":
        self._take_profit = price
        return self

    def sl(self, price) -> "PositionBuilder":
        self._stop_loss = price
        return self

    def expires_at(self, timestamp: int) -> "PositionBuilder":
        self._expiration = timestamp
        return self

    def trigger_when(self, condition: TriggerCondition) -> "PositionBuilder":
        self._trigger_condition = condition
        return self

    def reduce_only(self, value: bool = True) -> "PositionBuilder":
        self._reduce_only = value
        return self

    def build(self) -> OpenPosition:
        return OpenPosition(
            market=self._market,
            margin_symbol=self._margin_symbol,
            margin=self._margin,
            size=self._size,
            side=self._side,
            entry_price=self._entry,
            slippage_bps=self._slippage_bps,
            take_profit=self._take_profit,
            stop_loss=self._stop_loss,
        )

    def build_limit(self) -> PlaceLimitOrder:
        return PlaceLimitOrder(
            market=self._market,
            margin_symbol=self._margin_symbol,
            margin=self._margin,
            size=self._size,
            side=self._side,
            trigger_price=self._entry,
            slippage_bps=self._slippage_bps,
            expiration=self._expiration,
            trigger_condition=self._trigger_condition,
            take_profit=self._take_profit,
            stop_loss=self._stop_loss,
            reduce_only=self._reduce_only,
        )
