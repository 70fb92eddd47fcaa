from typing import Optional

import time
from dataclasses import dataclass
from decimal import Decimal

from mirage_sdk.consts import (
    BPS_DENOMINATOR,
    NO_TRIGGER_PRICE,
    OPEN_POSITION,
    PLACE_LIMIT_ORDER,
    PRICE_DECIMALS,
    SIZE_DECIMALS,
)
from mirage_sdk.exceptions import InvalidIntentError
from mirage_sdk.payloads import validation
from mirage_sdk.payloads.descriptor import PayloadDescriptor
from mirage_sdk.types import OrderType, Side, TriggerCondition
from mirage_sdk.utils.scaling import Numeric


@dataclass(frozen=True)
class OpenPosition:
    """Open a leveraged position at market, optionally with take-profit and stop-loss."""

    market: str  # Market symbol, e.g. BTCPERP
    margin_symbol: str  # Token posted as margin, e.g. mUSD
    margin: Numeric  # Margin amount in token units
    size: Numeric  # Position size in base units
    side: Side
    entry_price: Numeric  # Expected entry price
    slippage_bps: int  # Maximum deviation from the entry price, in basis points
    take_profit: Optional[Numeric] = None
    stop_loss: Optional[Numeric] = None
    order_type: OrderType = OrderType.MARKET


@dataclass(frozen=True)
class PlaceLimitOrder:
    """Place a conditional order that opens a position once the trigger price is crossed."""

    market: str
    margin_symbol: str
    margin: Numeric
    size: Numeric
    side: Side
    trigger_price: Numeric  # Price at which the order fires; also the reference entry price
    slippage_bps: int
    expiration: int  # Unix timestamp (seconds) after which the order can no longer fire
    trigger_condition: Optional[TriggerCondition] = None  # Defaults to BELOW for LONG, ABOVE for SHORT
    take_profit: Optional[Numeric] = None
    stop_loss: Optional[Numeric] = None
    reduce_only: bool = False
    order_type: OrderType = OrderType.LIMIT


def price_bound(side: Side, price: int, slippage_bps: int) -> int:
    """Worst acceptable execution price: above the reference for LONG, below it for SHORT."""
    if side == Side.LONG:
        return price * (BPS_DENOMINATOR + slippage_bps) // BPS_DENOMINATOR
    return price * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


def _scale_trigger(name: str, value: Optional[Decimal]) -> int:
    if value is None:
        return NO_TRIGGER_PRICE
    return validation.to_fixed_point(name, value, PRICE_DECIMALS)


def build_open_position(intent: OpenPosition) -> PayloadDescriptor:
    market_id = validation.resolve_market(intent.market)
    margin_token_id, margin_decimals = validation.resolve_margin_token(intent.margin_symbol)
    side = validation.resolve_side(intent.side)

    if intent.order_type != OrderType.MARKET:
        raise InvalidIntentError(f"OpenPosition only supports MARKET orders, got {intent.order_type!r}")

    margin = validation.positive("Margin", intent.margin)
    size = validation.positive("Position size", intent.size)
    entry_price = validation.positive("Entry price", intent.entry_price)
    slippage = validation.slippage_bps(intent.slippage_bps)
    tp, sl = validation.take_profit_stop_loss(side, entry_price, intent.take_profit, intent.stop_loss)

    entry_price_e18 = validation.to_fixed_point("Entry price", entry_price, PRICE_DECIMALS)

    return PayloadDescriptor(
        contract="market",
        function=OPEN_POSITION,
        args=(
            int(market_id),
            margin_token_id,
            int(OrderType.MARKET),
            validation.to_fixed_point("Margin", margin, margin_decimals),
            validation.to_fixed_point("Position size", size, SIZE_DECIMALS),
            int(side),
            entry_price_e18,
            slippage,
            price_bound(side, entry_price_e18, slippage),
            _scale_trigger("Take profit price", tp),
            _scale_trigger("Stop loss price", sl),
        ),
    )


def build_place_limit_order(intent: PlaceLimitOrder, now: Optional[float] = None) -> PayloadDescriptor:
    """
    Build the payload for a conditional limit order.

    Args:
        intent (PlaceLimitOrder): Order parameters.
        now (float, optional): Current unix time used to validate the expiration. Defaults to time.time().

    Returns:
        PayloadDescriptor: Call to the market contract's placeLimitOrder entry function.
    """
    market_id = validation.resolve_market(intent.market)
    margin_token_id, margin_decimals = validation.resolve_margin_token(intent.margin_symbol)
    side = validation.resolve_side(intent.side)

    if intent.order_type not in (OrderType.LIMIT, OrderType.STOP):
        raise InvalidIntentError(f"PlaceLimitOrder supports LIMIT and STOP orders, got {intent.order_type!r}")

    margin = validation.positive("Margin", intent.margin)
    size = validation.positive("Order size", intent.size)
    trigger_price = validation.positive("Trigger price", intent.trigger_price)
    slippage = validation.slippage_bps(intent.slippage_bps)
    tp, sl = validation.take_profit_stop_loss(side, trigger_price, intent.take_profit, intent.stop_loss)

    if isinstance(intent.expiration, bool) or not isinstance(intent.expiration, int):
        raise InvalidIntentError(f"Expiration must be a unix timestamp in seconds, got {intent.expiration!r}")
    current_time = time.time() if now is None else now
    if intent.expiration <= current_time:
        raise InvalidIntentError(f"Expiration {intent.expiration} is not in the future (now: {int(current_time)})")

    if intent.trigger_condition is None:
        trigger_condition = TriggerCondition.BELOW if side == Side.LONG else TriggerCondition.ABOVE
    else:
        try:
            trigger_condition = TriggerCondition(intent.trigger_condition)
        except ValueError:
            raise InvalidIntentError(f"Unknown trigger condition: {intent.trigger_condition!r}")

    trigger_price_e18 = validation.to_fixed_point("Trigger price", trigger_price, PRICE_DECIMALS)

    return PayloadDescriptor(
        contract="market",
        function=PLACE_LIMIT_ORDER,
        args=(
            int(market_id),
            margin_token_id,
            int(intent.order_type),
            validation.to_fixed_point("Margin", margin, margin_decimals),
            validation.to_fixed_point("Order size", size, SIZE_DECIMALS),
            int(side),
            trigger_price_e18,
            int(trigger_condition),
            slippage,
            price_bound(side, trigger_price_e18, slippage),
            _scale_trigger("Take profit price", tp),
            _scale_trigger("Stop loss price", sl),
            bool(intent.reduce_only),
            intent.expiration,
        ),
    )
