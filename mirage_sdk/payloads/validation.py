"""Input checks shared by the payload builders."""

from typing import Optional

from decimal import Decimal

from mirage_sdk.consts import MARGIN_TOKENS, MARKETS, MAX_SLIPPAGE_BPS, TOKENS
from mirage_sdk.exceptions import InvalidIntentError
from mirage_sdk.types import MarketIds, Side
from mirage_sdk.utils.scaling import Numeric, scale, to_decimal


def positive(name: str, value: Numeric) -> Decimal:
    try:
        amount = to_decimal(value)
    except ValueError as e:
        raise InvalidIntentError(f"{name}: {e}") from e
    if amount <= 0:
        raise InvalidIntentError(f"{name} must be positive, got {value}")
    return amount


def non_negative(name: str, value: Numeric) -> Decimal:
    try:
        amount = to_decimal(value)
    except ValueError as e:
        raise InvalidIntentError(f"{name}: {e}") from e
    if amount < 0:
        raise InvalidIntentError(f"{name} must not be negative, got {value}")
    return amount


def to_fixed_point(name: str, amount: Decimal, decimals: int) -> int:
    """Scale an amount, refusing positive amounts that truncate to zero."""
    scaled = scale(decimals)(amount)
    if amount > 0 and scaled == 0:
        raise InvalidIntentError(f"{name} {amount} is below the smallest unit (10^-{decimals})")
    return scaled


def slippage_bps(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIntentError(f"Slippage must be an integer number of basis points, got {value!r}")
    if value < 0 or value > MAX_SLIPPAGE_BPS:
        raise InvalidIntentError(f"Slippage must be between 0 and {MAX_SLIPPAGE_BPS} bps, got {value}")
    return value


def take_profit_stop_loss(
    side: Side,
    entry_price: Decimal,
    take_profit: Optional[Numeric],
    stop_loss: Optional[Numeric],
) -> tuple[Optional[Decimal], Optional[Decimal]]:
    """Check that TP/SL sit on the correct side of the entry price.

    LONG requires take_profit > entry > stop_loss, SHORT the mirror image.
    Each bound is checked on its own when only one is supplied.
    """
    tp = positive("Take profit price", take_profit) if take_profit is not None else None
    sl = positive("Stop loss price", stop_loss) if stop_loss is not None else None

    if side == Side.LONG:
        if tp is not None and not tp > entry_price:
            raise InvalidIntentError(f"Take profit {tp} must be above entry price {entry_price} for a LONG position")
        if sl is not None and not sl < entry_price:
            raise InvalidIntentError(f"Stop loss {sl} must be below entry price {entry_price} for a LONG position")
    else:
        if tp is not None and not tp < entry_price:
            raise InvalidIntentError(f"Take profit {tp} must be below entry price {entry_price} for a SHORT position")
        if sl is not None and not sl > entry_price:
            raise InvalidIntentError(f"Stop loss {sl} must be above entry price {entry_price} for a SHORT position")

    return tp, sl


def resolve_side(value) -> Side:
    try:
        return Side(value)
    except ValueError:
        raise InvalidIntentError(f"Unknown position side: {value!r}")


def resolve_market(symbol: str) -> MarketIds:
    market_id = MARKETS.get(symbol.upper().replace("-", "").replace("_", ""))
    if market_id is None:
        raise InvalidIntentError(f"Unknown market '{symbol}'. Available markets: {list(MARKETS)}")
    return market_id


def resolve_token(symbol: str) -> tuple[int, int]:
    if symbol not in TOKENS:
        raise InvalidIntentError(f"Unknown token '{symbol}'. Available tokens: {list(TOKENS)}")
    token_id, decimals = TOKENS[symbol]
    return int(token_id), decimals


def resolve_margin_token(symbol: str) -> tuple[int, int]:
    if symbol not in MARGIN_TOKENS:
        raise InvalidIntentError(f"'{symbol}' cannot be used as margin. Margin tokens: {list(MARGIN_TOKENS)}")
    return resolve_token(symbol)
