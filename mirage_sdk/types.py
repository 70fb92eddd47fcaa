from enum import Enum, IntEnum


class Side(IntEnum):
    LONG = 0
    SHORT = 1


class OrderType(IntEnum):
    MARKET = 0
    LIMIT = 1
    STOP = 2


class TriggerCondition(IntEnum):
    """Fire the order when the mark price crosses the trigger price from below (ABOVE) or above (BELOW)."""

    ABOVE = 0
    BELOW = 1


class TransactionStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class MarketIds(IntEnum):
    BTCPERP = 1
    ETHPERP = 2
    APTPERP = 3
    SOLPERP = 4


class TokenIds(IntEnum):
    MUSD = 1
    APT = 2
    ETH = 3
    USDC = 4
