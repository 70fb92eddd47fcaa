from mirage_sdk.types import MarketIds, TokenIds

# Prices and position sizes are fixed point with 18 decimals
PRICE_DECIMALS = 18
SIZE_DECIMALS = 18

MAX_SLIPPAGE_BPS = 10_000
BPS_DENOMINATOR = 10_000

# Encoded in place of an absent take-profit or stop-loss price
NO_TRIGGER_PRICE = 0

MARKETS = {o.name: o for o in MarketIds}

# symbol -> (token id, decimals)
TOKENS = {
    "mUSD": (TokenIds.MUSD, 8),
    "APT": (TokenIds.APT, 8),
    "ETH": (TokenIds.ETH, 18),
    "USDC": (TokenIds.USDC, 6),
}
MARGIN_TOKENS = ("mUSD",)

# vault collection id -> (collateral symbol, borrow symbol)
VAULT_COLLECTIONS = {
    1: ("APT", "mUSD"),
    2: ("ETH", "mUSD"),
}

# Entry functions
OPEN_POSITION = "openPosition(uint32,uint32,uint8,uint256,uint256,uint8,uint256,uint256,uint256,uint256,uint256)"
PLACE_LIMIT_ORDER = (
    "placeLimitOrder(uint32,uint32,uint8,uint256,uint256,uint8,uint256,uint8,uint256,uint256,uint256,uint256,bool,uint64)"
)
CREATE_VAULT_AND_BORROW = "createVaultAndBorrow(uint32,uint32,uint32,uint256,uint256)"
ADD_COLLATERAL_AND_BORROW = "addCollateralAndBorrow(uint256,uint256,uint256)"

# View functions
GET_ACCOUNT_POSITION = "getAccountPosition(address,uint32)"
GET_POSITION_INFO = "getPositionInfo(uint256,uint256,uint256)"
GET_VAULT = "getVault(uint256)"

# (exists, positionId, marketId, side, size, margin, entryPrice, liquidationPrice,
#  maintenanceMargin, fundingOutstanding, takeProfit, stopLoss)
POSITION_VIEW_RETURN_TYPES = [
    "bool",
    "uint256",
    "uint32",
    "uint8",
    "uint256",
    "uint256",
    "uint256",
    "uint256",
    "uint256",
    "int256",
    "uint256",
    "uint256",
]

# (exists, owner, collectionId, collateral, debt, collateralizationRatio, liquidationPrice, interestOutstanding)
VAULT_VIEW_RETURN_TYPES = ["bool", "address", "uint32", "uint256", "uint256", "uint256", "uint256", "uint256"]
