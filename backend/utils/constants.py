"""Shared constants for trade synthesis and analytics."""

TRADING_SESSIONS = ("asia", "london", "new-york")
MARKET_TYPES = ("spot", "perp", "options")
STRATEGY_TAGS = ("scalp", "swing", "hedge", "dca", "breakout")

# Fee rates as a fraction of notional
TAKER_FEE_RATE = 0.0005
MAKER_FEE_RATE = 0.0002
FUNDING_FEE_RATE = 0.0001

STARTING_EQUITY = 10_000.0
SOL_PRICE_USD = 195.0

HEATMAP_DAYS = 7
HEATMAP_HOURS = 24

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
TX_HASH_LENGTH = 88
