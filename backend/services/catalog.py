"""Immutable symbol, price, token and market catalogs used by the synthesizers."""

from dataclasses import dataclass

from backend.utils.constants import SOL_PRICE_USD, STRATEGY_TAGS


@dataclass(frozen=True)
class TradeCatalog:
    """Symbol universe and reference prices for trade synthesis."""

    perp_symbols: tuple[str, ...]
    spot_symbols: tuple[str, ...]
    strategies: tuple[str, ...] = STRATEGY_TAGS
    # Ordered (substring, price) pairs; first match wins
    base_prices: tuple[tuple[str, float], ...] = ()
    default_price: float = 100.0

    def base_price(self, symbol: str) -> float:
        for key, price in self.base_prices:
            if key in symbol:
                return price
        return self.default_price


@dataclass(frozen=True)
class TokenSpec:
    symbol: str
    name: str
    mint: str
    decimals: int
    price: float
    logo_uri: str | None = None


@dataclass(frozen=True)
class MarketSpec:
    symbol: str
    name: str
    market_type: str
    logo_uri: str | None = None


BASE_PRICES: tuple[tuple[str, float], ...] = (
    ("BTC", 97000.0),
    ("ETH", 3300.0),
    ("SOL", 195.0),
    ("JTO", 2.8),
    ("BONK", 0.000023),
    ("WIF", 1.95),
    ("JUP", 0.85),
    ("PYTH", 0.38),
)

DEFAULT_TRADE_CATALOG = TradeCatalog(
    perp_symbols=(
        "SOL-PERP", "BTC-PERP", "ETH-PERP", "JTO-PERP",
        "BONK-PERP", "WIF-PERP", "JUP-PERP", "PYTH-PERP",
    ),
    spot_symbols=("SOL/USDC", "BTC/USDC", "ETH/USDC", "JTO/USDC", "BONK/USDC"),
    base_prices=BASE_PRICES,
)

DEFAULT_TOKENS: tuple[TokenSpec, ...] = (
    TokenSpec("SOL", "Solana", "So11111111111111111111111111111111111111112", 9, SOL_PRICE_USD, "/tokens/sol.png"),
    TokenSpec("USDC", "USD Coin", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", 6, 1.0, "/tokens/usdc.png"),
    TokenSpec("USDT", "Tether USD", "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB", 6, 1.0, "/tokens/usdt.png"),
    TokenSpec("JTO", "Jito", "jtojtomepa8beP8AuQc6eXt5FriJwfFMwQx2v2f9mCL", 9, 2.8, "/tokens/jto.png"),
    TokenSpec("JUP", "Jupiter", "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN", 6, 0.85, "/tokens/jup.png"),
    TokenSpec("BONK", "Bonk", "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263", 5, 0.000023, "/tokens/bonk.png"),
    TokenSpec("WIF", "dogwifhat", "EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm", 6, 1.95, "/tokens/wif.png"),
    TokenSpec("PYTH", "Pyth Network", "HZ1JovNiVvGrGNiiYvEozEVgZ58xaU3RKwX8eACQBCt3", 6, 0.38, "/tokens/pyth.png"),
)

MARKETS: tuple[MarketSpec, ...] = (
    MarketSpec("SOL-PERP", "Solana Perpetual", "perp", "/tokens/sol.png"),
    MarketSpec("BTC-PERP", "Bitcoin Perpetual", "perp", "/tokens/btc.png"),
    MarketSpec("ETH-PERP", "Ethereum Perpetual", "perp", "/tokens/eth.png"),
    MarketSpec("JTO-PERP", "Jito Perpetual", "perp", "/tokens/jto.png"),
    MarketSpec("BONK-PERP", "Bonk Perpetual", "perp", "/tokens/bonk.png"),
    MarketSpec("WIF-PERP", "dogwifhat Perpetual", "perp", "/tokens/wif.png"),
    MarketSpec("JUP-PERP", "Jupiter Perpetual", "perp", "/tokens/jup.png"),
    MarketSpec("PYTH-PERP", "Pyth Perpetual", "perp", "/tokens/pyth.png"),
    MarketSpec("SOL/USDC", "Solana Spot", "spot", "/tokens/sol.png"),
    MarketSpec("BTC/USDC", "Bitcoin Spot", "spot", "/tokens/btc.png"),
    MarketSpec("ETH/USDC", "Ethereum Spot", "spot", "/tokens/eth.png"),
    MarketSpec("JTO/USDC", "Jito Spot", "spot", "/tokens/jto.png"),
    MarketSpec("BONK/USDC", "Bonk Spot", "spot", "/tokens/bonk.png"),
)
