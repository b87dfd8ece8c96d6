"""Tradable market catalog with simulated 24h stats.

There is no price feed behind this; prices are jittered around the
catalog's reference prices on every call.
"""

import logging
import random

from backend.schemas.market import TradableAsset
from backend.services.catalog import DEFAULT_TRADE_CATALOG, MARKETS

logger = logging.getLogger(__name__)


def fetch_markets(rng: random.Random | None = None) -> list[TradableAsset]:
    """List all supported markets with a price, 24h change (%) and 24h volume."""
    rng = rng or random.Random()
    result = []
    for market in MARKETS:
        base_price = DEFAULT_TRADE_CATALOG.base_price(market.symbol)
        change = (rng.random() - 0.5) * 10
        volume = rng.random() * 100_000_000 + 1_000_000
        result.append(TradableAsset(
            symbol=market.symbol,
            name=market.name,
            market_type=market.market_type,
            price=base_price * (1 + change / 100),
            change_24h=change,
            volume_24h=volume,
            logo_uri=market.logo_uri,
        ))
    return result
