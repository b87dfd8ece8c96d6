"""Deterministic synthetic wallet holdings.

Used in place of on-chain balance lookups: the address seeds the SOL
balance, which catalog tokens are held, and how much of each.
"""

import logging
import math
from datetime import datetime, timezone

from backend.schemas.portfolio import TokenBalance, WalletPortfolio
from backend.services.catalog import DEFAULT_TOKENS, TokenSpec
from backend.services.prng import SeededRandom
from backend.utils.constants import SOL_PRICE_USD

logger = logging.getLogger(__name__)

MIN_TOKENS = 2
MAX_TOKENS = 6


def generate_portfolio(
    address: str,
    *,
    as_of: datetime | None = None,
    tokens: tuple[TokenSpec, ...] = DEFAULT_TOKENS,
) -> WalletPortfolio:
    rng = SeededRandom(address)

    sol_balance = rng.random() * 500 + 1
    sol_usd_value = sol_balance * SOL_PRICE_USD

    token_count = math.floor(rng.random() * (MAX_TOKENS - MIN_TOKENS + 1)) + MIN_TOKENS
    shuffled = list(tokens)
    rng.shuffle(shuffled)

    balances = []
    for spec in shuffled[:token_count]:
        balance = rng.random() * 10000 + 10
        balances.append(TokenBalance(
            symbol=spec.symbol,
            name=spec.name,
            mint=spec.mint,
            balance=balance,
            usd_value=balance * spec.price,
            decimals=spec.decimals,
            logo_uri=spec.logo_uri,
        ))

    total_usd_value = sol_usd_value + sum(t.usd_value for t in balances)
    logger.debug(f"Generated portfolio for {address[:8]}: {len(balances)} tokens, ${total_usd_value:,.2f}")

    return WalletPortfolio(
        address=address,
        sol_balance=sol_balance,
        sol_usd_value=sol_usd_value,
        tokens=balances,
        total_usd_value=total_usd_value,
        last_updated=as_of or datetime.now(timezone.utc),
    )
