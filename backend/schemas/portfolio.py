"""Pydantic schemas for wallet holdings."""

from datetime import datetime

from backend.schemas.base import CamelModel


class TokenBalance(CamelModel):
    symbol: str
    name: str
    mint: str
    balance: float
    usd_value: float
    decimals: int
    logo_uri: str | None = None


class WalletPortfolio(CamelModel):
    address: str
    sol_balance: float
    sol_usd_value: float
    tokens: list[TokenBalance]
    total_usd_value: float
    last_updated: datetime
