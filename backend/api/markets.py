"""Markets API — list tradable markets."""

from fastapi import APIRouter

from backend.schemas.market import TradableAsset
from backend.services.market_data import fetch_markets

router = APIRouter(prefix="/api/markets", tags=["markets"])


@router.get("", response_model=list[TradableAsset])
def list_markets():
    """List all supported spot and perpetual markets."""
    return fetch_markets()
