"""System API — health check and runtime configuration."""

from fastapi import APIRouter

from backend.config import settings

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/config")
def runtime_config():
    """Non-secret settings the dashboard uses to size its requests."""
    return {
        "trade_source": settings.trade_source,
        "default_trade_count": settings.default_trade_count,
        "max_trade_count": settings.max_trade_count,
    }
