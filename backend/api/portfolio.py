"""Portfolio API — wallet holdings."""

from fastapi import APIRouter, Depends

from backend.api.deps import get_wallet_address, to_http_error
from backend.schemas.portfolio import WalletPortfolio
from backend.services.solana import WalletDataError
from backend.services.wallet_data import fetch_portfolio

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("", response_model=WalletPortfolio)
def get_portfolio(address: str = Depends(get_wallet_address)):
    try:
        return fetch_portfolio(address)
    except WalletDataError as e:
        raise to_http_error(e)
