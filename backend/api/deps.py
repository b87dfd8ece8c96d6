"""Shared API dependencies."""

from fastapi import HTTPException, Query, status

from backend.services.solana import InvalidAddressError, WalletDataError, is_valid_solana_address


def get_wallet_address(
    address: str = Query(..., min_length=1, description="Solana wallet address (base58)"),
) -> str:
    """Validate the ``address`` query parameter before it reaches any service."""
    address = address.strip()
    if not is_valid_solana_address(address):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=InvalidAddressError.default_message,
        )
    return address


def to_http_error(error: WalletDataError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)
