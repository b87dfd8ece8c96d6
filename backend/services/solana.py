"""Solana address validation and upstream error classification.

Anything that reaches the analytics engine must carry a valid account
address; failures from the data source are mapped to the three errors
the API distinguishes (invalid address, rate limited, fetch failed).
"""

import base58

PUBLIC_KEY_LENGTH = 32
RATE_LIMIT_MARKERS = ("429", "rate limit", "too many requests")


class WalletDataError(Exception):
    """Base class for errors surfaced to the user when loading wallet data."""

    status_code = 500
    default_message = "Failed to fetch wallet data"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidAddressError(WalletDataError):
    status_code = 400
    default_message = "Invalid Solana wallet address"


class RateLimitedError(WalletDataError):
    status_code = 429
    default_message = "Rate limited by Solana RPC. Please try again in a moment."


class FetchFailedError(WalletDataError):
    status_code = 500


def is_valid_solana_address(address: str | None) -> bool:
    """True if ``address`` is base58 decoding to a 32-byte public key."""
    if not address or len(address) > 44 or address != address.strip():
        return False
    try:
        return len(base58.b58decode(address)) == PUBLIC_KEY_LENGTH
    except ValueError:
        return False


def require_valid_address(address: str | None) -> str:
    if not is_valid_solana_address(address):
        raise InvalidAddressError()
    return address


def classify_upstream_error(exc: Exception, failure_message: str) -> WalletDataError:
    """Map a data-source exception to a user-facing error.

    Rate limiting is reported separately so callers can back off and retry.
    """
    if isinstance(exc, WalletDataError):
        return exc
    text = str(exc).lower()
    if any(marker in text for marker in RATE_LIMIT_MARKERS):
        return RateLimitedError()
    return FetchFailedError(failure_message)
