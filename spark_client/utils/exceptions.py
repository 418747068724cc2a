"""
Exception handling utilities.

Defines the error taxonomy raised by the wallet and network layers and the
categories the account store uses to classify them.
"""

from enum import StrEnum


class NetworkErrorCode(StrEnum):
    """Machine-readable error codes carried by every NetworkError."""

    NOT_FOUND = "not_found"
    NO_ACTIVE_WALLET = "no_active_wallet"
    PROVIDER_REJECTED = "provider_rejected"
    UNKNOWN_ACCOUNT = "unknown_account"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    INVALID_KEY = "invalid_key"
    QUERY_FAILED = "query_failed"
    UNSUPPORTED_NETWORK = "unsupported_network"


class NetworkError(Exception):
    """Base class for errors raised by blockchain network adapters."""

    code: NetworkErrorCode = NetworkErrorCode.QUERY_FAILED

    def __init__(self, message: str = "", code: NetworkErrorCode | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value!r}, message={str(self)!r})"


class TokenNotFoundError(NetworkError, LookupError):
    """Raised when a token lookup by symbol or asset id has no match."""

    code = NetworkErrorCode.NOT_FOUND


class NoActiveWalletError(NetworkError):
    """Raised when a wallet-requiring operation runs without a session."""

    code = NetworkErrorCode.NO_ACTIVE_WALLET


class ProviderRejectedError(NetworkError):
    """Raised when the wallet provider refuses the connection request."""

    code = NetworkErrorCode.PROVIDER_REJECTED


class UnknownAccountError(ProviderRejectedError):
    """Raised when the wallet extension has no authorized account."""

    code = NetworkErrorCode.UNKNOWN_ACCOUNT


class ProviderUnavailableError(NetworkError):
    """Raised when no wallet provider is reachable."""

    code = NetworkErrorCode.PROVIDER_UNAVAILABLE


class InvalidKeyError(NetworkError):
    """Raised when an address cannot be derived from a private key."""

    code = NetworkErrorCode.INVALID_KEY


class QueryFailedError(NetworkError):
    """Raised when a provider query (e.g. balance) fails."""

    code = NetworkErrorCode.QUERY_FAILED


class UnsupportedNetworkError(NetworkError):
    """Raised when no adapter is registered for a network type."""

    code = NetworkErrorCode.UNSUPPORTED_NETWORK


# Exception categories based on handling strategy

# Recoverable - user has to act in the wallet, session stays disconnected
RECOVERABLE_ERRORS = (
    ProviderRejectedError,  # Includes UnknownAccountError
)

# Recoverable codes for errors raised by third-party connectors that only
# carry a code and not our exception type
RECOVERABLE_CODES = frozenset(
    {
        NetworkErrorCode.PROVIDER_REJECTED,
        NetworkErrorCode.UNKNOWN_ACCOUNT,
    }
)


def is_recoverable(exc: BaseException) -> bool:
    """
    Check if exception asks the user to take action instead of retrying.

    Args:
        exc: Exception to check

    Returns:
        True if exception is a recoverable provider rejection
    """
    if isinstance(exc, RECOVERABLE_ERRORS):
        return True
    return isinstance(exc, NetworkError) and exc.code in RECOVERABLE_CODES
