"""
Utilities.

Error taxonomy, log masking and change subscription helpers.
"""

from spark_client.utils.exceptions import (
    InvalidKeyError,
    NetworkError,
    NetworkErrorCode,
    NoActiveWalletError,
    ProviderRejectedError,
    ProviderUnavailableError,
    QueryFailedError,
    TokenNotFoundError,
    UnknownAccountError,
    UnsupportedNetworkError,
    is_recoverable,
)
from spark_client.utils.observable import Observable
from spark_client.utils.security import mask_address, mask_private_key


__all__ = [
    "InvalidKeyError",
    "NetworkError",
    "NetworkErrorCode",
    "NoActiveWalletError",
    "Observable",
    "ProviderRejectedError",
    "ProviderUnavailableError",
    "QueryFailedError",
    "TokenNotFoundError",
    "UnknownAccountError",
    "UnsupportedNetworkError",
    "is_recoverable",
    "mask_address",
    "mask_private_key",
]
