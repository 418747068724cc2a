"""
Value models.
"""

from spark_client.models.account import AccountSnapshot
from spark_client.models.network import NetworkDescriptor
from spark_client.models.token import Token


__all__ = [
    "AccountSnapshot",
    "NetworkDescriptor",
    "Token",
]
