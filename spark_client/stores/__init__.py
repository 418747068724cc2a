"""
Stores.

Stateful controllers driving the client on top of the services layer.
"""

from spark_client.stores.account_store import AccountState, AccountStore


__all__ = ["AccountState", "AccountStore"]
