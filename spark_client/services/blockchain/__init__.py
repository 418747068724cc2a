"""
Blockchain services module.

Provides a uniform interface over blockchain backends:
- BlockchainNetwork: capability surface every adapter implements
- TokenRegistry: immutable token lookup tables
- WalletManager: single wallet session per adapter
- BlockchainStore: adapter selection by network type
- FuelNetwork: adapter for the Spark deployment on Fuel
"""

from .base import BlockchainNetwork
from .blockchain_store import BlockchainStore
from .fuel import FuelNetwork, SparkSDK
from .token_registry import TokenRegistry
from .types import FetchOrdersParams, FetchTradesParams, NetworkType, OrderType
from .wallet_operations import WalletConnector, WalletHandle, WalletManager


__all__ = [
    "BlockchainNetwork",
    "BlockchainStore",
    "FetchOrdersParams",
    "FetchTradesParams",
    "FuelNetwork",
    "NetworkType",
    "OrderType",
    "SparkSDK",
    "TokenRegistry",
    "WalletConnector",
    "WalletHandle",
    "WalletManager",
]
