"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Fuel adapter wired to the mock SDK and connector
- Blockchain store and notification service
- Account store (not initialized)
"""

import pytest

from spark_client.services.blockchain.blockchain_store import BlockchainStore
from spark_client.services.blockchain.fuel import FuelNetwork
from spark_client.services.blockchain.types import NetworkType
from spark_client.services.notification import NotificationService
from spark_client.stores.account_store import AccountStore


@pytest.fixture
def fuel_network(mock_sdk, token_registry, mock_connector):
    """
    Create FuelNetwork with mocked SDK and wallet connector.

    Returns:
        FuelNetwork: Disconnected adapter
    """
    return FuelNetwork(mock_sdk, token_registry, connector=mock_connector)


@pytest.fixture
def blockchain_store(fuel_network):
    """
    Blockchain store with the Fuel adapter current.

    Returns:
        BlockchainStore: Store whose factory always returns fuel_network
    """
    return BlockchainStore(
        {NetworkType.FUEL: lambda: fuel_network},
        default_network=NetworkType.FUEL,
    )


@pytest.fixture
def notifications():
    """
    Notification service recording every notice.

    Returns:
        NotificationService: Service with an empty history
    """
    return NotificationService()


@pytest.fixture
def account_store(blockchain_store, notifications):
    """
    Account store without a snapshot, not yet initialized.

    Returns:
        AccountStore: Store in UNINITIALIZED state
    """
    return AccountStore(blockchain_store, notifications)
