"""
Client composition and singleton access.

Wires settings, network adapters, notifications and the account store
together, and keeps one process-wide client instance.
"""

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from spark_client.config.settings import Settings
from spark_client.models.account import AccountSnapshot
from spark_client.services.blockchain.blockchain_store import BlockchainStore
from spark_client.services.blockchain.fuel import FuelNetwork, SparkSDK
from spark_client.services.blockchain.types import NetworkType
from spark_client.services.blockchain.wallet_operations import WalletConnector
from spark_client.services.notification import NotificationService
from spark_client.stores.account_store import AccountStore


@dataclass
class SparkClient:
    """Top-level client components."""

    settings: Settings
    blockchain_store: BlockchainStore
    notification_service: NotificationService
    account_store: AccountStore


_client: SparkClient | None = None


def build_blockchain_store(
    settings: Settings,
    sdk_factory: Callable[..., SparkSDK],
    connector: WalletConnector | None = None,
) -> BlockchainStore:
    """Blockchain store with every supported network registered."""
    factories = {
        NetworkType.FUEL: lambda: FuelNetwork.from_settings(settings, sdk_factory, connector),
    }
    return BlockchainStore(factories, default_network=settings.default_network)


async def init_client(
    settings: Settings,
    sdk_factory: Callable[..., SparkSDK],
    connector: WalletConnector | None = None,
    snapshot: AccountSnapshot | None = None,
) -> SparkClient:
    """
    Initialize the singleton client and restore the persisted session.

    Args:
        settings: Application settings
        sdk_factory: Creates the Spark SDK client
        connector: Wallet extension connector (optional)
        snapshot: Persisted account snapshot (optional)
    """
    global _client
    blockchain_store = build_blockchain_store(settings, sdk_factory, connector)
    notification_service = NotificationService()
    account_store = await AccountStore.create(blockchain_store, notification_service, snapshot)

    _client = SparkClient(
        settings=settings,
        blockchain_store=blockchain_store,
        notification_service=notification_service,
        account_store=account_store,
    )
    logger.success(
        f"Spark client initialized\n"
        f"  Network: {settings.network_name} ({settings.network_url})\n"
        f"  Indexer: {settings.indexer_url}\n"
        f"  Connected: {account_store.is_connected}"
    )
    return _client


def get_client() -> SparkClient:
    """
    Get the singleton client instance.

    Raises:
        RuntimeError: If client not initialized
    """
    if _client is None:
        raise RuntimeError("SparkClient not initialized")
    return _client
