"""
Account store.

Drives the wallet account lifecycle on top of the current network adapter:
- Best-effort restore of a persisted session on init
- Connect by wallet extension / by private key, disconnect
- Classification of failures into user notices
- Serialization of the session for persistence

This is the only place where wallet errors are caught and turned into
notifications; adapters and the wallet manager let them propagate.
"""

from enum import StrEnum

from loguru import logger

from spark_client.config.constants import (
    NOTICE_AUTHORIZE_ACCOUNT,
    NOTICE_UNEXPECTED_ERROR,
)
from spark_client.models.account import AccountSnapshot
from spark_client.services.blockchain.base import BlockchainNetwork
from spark_client.services.blockchain.blockchain_store import BlockchainStore
from spark_client.services.blockchain.types import NetworkType
from spark_client.services.notification import NotificationService, Severity
from spark_client.utils.exceptions import is_recoverable
from spark_client.utils.observable import Observable
from spark_client.utils.security import mask_address


# Only these networks reconnect an address-only snapshot through the extension
PROVIDER_RECONNECT_NETWORKS = frozenset({NetworkType.FUEL})


class AccountState(StrEnum):
    """Lifecycle state of the account store."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class AccountStore(Observable):
    """Account lifecycle controller."""

    def __init__(
        self,
        blockchain_store: BlockchainStore,
        notification_service: NotificationService,
        init_state: AccountSnapshot | None = None,
    ) -> None:
        """
        Initialize account store.

        Call ``init()`` (or use ``create()``) to restore ``init_state``.

        Args:
            blockchain_store: Network adapter selection
            notification_service: Sink for user-facing notices
            init_state: Persisted snapshot to restore (optional)
        """
        super().__init__()
        self.blockchain_store = blockchain_store
        self.notification_service = notification_service
        self.init_state = init_state
        self.state = AccountState.UNINITIALIZED
        self._observed: set[int] = set()

    @classmethod
    async def create(
        cls,
        blockchain_store: BlockchainStore,
        notification_service: NotificationService,
        init_state: AccountSnapshot | None = None,
    ) -> "AccountStore":
        """Construct and initialize in one step."""
        store = cls(blockchain_store, notification_service, init_state)
        await store.init()
        return store

    # ========== Lifecycle ==========

    @property
    def initialized(self) -> bool:
        """True once init() completed."""
        return self.state is AccountState.READY

    def _set_state(self, state: AccountState) -> None:
        self.state = state
        self._emit_change("state")

    async def init(self) -> None:
        """
        Restore the persisted session (best effort) and become ready.

        A snapshot with a private key is re-imported. An address-only snapshot
        reconnects through the wallet extension when the current network
        supports it. Restore failures leave the session disconnected.
        """
        if self.state is not AccountState.UNINITIALIZED:
            return

        self._set_state(AccountState.INITIALIZING)
        await self._restore(self.init_state)
        self._set_state(AccountState.READY)
        logger.info(f"AccountStore ready (connected={self.is_connected})")

    async def _restore(self, snapshot: AccountSnapshot | None) -> None:
        if snapshot is None or snapshot.is_empty:
            return

        current = self.blockchain_store.current_instance
        if snapshot.private_key:
            logger.info("Restoring wallet session from private key")
            await self.connect_wallet_by_private_key(snapshot.private_key)
        elif (
            snapshot.address
            and current is not None
            and current.network_type in PROVIDER_RECONNECT_NETWORKS
        ):
            logger.info(f"Reconnecting wallet {mask_address(snapshot.address)}")
            await self.connect_wallet(current.network_type)

    # ========== Session operations ==========

    def _current(self) -> BlockchainNetwork | None:
        network = self.blockchain_store.current_instance
        if network is not None and id(network) not in self._observed:
            self._observe(network)
        return network

    def _observe(self, network: BlockchainNetwork) -> None:
        """Re-emit session changes of an adapter's wallet manager."""
        wallet_manager = getattr(network, "wallet_manager", None)
        if isinstance(wallet_manager, Observable):
            wallet_manager.subscribe(lambda _owner, _field: self._emit_change("address"))
        self._observed.add(id(network))

    async def connect_wallet(self, network_type: NetworkType | str) -> bool:
        """
        Connect through the wallet extension of a network.

        Provider rejections (e.g. no authorized account) produce an info
        notice and leave the session disconnected. Any other failure produces
        an error notice and a best-effort disconnect.

        Args:
            network_type: Network to select and connect

        Returns:
            True if connected
        """
        network: BlockchainNetwork | None = None
        try:
            network = self.blockchain_store.connect_to(network_type)
            self._current()
            await network.connect_wallet()
        except Exception as e:
            if is_recoverable(e):
                logger.info(f"Wallet connection needs user action: {e}")
                self.notification_service.toast(NOTICE_AUTHORIZE_ACCOUNT, Severity.INFO)
                return False

            logger.exception(f"Error connecting to wallet: {e}")
            self.notification_service.toast(NOTICE_UNEXPECTED_ERROR, Severity.ERROR)

            if network is not None:
                try:
                    network.disconnect_wallet()
                except Exception as cleanup_error:
                    # Already reported the primary failure
                    logger.warning(f"Cleanup disconnect failed: {cleanup_error}")
            return False

        logger.success(f"Wallet connected: {mask_address(network.get_address())}")
        return True

    async def connect_wallet_by_private_key(self, private_key: str) -> bool:
        """
        Import a wallet by private key on the current network.

        Args:
            private_key: Hex encoded private key

        Returns:
            True if connected
        """
        network = self._current()
        if network is None:
            logger.error("Cannot import wallet: no current network")
            self.notification_service.toast(NOTICE_UNEXPECTED_ERROR, Severity.ERROR)
            return False

        try:
            await network.connect_wallet_by_private_key(private_key)
        except Exception as e:
            logger.error(f"Error importing wallet from private key: {e}")
            self.notification_service.toast(NOTICE_UNEXPECTED_ERROR, Severity.ERROR)
            return False

        logger.success(f"Wallet imported: {mask_address(network.get_address())}")
        return True

    async def add_asset(self, asset_id: str) -> bool:
        """
        Ask the wallet to display an asset. Session is left untouched.

        Returns:
            True if the wallet accepted the asset
        """
        network = self._current()
        if network is None:
            logger.error("Cannot add asset: no current network")
            self.notification_service.toast(NOTICE_UNEXPECTED_ERROR, Severity.ERROR)
            return False

        try:
            await network.add_asset_to_wallet(asset_id)
        except Exception as e:
            logger.warning(f"Add asset {mask_address(asset_id)} failed: {e}")
            self.notification_service.toast(str(e), Severity.ERROR)
            return False
        return True

    def disconnect(self) -> None:
        """Disconnect the current wallet. Never raises."""
        network = self._current()
        if network is None:
            return
        try:
            network.disconnect_wallet()
        except Exception as e:
            logger.exception(f"Error disconnecting wallet: {e}")

    # ========== Projections ==========

    @property
    def address(self) -> str | None:
        """Connected address of the current network."""
        network = self._current()
        return network.get_address() if network is not None else None

    @property
    def is_connected(self) -> bool:
        """True when the current network has an active session."""
        return bool(self.address)

    def serialize(self) -> AccountSnapshot:
        """Snapshot of the current session; empty values are None."""
        network = self._current()
        if network is None:
            return AccountSnapshot()
        return AccountSnapshot(
            private_key=network.get_private_key() or None,
            address=network.get_address() or None,
        )
