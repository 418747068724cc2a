"""
Blockchain store.

Holds one adapter per network type and tracks which one is current.
Adapters are created lazily from registered factories.
"""

from collections.abc import Callable

from loguru import logger

from spark_client.utils.exceptions import UnsupportedNetworkError

from .base import BlockchainNetwork
from .types import NetworkType


NetworkFactory = Callable[[], BlockchainNetwork]


class BlockchainStore:
    """Registry of network adapters with a current selection."""

    def __init__(
        self,
        factories: dict[NetworkType, NetworkFactory],
        default_network: NetworkType | str | None = None,
    ) -> None:
        """
        Initialize store.

        Args:
            factories: Network type -> adapter factory
            default_network: Network made current immediately (optional)

        Raises:
            UnsupportedNetworkError: If default_network has no factory
        """
        self._factories = dict(factories)
        self._instances: dict[NetworkType, BlockchainNetwork] = {}
        self._current_type: NetworkType | None = None

        if default_network is not None:
            self.connect_to(default_network)

    @property
    def supported_networks(self) -> list[NetworkType]:
        """Network types that can be selected."""
        return list(self._factories)

    @property
    def current_instance(self) -> BlockchainNetwork | None:
        """Adapter subsequent calls route to, None before any selection."""
        if self._current_type is None:
            return None
        return self._instances[self._current_type]

    def get_instance(self, network_type: NetworkType | str) -> BlockchainNetwork:
        """
        Get (creating on first use) the adapter of a network type.

        Raises:
            UnsupportedNetworkError: If no factory is registered for the type
        """
        try:
            key = NetworkType(network_type)
        except ValueError:
            raise UnsupportedNetworkError(f"Unknown network type: {network_type}") from None

        if key not in self._factories:
            raise UnsupportedNetworkError(f"No adapter registered for network: {key}")

        instance = self._instances.get(key)
        if instance is None:
            instance = self._factories[key]()
            self._instances[key] = instance
            logger.debug(f"Created {instance.__class__.__name__} for network '{key}'")
        return instance

    def connect_to(self, network_type: NetworkType | str) -> BlockchainNetwork:
        """
        Make a network current and return its adapter.

        Raises:
            UnsupportedNetworkError: If no factory is registered for the type
        """
        instance = self.get_instance(network_type)
        key = instance.network_type
        if key != self._current_type:
            logger.info(f"Switched current network to '{key}'")
        self._current_type = key
        return instance
