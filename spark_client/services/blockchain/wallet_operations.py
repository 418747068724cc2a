"""
Wallet operations for network adapters.

This module handles:
- Wallet session state (address, imported private key, provider handle)
- Connection through a wallet extension connector
- Connection by private key import
- Balance queries and asset registration
"""

import hashlib
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Protocol

from eth_keys import keys as eth_keys
from eth_keys.exceptions import ValidationError as KeyValidationError
from eth_utils import ValidationError, decode_hex
from loguru import logger

from spark_client.utils.exceptions import (
    InvalidKeyError,
    ProviderUnavailableError,
    QueryFailedError,
    UnknownAccountError,
)
from spark_client.utils.observable import Observable
from spark_client.utils.security import mask_address

from .async_executor import run_with_timeout


class BalanceProvider(Protocol):
    """Anything able to answer balance queries (SDK provider or connector)."""

    async def get_balance(self, address: str, asset_id: str) -> Any: ...


class WalletConnector(BalanceProvider, Protocol):
    """Browser-style wallet extension."""

    async def connect(self) -> str: ...

    async def disconnect(self) -> None: ...

    async def add_asset(self, asset_id: str) -> None: ...


@dataclass(frozen=True)
class WalletHandle:
    """Active wallet passed to the trading SDK."""

    address: str
    provider: Any = field(repr=False, compare=False)
    private_key: str | None = field(default=None, repr=False)

    @property
    def is_external(self) -> bool:
        """True when signing happens in a wallet extension."""
        return self.private_key is None


@dataclass
class WalletSession:
    """Mutable session state; address is set iff the session is active."""

    address: str | None = None
    private_key: str | None = field(default=None, repr=False)
    provider: Any = field(default=None, repr=False)

    def clear(self) -> None:
        self.address = None
        self.private_key = None
        self.provider = None


def derive_address(private_key: str) -> str:
    """
    Derive a Fuel address from a secp256k1 private key.

    The address is the sha256 digest of the 64-byte uncompressed public key.

    Args:
        private_key: Hex encoded private key (with or without 0x)

    Returns:
        0x-prefixed 32-byte hex address

    Raises:
        InvalidKeyError: If the key is not a valid secp256k1 private key
    """
    try:
        public_key = eth_keys.PrivateKey(decode_hex(private_key)).public_key
    except (ValueError, TypeError, ValidationError, KeyValidationError) as e:
        raise InvalidKeyError(f"Invalid private key: {e}") from e
    return "0x" + hashlib.sha256(public_key.to_bytes()).hexdigest()


class WalletManager(Observable):
    """
    Owns a single wallet session.

    Connect/disconnect calls are expected to be issued sequentially by one
    caller; there is no internal locking.
    """

    def __init__(
        self,
        connector: WalletConnector | None = None,
        provider_timeout: float | None = None,
    ) -> None:
        """
        Initialize wallet manager.

        Args:
            connector: Wallet extension connector (optional)
            provider_timeout: Timeout for provider calls, None waits forever
        """
        super().__init__()
        self.connector = connector
        self.provider_timeout = provider_timeout
        self.session = WalletSession()
        self.logger = logger.bind(service=self.__class__.__name__)

    # ========== Session projections ==========

    @property
    def address(self) -> str | None:
        """Connected address."""
        return self.session.address

    @property
    def private_key(self) -> str | None:
        """Imported private key, None for extension sessions."""
        return self.session.private_key

    @property
    def is_connected(self) -> bool:
        """True when a session is active."""
        return self.session.address is not None

    @property
    def wallet(self) -> WalletHandle | None:
        """Handle for the trading SDK, None when disconnected."""
        if self.session.address is None:
            return None
        return WalletHandle(
            address=self.session.address,
            provider=self.session.provider,
            private_key=self.session.private_key,
        )

    # ========== Session lifecycle ==========

    async def connect(self) -> None:
        """
        Connect through the wallet extension.

        Raises:
            ProviderUnavailableError: If no connector is configured or it times out
            UnknownAccountError: If the extension returns no account
            NetworkError: Connector errors are propagated unchanged
        """
        if self.connector is None:
            raise ProviderUnavailableError("No wallet connector available")

        address = await run_with_timeout(
            self.connector.connect(),
            self.provider_timeout,
            "connect",
            ProviderUnavailableError,
        )
        if not address:
            raise UnknownAccountError("Wallet returned no authorized account")

        self.session.address = address
        self.session.private_key = None
        self.session.provider = self.connector
        self.logger.info(f"Wallet connected via extension: {mask_address(address)}")
        self._emit_change("address")

    async def connect_by_private_key(self, private_key: str, provider: Any) -> None:
        """
        Import a wallet from its private key.

        Args:
            private_key: Hex encoded private key
            provider: SDK provider context used for queries and signing

        Raises:
            InvalidKeyError: If no address can be derived from the key
        """
        address = derive_address(private_key)

        self.session.address = address
        self.session.private_key = private_key
        self.session.provider = provider
        self.logger.info(f"Wallet imported from private key: {mask_address(address)}")
        self._emit_change("address")

    def disconnect(self) -> None:
        """Clear the session. Safe to call when already disconnected."""
        was_connected = self.is_connected
        self.session.clear()
        if was_connected:
            self.logger.info("Wallet disconnected")
            self._emit_change("address")

    # ========== Provider queries ==========

    async def get_balance(self, account_address: str, asset_id: str) -> str:
        """
        Get balance of an asset for an account.

        Args:
            account_address: Account to query
            asset_id: Asset id to query

        Returns:
            Balance in base units as a decimal string

        Raises:
            QueryFailedError: On provider or network error
        """
        provider = self.session.provider or self.connector
        if provider is None:
            raise QueryFailedError("No provider available for balance query")

        try:
            raw = await run_with_timeout(
                provider.get_balance(account_address, asset_id),
                self.provider_timeout,
                "get_balance",
                QueryFailedError,
            )
        except QueryFailedError:
            raise
        except Exception as e:
            self.logger.error(
                f"Get balance failed for {mask_address(account_address)}: {e}"
            )
            raise QueryFailedError(f"Balance query failed: {e}") from e

        if isinstance(raw, float):
            raise QueryFailedError(f"Provider returned an inexact float balance: {raw!r}")
        try:
            balance = Decimal(str(raw))
        except InvalidOperation as e:
            raise QueryFailedError(f"Provider returned a non-numeric balance: {raw!r}") from e
        if not balance.is_finite():
            raise QueryFailedError(f"Provider returned a non-finite balance: {raw!r}")
        return format(balance, "f")

    async def add_asset(self, asset_id: str) -> None:
        """
        Ask the wallet extension to display an asset.

        Failure does not affect the session.

        Raises:
            ProviderUnavailableError: If no connector is configured
        """
        if self.connector is None:
            raise ProviderUnavailableError("No wallet connector available")
        await self.connector.add_asset(asset_id)
        self.logger.debug(f"Asset added to wallet: {mask_address(asset_id)}")
