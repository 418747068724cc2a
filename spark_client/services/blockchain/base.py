"""
Blockchain network interface.

Every concrete network adapter implements this capability surface so callers
stay unaware of which chain is active. Adapters are selected by their
``network_type`` tag, not by subclassing each other.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from spark_client.models.network import NetworkDescriptor
from spark_client.models.token import Token

from .types import (
    FetchOrdersParams,
    FetchTradesParams,
    MarketCreateEvent,
    NetworkType,
    PerpMaxAbsPositionSize,
    PerpPendingFundingPayment,
    SpotMarketVolume,
)


class BlockchainNetwork(ABC):
    """Uniform interface of a blockchain backend."""

    network_type: NetworkType
    network: NetworkDescriptor
    explorer_url: str

    # ---- Identity ----

    @abstractmethod
    def get_address(self) -> str | None:
        """Connected wallet address, None when disconnected."""

    @abstractmethod
    def get_private_key(self) -> str | None:
        """Imported private key, None for extension or no session."""

    @abstractmethod
    def get_is_external_wallet(self) -> bool:
        """True if the session is backed by a wallet extension."""

    @abstractmethod
    async def get_balance(self, account_address: str, asset_id: str) -> str:
        """Balance in base units as a decimal string."""

    # ---- Tokens ----

    @abstractmethod
    def get_token_list(self) -> list[Token]:
        """All tokens known to this network."""

    @abstractmethod
    def get_token_by_symbol(self, symbol: str) -> Token:
        """Token by symbol, raises TokenNotFoundError."""

    @abstractmethod
    def get_token_by_asset_id(self, asset_id: str) -> Token:
        """Token by case-insensitive asset id, raises TokenNotFoundError."""

    # ---- Session lifecycle ----

    @abstractmethod
    async def connect_wallet(self) -> None:
        """Connect through the wallet extension."""

    @abstractmethod
    async def connect_wallet_by_private_key(self, private_key: str) -> None:
        """Import a wallet by private key."""

    @abstractmethod
    def disconnect_wallet(self) -> None:
        """Drop the session; idempotent."""

    @abstractmethod
    async def add_asset_to_wallet(self, asset_id: str) -> None:
        """Register an asset in the wallet extension."""

    # ---- Trading (require an active wallet) ----

    @abstractmethod
    async def create_spot_order(self, asset_id: str, size: str, price: str) -> str:
        """Place a spot order, returns the order id."""

    @abstractmethod
    async def cancel_spot_order(self, order_id: str) -> None:
        """Cancel a spot order."""

    @abstractmethod
    async def mint_token(self, asset_id: str) -> None:
        """Mint faucet tokens to the connected wallet."""

    @abstractmethod
    async def approve(self, asset_id: str, amount: str) -> None:
        """Approve the exchange to spend an asset."""

    @abstractmethod
    async def allowance(self, asset_id: str) -> str:
        """Current approved amount for an asset."""

    @abstractmethod
    async def deposit_perp_collateral(self, asset_id: str, amount: str) -> None:
        """Deposit perp collateral."""

    @abstractmethod
    async def withdraw_perp_collateral(
        self, asset_id: str, amount: str, oracle_update_data: list[str]
    ) -> None:
        """Withdraw perp collateral."""

    @abstractmethod
    async def open_perp_order(
        self, asset_id: str, amount: str, price: str, update_data: list[str]
    ) -> str:
        """Open a perp order, returns the order id."""

    @abstractmethod
    async def remove_perp_order(self, order_id: str) -> None:
        """Remove a perp order."""

    @abstractmethod
    async def fulfill_perp_order(
        self, order_id: str, amount: str, update_data: list[str]
    ) -> None:
        """Fill an existing perp order."""

    # ---- Market and account queries ----

    @abstractmethod
    async def fetch_spot_markets(self, limit: int) -> list[MarketCreateEvent]: ...

    @abstractmethod
    async def fetch_spot_market_price(self, base_token_address: str) -> Decimal: ...

    @abstractmethod
    async def fetch_spot_orders(self, params: FetchOrdersParams) -> list[Any]: ...

    @abstractmethod
    async def fetch_spot_trades(self, params: FetchTradesParams) -> list[Any]: ...

    @abstractmethod
    async def fetch_spot_volume(self) -> SpotMarketVolume: ...

    @abstractmethod
    async def fetch_perp_collateral_balance(
        self, account_address: str, asset_id: str
    ) -> Decimal: ...

    @abstractmethod
    async def fetch_perp_all_trader_positions(self, account_address: str) -> list[Any]: ...

    @abstractmethod
    async def fetch_perp_is_allowed_collateral(self, asset_id: str) -> bool: ...

    @abstractmethod
    async def fetch_perp_trader_orders(
        self, account_address: str, asset_id: str
    ) -> list[Any]: ...

    @abstractmethod
    async def fetch_perp_all_markets(self) -> list[Any]: ...

    @abstractmethod
    async def fetch_perp_funding_rate(self, asset_id: str) -> Decimal: ...

    @abstractmethod
    async def fetch_perp_max_abs_position_size(
        self, account_address: str, asset_id: str
    ) -> PerpMaxAbsPositionSize: ...

    @abstractmethod
    async def fetch_perp_pending_funding_payment(
        self, account_address: str, asset_id: str
    ) -> PerpPendingFundingPayment: ...

    @abstractmethod
    async def fetch_perp_mark_price(self, asset_id: str) -> Decimal: ...

    # ---- Shared helpers ----

    def get_explorer_link(self, tx_id: str) -> str:
        """Block explorer URL of a transaction."""
        return f"{self.explorer_url.rstrip('/')}/tx/{tx_id}"
