"""
Fuel network adapter.

Implements the BlockchainNetwork interface on top of the Spark SDK:
- Wallet lifecycle through WalletManager, keeping the SDK's active wallet in sync
- Token lookups through the TokenRegistry
- Trading operations (require a connected wallet)
- Market and account queries (pass-through)
"""

import functools
from collections.abc import Callable, Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any, TypeVar

from loguru import logger

from spark_client.config.constants import (
    FAUCET_AMOUNTS,
    GAS_TOKEN_SYMBOL,
    QUOTE_TOKEN_SYMBOL,
)
from spark_client.config.settings import Settings
from spark_client.models.network import NetworkDescriptor
from spark_client.models.token import Token
from spark_client.services.blockchain.base import BlockchainNetwork
from spark_client.services.blockchain.token_registry import TokenRegistry
from spark_client.services.blockchain.types import (
    FetchOrdersParams,
    FetchTradesParams,
    MarketCreateEvent,
    NetworkType,
    PerpMaxAbsPositionSize,
    PerpPendingFundingPayment,
    SpotMarketVolume,
)
from spark_client.services.blockchain.wallet_operations import (
    WalletConnector,
    WalletManager,
)
from spark_client.utils.exceptions import NoActiveWalletError, TokenNotFoundError
from spark_client.utils.security import mask_address

from .constants import (
    CONTRACT_ADDRESSES,
    EXPLORER_URL,
    INDEXER_URL,
    NETWORKS,
    TOKEN_LOGOS,
    TOKENS_FILE,
)
from .sdk import SparkSDK


T = TypeVar("T")


@functools.cache
def default_token_registry() -> TokenRegistry:
    """Registry built once from the bundled Fuel token metadata."""
    return TokenRegistry.from_json(TOKENS_FILE, TOKEN_LOGOS)


def load_token_registry(tokens_file: Path | None = None) -> TokenRegistry:
    """
    Load Fuel token registry.

    Args:
        tokens_file: Metadata override, bundled tokens when None
    """
    if tokens_file is None:
        return default_token_registry()
    return TokenRegistry.from_json(tokens_file, TOKEN_LOGOS)


def requires_wallet(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator failing fast with NoActiveWalletError when no wallet is connected.

    The check runs before any argument resolution or SDK call.
    """
    @functools.wraps(func)
    async def wrapper(self: "FuelNetwork", *args: Any, **kwargs: Any) -> Any:
        if self.wallet_manager.wallet is None:
            raise NoActiveWalletError(f"{func.__name__} requires a connected wallet")
        return await func(self, *args, **kwargs)

    return wrapper


class FuelNetwork(BlockchainNetwork):
    """Blockchain adapter for the Spark deployment on Fuel."""

    network_type = NetworkType.FUEL

    def __init__(
        self,
        sdk: SparkSDK,
        token_registry: TokenRegistry,
        connector: WalletConnector | None = None,
        network: NetworkDescriptor = NETWORKS[0],
        explorer_url: str = EXPLORER_URL,
        provider_timeout: float | None = None,
        faucet_amounts: Mapping[str, Decimal] = FAUCET_AMOUNTS,
    ) -> None:
        """
        Initialize Fuel adapter.

        Args:
            sdk: Spark SDK client
            token_registry: Token lookup tables
            connector: Wallet extension connector (optional)
            network: Network descriptor the SDK points at
            explorer_url: Block explorer base URL
            provider_timeout: Timeout for wallet provider calls
            faucet_amounts: Symbol -> amount minted by mint_token
        """
        self.sdk = sdk
        self.token_registry = token_registry
        self.network = network
        self.explorer_url = explorer_url
        self.faucet_amounts = faucet_amounts
        self.wallet_manager = WalletManager(connector, provider_timeout=provider_timeout)
        self.logger = logger.bind(service=self.__class__.__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        sdk_factory: Callable[..., SparkSDK],
        connector: WalletConnector | None = None,
    ) -> "FuelNetwork":
        """
        Build adapter and SDK client from application settings.

        Args:
            settings: Application settings
            sdk_factory: Called with network_url, contract_addresses and
                indexer_api_url to create the SDK client
            connector: Wallet extension connector (optional)
        """
        network = NetworkDescriptor(name=settings.network_name, url=settings.network_url)
        sdk = sdk_factory(
            network_url=network.url,
            contract_addresses=CONTRACT_ADDRESSES,
            indexer_api_url=settings.indexer_url,
        )
        return cls(
            sdk,
            load_token_registry(settings.tokens_file),
            connector=connector,
            network=network,
            explorer_url=settings.explorer_url,
            provider_timeout=settings.provider_timeout,
        )

    # ========== Identity ==========

    def get_address(self) -> str | None:
        return self.wallet_manager.address

    def get_private_key(self) -> str | None:
        return self.wallet_manager.private_key

    def get_is_external_wallet(self) -> bool:
        wallet = self.wallet_manager.wallet
        return wallet is not None and wallet.is_external

    async def get_balance(self, account_address: str, asset_id: str) -> str:
        return await self.wallet_manager.get_balance(account_address, asset_id)

    # ========== Tokens ==========

    def get_token_list(self) -> list[Token]:
        return list(self.token_registry.tokens)

    def get_token_by_symbol(self, symbol: str) -> Token:
        return self.token_registry.get_by_symbol(symbol)

    def get_token_by_asset_id(self, asset_id: str) -> Token:
        return self.token_registry.get_by_asset_id(asset_id)

    # ========== Session lifecycle ==========

    def _sync_active_wallet(self) -> None:
        """Point the SDK at the wallet manager's current session."""
        self.sdk.set_active_wallet(self.wallet_manager.wallet)

    async def connect_wallet(self) -> None:
        try:
            await self.wallet_manager.connect()
        finally:
            self._sync_active_wallet()

    async def connect_wallet_by_private_key(self, private_key: str) -> None:
        try:
            provider = await self.sdk.get_provider()
            await self.wallet_manager.connect_by_private_key(private_key, provider)
        finally:
            self._sync_active_wallet()

    def disconnect_wallet(self) -> None:
        try:
            self.wallet_manager.disconnect()
        finally:
            self._sync_active_wallet()

    async def add_asset_to_wallet(self, asset_id: str) -> None:
        await self.wallet_manager.add_asset(asset_id)

    # ========== Trading ==========

    @requires_wallet
    async def create_spot_order(self, asset_id: str, size: str, price: str) -> str:
        base_token = self.get_token_by_asset_id(asset_id)
        quote_token = self.get_token_by_symbol(QUOTE_TOKEN_SYMBOL)

        order_id = await self.sdk.create_spot_order(base_token, quote_token, size, price)
        self.logger.info(
            f"Spot order created: {order_id} {base_token.symbol}/{quote_token.symbol} "
            f"size={size} price={price}"
        )
        return order_id

    @requires_wallet
    async def cancel_spot_order(self, order_id: str) -> None:
        await self.sdk.cancel_spot_order(order_id)
        self.logger.info(f"Spot order cancelled: {order_id}")

    @requires_wallet
    async def mint_token(self, asset_id: str) -> None:
        token = self.get_token_by_asset_id(asset_id)
        amount = self.faucet_amounts.get(token.symbol)
        if amount is None:
            raise TokenNotFoundError(f"No faucet amount for token: {token.symbol}")

        await self.sdk.mint_token(token, str(amount))
        self.logger.info(
            f"Minted {amount} {token.symbol} to {mask_address(self.get_address())}"
        )

    @requires_wallet
    async def approve(self, asset_id: str, amount: str) -> None:
        await self.sdk.approve(asset_id, amount)

    @requires_wallet
    async def allowance(self, asset_id: str) -> str:
        return await self.sdk.allowance(asset_id)

    @requires_wallet
    async def deposit_perp_collateral(self, asset_id: str, amount: str) -> None:
        await self.sdk.deposit_perp_collateral(asset_id, amount)

    @requires_wallet
    async def withdraw_perp_collateral(
        self, asset_id: str, amount: str, oracle_update_data: list[str]
    ) -> None:
        base_token = self.get_token_by_asset_id(asset_id)
        gas_token = self.get_token_by_symbol(GAS_TOKEN_SYMBOL)

        await self.sdk.withdraw_perp_collateral(base_token, gas_token, amount, oracle_update_data)

    @requires_wallet
    async def open_perp_order(
        self, asset_id: str, amount: str, price: str, update_data: list[str]
    ) -> str:
        base_token = self.get_token_by_asset_id(asset_id)
        gas_token = self.get_token_by_symbol(GAS_TOKEN_SYMBOL)

        order_id = await self.sdk.open_perp_order(base_token, gas_token, amount, price, update_data)
        self.logger.info(f"Perp order opened: {order_id} {base_token.symbol} amount={amount}")
        return order_id

    @requires_wallet
    async def remove_perp_order(self, order_id: str) -> None:
        await self.sdk.remove_perp_order(order_id)

    @requires_wallet
    async def fulfill_perp_order(
        self, order_id: str, amount: str, update_data: list[str]
    ) -> None:
        gas_token = self.get_token_by_symbol(GAS_TOKEN_SYMBOL)

        await self.sdk.fulfill_perp_order(gas_token, order_id, amount, update_data)

    # ========== Market and account queries ==========

    async def fetch_spot_markets(self, limit: int) -> list[MarketCreateEvent]:
        return await self.sdk.fetch_spot_markets(limit)

    async def fetch_spot_market_price(self, base_token_address: str) -> Decimal:
        return await self.sdk.fetch_spot_market_price(base_token_address)

    async def fetch_spot_orders(self, params: FetchOrdersParams) -> list[Any]:
        return await self.sdk.fetch_spot_orders(params)

    async def fetch_spot_trades(self, params: FetchTradesParams) -> list[Any]:
        return await self.sdk.fetch_spot_trades(params)

    async def fetch_spot_volume(self) -> SpotMarketVolume:
        return await self.sdk.fetch_spot_volume()

    async def fetch_perp_collateral_balance(
        self, account_address: str, asset_id: str
    ) -> Decimal:
        return await self.sdk.fetch_perp_collateral_balance(account_address, asset_id)

    async def fetch_perp_all_trader_positions(self, account_address: str) -> list[Any]:
        return await self.sdk.fetch_perp_all_trader_positions(account_address)

    async def fetch_perp_is_allowed_collateral(self, asset_id: str) -> bool:
        return await self.sdk.fetch_perp_is_allowed_collateral(asset_id)

    async def fetch_perp_trader_orders(
        self, account_address: str, asset_id: str
    ) -> list[Any]:
        return await self.sdk.fetch_perp_trader_orders(account_address, asset_id)

    async def fetch_perp_all_markets(self) -> list[Any]:
        return await self.sdk.fetch_perp_all_markets()

    async def fetch_perp_funding_rate(self, asset_id: str) -> Decimal:
        return await self.sdk.fetch_perp_funding_rate(asset_id)

    async def fetch_perp_max_abs_position_size(
        self, account_address: str, asset_id: str
    ) -> PerpMaxAbsPositionSize:
        return await self.sdk.fetch_perp_max_abs_position_size(account_address, asset_id)

    async def fetch_perp_pending_funding_payment(
        self, account_address: str, asset_id: str
    ) -> PerpPendingFundingPayment:
        return await self.sdk.fetch_perp_pending_funding_payment(account_address, asset_id)

    async def fetch_perp_mark_price(self, asset_id: str) -> Decimal:
        return await self.sdk.fetch_perp_mark_price(asset_id)
