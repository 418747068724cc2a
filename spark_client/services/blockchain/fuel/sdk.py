"""
Spark trading SDK interface.

The SDK signs and sends transactions and queries the chain and indexer. The
adapter only relies on the operations listed here; tokens are passed already
resolved, amounts, prices and ids as strings.
"""

from decimal import Decimal
from typing import Any, Protocol

from spark_client.models.token import Token
from spark_client.services.blockchain.types import (
    FetchOrdersParams,
    FetchTradesParams,
    MarketCreateEvent,
    PerpMaxAbsPositionSize,
    PerpPendingFundingPayment,
    SpotMarketVolume,
)
from spark_client.services.blockchain.wallet_operations import WalletHandle


class SparkSDK(Protocol):
    """Operations the Fuel adapter requires from the trading SDK."""

    def set_active_wallet(self, wallet: WalletHandle | None) -> None: ...

    async def get_provider(self) -> Any: ...

    # Trading
    async def create_spot_order(
        self, base_token: Token, quote_token: Token, size: str, price: str
    ) -> str: ...

    async def cancel_spot_order(self, order_id: str) -> None: ...

    async def mint_token(self, token: Token, amount: str) -> None: ...

    async def approve(self, asset_id: str, amount: str) -> None: ...

    async def allowance(self, asset_id: str) -> str: ...

    async def deposit_perp_collateral(self, asset_id: str, amount: str) -> None: ...

    async def withdraw_perp_collateral(
        self, base_token: Token, gas_token: Token, amount: str, oracle_update_data: list[str]
    ) -> None: ...

    async def open_perp_order(
        self, base_token: Token, gas_token: Token, amount: str, price: str, update_data: list[str]
    ) -> str: ...

    async def remove_perp_order(self, order_id: str) -> None: ...

    async def fulfill_perp_order(
        self, gas_token: Token, order_id: str, amount: str, update_data: list[str]
    ) -> None: ...

    # Queries
    async def fetch_spot_markets(self, limit: int) -> list[MarketCreateEvent]: ...

    async def fetch_spot_market_price(self, base_token_address: str) -> Decimal: ...

    async def fetch_spot_orders(self, params: FetchOrdersParams) -> list[Any]: ...

    async def fetch_spot_trades(self, params: FetchTradesParams) -> list[Any]: ...

    async def fetch_spot_volume(self) -> SpotMarketVolume: ...

    async def fetch_perp_collateral_balance(self, account_address: str, asset_id: str) -> Decimal: ...

    async def fetch_perp_all_trader_positions(self, account_address: str) -> list[Any]: ...

    async def fetch_perp_is_allowed_collateral(self, asset_id: str) -> bool: ...

    async def fetch_perp_trader_orders(self, account_address: str, asset_id: str) -> list[Any]: ...

    async def fetch_perp_all_markets(self) -> list[Any]: ...

    async def fetch_perp_funding_rate(self, asset_id: str) -> Decimal: ...

    async def fetch_perp_max_abs_position_size(
        self, account_address: str, asset_id: str
    ) -> PerpMaxAbsPositionSize: ...

    async def fetch_perp_pending_funding_payment(
        self, account_address: str, asset_id: str
    ) -> PerpPendingFundingPayment: ...

    async def fetch_perp_mark_price(self, asset_id: str) -> Decimal: ...
