"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for tests: no .env lookups leaking into Settings()
os.environ.setdefault("SPARK_ENVIRONMENT", "test")
os.environ.setdefault("SPARK_LOG_LEVEL", "DEBUG")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from unittest.mock import AsyncMock, MagicMock

import pytest

from spark_client.models.token import Token
from spark_client.services.blockchain.token_registry import TokenRegistry


SDK_ASYNC_METHODS = (
    "get_provider",
    "create_spot_order",
    "cancel_spot_order",
    "mint_token",
    "approve",
    "allowance",
    "deposit_perp_collateral",
    "withdraw_perp_collateral",
    "open_perp_order",
    "remove_perp_order",
    "fulfill_perp_order",
    "fetch_spot_markets",
    "fetch_spot_market_price",
    "fetch_spot_orders",
    "fetch_spot_trades",
    "fetch_spot_volume",
    "fetch_perp_collateral_balance",
    "fetch_perp_all_trader_positions",
    "fetch_perp_is_allowed_collateral",
    "fetch_perp_trader_orders",
    "fetch_perp_all_markets",
    "fetch_perp_funding_rate",
    "fetch_perp_max_abs_position_size",
    "fetch_perp_pending_funding_payment",
    "fetch_perp_mark_price",
)


@pytest.fixture
def eth_token():
    """ETH token with 9 decimals."""
    return Token(
        name="Ethereum",
        symbol="ETH",
        decimals=9,
        asset_id="0x0000000000000000000000000000000000000000000000000000000000000000",
        logo="assets/tokens/eth.svg",
    )


@pytest.fixture
def usdc_token():
    """USDC token with 6 decimals and a short lowercase asset id."""
    return Token(name="USDC", symbol="USDC", decimals=6, asset_id="0xabc")


@pytest.fixture
def btc_token():
    """BTC token stored with a mixed-case asset id."""
    return Token(name="Bitcoin", symbol="BTC", decimals=8, asset_id="0xDeF0123")


@pytest.fixture
def token_registry(eth_token, usdc_token, btc_token):
    """Registry with ETH, USDC and BTC."""
    return TokenRegistry([eth_token, usdc_token, btc_token])


@pytest.fixture
def sample_private_key():
    """Valid secp256k1 private key."""
    return "0x" + "11" * 32


@pytest.fixture
def sample_wallet_address():
    """Sample Fuel wallet address."""
    return "0x" + "ab" * 32


@pytest.fixture
def mock_provider():
    """Mock SDK provider context."""
    provider = MagicMock()
    provider.get_balance = AsyncMock(return_value=1500000000)
    return provider


@pytest.fixture
def mock_sdk(mock_provider):
    """Mock Spark SDK client."""
    sdk = MagicMock()
    sdk.set_active_wallet = MagicMock()
    for name in SDK_ASYNC_METHODS:
        setattr(sdk, name, AsyncMock())
    sdk.get_provider.return_value = mock_provider
    sdk.create_spot_order.return_value = "spot-order-1"
    sdk.open_perp_order.return_value = "perp-order-1"
    sdk.allowance.return_value = "1000"
    return sdk


@pytest.fixture
def mock_connector(sample_wallet_address):
    """Mock wallet extension connector."""
    connector = MagicMock()
    connector.connect = AsyncMock(return_value=sample_wallet_address)
    connector.disconnect = AsyncMock()
    connector.get_balance = AsyncMock(return_value="42")
    connector.add_asset = AsyncMock()
    return connector
