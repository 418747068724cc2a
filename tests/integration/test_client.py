"""Integration tests for client composition."""

from unittest.mock import MagicMock

import pytest
from loguru import logger

from spark_client.config.settings import Settings
from spark_client.initialization import client as client_module
from spark_client.initialization.client import get_client, init_client
from spark_client.initialization.logging import setup_logging
from spark_client.models.account import AccountSnapshot
from spark_client.services.blockchain.fuel import FuelNetwork
from spark_client.services.blockchain.fuel.constants import CONTRACT_ADDRESSES
from spark_client.services.blockchain.wallet_operations import derive_address
from spark_client.stores.account_store import AccountState


@pytest.fixture
def settings():
    """Settings isolated from .env files."""
    return Settings(_env_file=None, log_file=None, provider_timeout=5)


@pytest.fixture
def sdk_factory(mock_sdk):
    """Factory returning the mocked SDK."""
    return MagicMock(return_value=mock_sdk)


@pytest.fixture(autouse=True)
def reset_client(monkeypatch):
    """Each test starts without a singleton client."""
    monkeypatch.setattr(client_module, "_client", None)


class TestClientInitialization:
    """Test wiring of settings, adapters and stores."""

    def test_get_client_before_init(self):
        """Accessing the client before init fails loudly."""
        with pytest.raises(RuntimeError):
            get_client()

    @pytest.mark.asyncio
    async def test_init_without_snapshot(self, settings, sdk_factory, mock_connector):
        """Fresh client is ready and disconnected on Fuel."""
        spark = await init_client(settings, sdk_factory, mock_connector)

        assert get_client() is spark
        assert spark.account_store.state is AccountState.READY
        assert spark.account_store.is_connected is False

        network = spark.blockchain_store.current_instance
        assert isinstance(network, FuelNetwork)
        assert network.wallet_manager.provider_timeout == 5
        sdk_factory.assert_called_once_with(
            network_url=settings.network_url,
            contract_addresses=CONTRACT_ADDRESSES,
            indexer_api_url=settings.indexer_url,
        )

    @pytest.mark.asyncio
    async def test_snapshot_round_trip(self, settings, sdk_factory, sample_private_key):
        """Persisted key session survives a client restart."""
        first = await init_client(settings, sdk_factory)
        await first.account_store.connect_wallet_by_private_key(sample_private_key)
        persisted = first.account_store.serialize().to_dict()

        second = await init_client(settings, sdk_factory, snapshot=AccountSnapshot.from_dict(persisted))

        assert second.account_store.address == derive_address(sample_private_key)
        assert get_client() is second

    @pytest.mark.asyncio
    async def test_trading_through_client(self, settings, sdk_factory, mock_sdk, sample_private_key):
        """Connected client routes trading calls to the SDK."""
        spark = await init_client(settings, sdk_factory, snapshot=AccountSnapshot(private_key=sample_private_key))
        network = spark.blockchain_store.current_instance

        order_id = await network.create_spot_order(
            network.get_token_by_symbol("BTC").asset_id, "1", "60000"
        )

        assert order_id == "spot-order-1"
        mock_sdk.set_active_wallet.assert_called()


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_with_file(self, tmp_path):
        """File sink is created when a log file is configured."""
        log_file = tmp_path / "spark.log"

        setup_logging(Settings(_env_file=None, log_file=str(log_file)))

        assert log_file.exists()
        logger.remove()
