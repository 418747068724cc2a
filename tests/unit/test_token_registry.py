"""
Unit tests for the token registry.

Tests cover:
- Lookup by symbol and case-insensitive asset id
- Explicit TokenNotFoundError for unknown keys
- Duplicate detection and immutability
- Loading the bundled Fuel token metadata
"""

import json

import pytest

from spark_client.models.token import Token
from spark_client.services.blockchain.fuel import default_token_registry
from spark_client.services.blockchain.fuel.constants import TOKEN_LOGOS
from spark_client.services.blockchain.token_registry import TokenRegistry
from spark_client.utils.exceptions import NetworkErrorCode, TokenNotFoundError


class TestTokenLookup:
    """Test lookups on a populated registry."""

    def test_every_token_resolves_by_symbol(self, token_registry):
        """Every token is returned by its own symbol."""
        for token in token_registry.tokens:
            assert token_registry.get_by_symbol(token.symbol) == token

    def test_every_token_resolves_by_any_asset_id_casing(self, token_registry):
        """Asset id lookups ignore case."""
        for token in token_registry.tokens:
            assert token_registry.get_by_asset_id(token.asset_id.lower()) == token
            assert token_registry.get_by_asset_id(token.asset_id.upper()) == token
            assert token_registry.get_by_asset_id(token.asset_id) == token

    def test_usdc_decimals(self, token_registry):
        """USDC keeps its 6 decimals."""
        assert token_registry.get_by_symbol("USDC").decimals == 6

    def test_uppercase_asset_id_matches_lowercase_stored(self, token_registry, usdc_token):
        """0xABC resolves the token stored as 0xabc."""
        assert token_registry.get_by_asset_id("0xABC") is usdc_token

    def test_mixed_case_stored_id_indexed_lowercase(self, token_registry, btc_token):
        """Stored mixed-case ids are indexed lowercase."""
        assert "0xdef0123" in token_registry.by_asset_id
        assert token_registry.get_by_asset_id("0xdef0123") is btc_token

    def test_order_preserved(self, token_registry):
        """Token list keeps input order."""
        assert [t.symbol for t in token_registry] == ["ETH", "USDC", "BTC"]
        assert len(token_registry) == 3
        assert "ETH" in token_registry


class TestTokenNotFound:
    """Test lookups for absent keys."""

    def test_unknown_symbol(self, token_registry):
        """Unknown symbol raises TokenNotFoundError."""
        with pytest.raises(TokenNotFoundError) as exc_info:
            token_registry.get_by_symbol("DOGE")
        assert exc_info.value.code is NetworkErrorCode.NOT_FOUND

    @pytest.mark.parametrize("asset_id", ["0xabd", "0x", "", "0x" + "f" * 64])
    def test_unknown_asset_id(self, token_registry, asset_id):
        """Unknown asset id raises TokenNotFoundError instead of returning None."""
        with pytest.raises(TokenNotFoundError):
            token_registry.get_by_asset_id(asset_id)

    def test_symbol_lookup_is_case_sensitive(self, token_registry):
        """Symbols are exact keys."""
        with pytest.raises(TokenNotFoundError):
            token_registry.get_by_symbol("usdc")

    def test_not_found_is_lookup_error(self, token_registry):
        """Callers catching LookupError also catch TokenNotFoundError."""
        with pytest.raises(LookupError):
            token_registry.get_by_symbol("DOGE")


class TestRegistryConstruction:
    """Test building the registry."""

    def test_duplicate_symbol_rejected(self):
        """Two tokens with the same symbol are rejected."""
        tokens = [
            Token(name="A", symbol="AAA", decimals=1, asset_id="0x01"),
            Token(name="B", symbol="AAA", decimals=1, asset_id="0x02"),
        ]
        with pytest.raises(ValueError, match="symbol"):
            TokenRegistry(tokens)

    def test_duplicate_asset_id_differing_case_rejected(self):
        """Asset ids differing only in case are duplicates."""
        tokens = [
            Token(name="A", symbol="AAA", decimals=1, asset_id="0xab"),
            Token(name="B", symbol="BBB", decimals=1, asset_id="0xAB"),
        ]
        with pytest.raises(ValueError, match="asset id"):
            TokenRegistry(tokens)

    def test_mappings_are_read_only(self, token_registry, eth_token):
        """Lookup tables cannot be mutated."""
        with pytest.raises(TypeError):
            token_registry.by_symbol["NEW"] = eth_token  # type: ignore[index]

    def test_from_records_attaches_logos(self):
        """Raw records become tokens with logo and price feed."""
        registry = TokenRegistry.from_records(
            [{"name": "Ethereum", "symbol": "ETH", "decimals": 9,
              "assetId": "0x00", "priceFeed": "0xfeed"}],
            logos={"ETH": "eth.svg"},
        )
        token = registry.get_by_symbol("ETH")
        assert token.logo == "eth.svg"
        assert token.price_feed == "0xfeed"

    def test_from_json_accepts_list(self, tmp_path):
        """JSON file holding a list of records loads."""
        path = tmp_path / "tokens.json"
        path.write_text(json.dumps([
            {"name": "USDC", "symbol": "USDC", "decimals": 6, "assetId": "0xabc"},
        ]))
        registry = TokenRegistry.from_json(path)
        assert registry.get_by_asset_id("0xABC").symbol == "USDC"


class TestBundledFuelTokens:
    """Test the bundled Fuel token metadata."""

    def test_default_registry_loads(self):
        """Bundled metadata contains ETH and USDC with logos."""
        registry = default_token_registry()
        assert registry.get_by_symbol("ETH").decimals == 9
        assert registry.get_by_symbol("USDC").decimals == 6
        for token in registry:
            assert token.logo == TOKEN_LOGOS[token.symbol]

    def test_default_registry_built_once(self):
        """Registry is a process-wide instance."""
        assert default_token_registry() is default_token_registry()

