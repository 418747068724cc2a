"""
Token registry.

Builds read-only lookup tables (by symbol and by asset id) from static token
metadata. Asset ids are matched case-insensitively.
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from loguru import logger

from spark_client.models.token import Token
from spark_client.utils.exceptions import TokenNotFoundError


class TokenRegistry:
    """
    Immutable token lookup tables.

    Exposes:
    - Ordered list of all tokens
    - Mapping symbol -> Token
    - Mapping lowercase(asset_id) -> Token
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        """
        Build registry.

        Args:
            tokens: Tokens in display order

        Raises:
            ValueError: If a symbol or asset id appears twice
        """
        token_list = tuple(tokens)
        by_symbol: dict[str, Token] = {}
        by_asset_id: dict[str, Token] = {}

        for token in token_list:
            asset_key = token.asset_id.lower()
            if token.symbol in by_symbol:
                raise ValueError(f"Duplicate token symbol: {token.symbol}")
            if asset_key in by_asset_id:
                raise ValueError(f"Duplicate token asset id: {token.asset_id}")
            by_symbol[token.symbol] = token
            by_asset_id[asset_key] = token

        self._tokens = token_list
        self._by_symbol = MappingProxyType(by_symbol)
        self._by_asset_id = MappingProxyType(by_asset_id)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        logos: Mapping[str, str] | None = None,
    ) -> "TokenRegistry":
        """
        Build registry from raw token records.

        Args:
            records: Dicts with name, symbol, decimals, assetId, priceFeed
            logos: Optional symbol -> logo reference table

        Returns:
            TokenRegistry instance
        """
        logos = logos or {}
        tokens = [
            Token(
                name=record["name"],
                symbol=record["symbol"],
                decimals=int(record["decimals"]),
                asset_id=record["assetId"],
                logo=logos.get(record["symbol"]),
                price_feed=record.get("priceFeed"),
            )
            for record in records
        ]
        return cls(tokens)

    @classmethod
    def from_json(
        cls,
        path: Path,
        logos: Mapping[str, str] | None = None,
    ) -> "TokenRegistry":
        """
        Load registry from a token metadata JSON file.

        The file holds either a list of records or an object keyed by symbol.
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        records = data.values() if isinstance(data, dict) else data
        registry = cls.from_records(records, logos)
        logger.debug(f"Loaded {len(registry)} tokens from {path}")
        return registry

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All tokens in registry order."""
        return self._tokens

    @property
    def by_symbol(self) -> Mapping[str, Token]:
        """Read-only symbol -> Token mapping."""
        return self._by_symbol

    @property
    def by_asset_id(self) -> Mapping[str, Token]:
        """Read-only lowercase asset id -> Token mapping."""
        return self._by_asset_id

    def get_by_symbol(self, symbol: str) -> Token:
        """
        Get token by symbol.

        Raises:
            TokenNotFoundError: If no token has this symbol
        """
        try:
            return self._by_symbol[symbol]
        except KeyError:
            raise TokenNotFoundError(f"Unknown token symbol: {symbol}") from None

    def get_by_asset_id(self, asset_id: str) -> Token:
        """
        Get token by asset id (case-insensitive).

        Raises:
            TokenNotFoundError: If no token has this asset id
        """
        try:
            return self._by_asset_id[asset_id.lower()]
        except KeyError:
            raise TokenNotFoundError(f"Unknown token asset id: {asset_id}") from None
