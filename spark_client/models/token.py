"""
Token model.

Immutable description of a tradable asset on a network.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """Token metadata loaded once from static configuration."""

    name: str
    symbol: str
    decimals: int
    asset_id: str
    logo: str | None = None
    price_feed: str | None = None
