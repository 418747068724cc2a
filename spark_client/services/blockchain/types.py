"""
Shared blockchain types.

Network discriminator plus the request and result records exchanged with the
trading SDK.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum


class NetworkType(StrEnum):
    """Discriminator tag of a supported network."""

    FUEL = "fuel"


class OrderType(StrEnum):
    """Spot order side."""

    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class FetchOrdersParams:
    """Filter for spot order queries."""

    base_token: str
    limit: int
    trader: str | None = None
    order_type: OrderType | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class FetchTradesParams:
    """Filter for spot trade queries."""

    base_token: str
    limit: int
    trader: str | None = None


@dataclass(frozen=True)
class MarketCreateEvent:
    """Spot market creation record from the indexer."""

    id: str
    asset_id: str


@dataclass(frozen=True)
class SpotMarketVolume:
    """24h spot market statistics."""

    low: Decimal
    high: Decimal
    volume: Decimal


@dataclass(frozen=True)
class PerpMaxAbsPositionSize:
    """Largest position a trader may open in each direction."""

    short_size: Decimal
    long_size: Decimal


@dataclass(frozen=True)
class PerpPendingFundingPayment:
    """Funding owed by or to a trader."""

    funding_payment: Decimal
    funding_growth_payment: Decimal
