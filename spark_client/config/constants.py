"""
Application constants.

Centralized constants for the application.
"""

from decimal import Decimal

# ========================================================================
# NETWORK DEFAULTS
# ========================================================================

DEFAULT_NETWORK_TYPE = "fuel"
DEFAULT_NETWORK_NAME = "Fuel"
DEFAULT_NETWORK_URL = "https://beta-5.fuel.network/graphql"
DEFAULT_INDEXER_URL = "https://orderbook-indexer.spark-defi.com"
DEFAULT_EXPLORER_URL = "https://app.fuel.network/"

# ========================================================================
# TRADING CONSTANTS
# ========================================================================

# Spot markets are quoted in USDC
QUOTE_TOKEN_SYMBOL = "USDC"

# Perp operations pay gas in ETH
GAS_TOKEN_SYMBOL = "ETH"

# Amount minted per faucet request, in whole tokens
FAUCET_AMOUNTS: dict[str, Decimal] = {
    "ETH": Decimal("0.001"),
    "USDC": Decimal("3000"),
    "BTC": Decimal("0.01"),
    "UNI": Decimal("50"),
}

# ========================================================================
# USER NOTICES
# ========================================================================

NOTICE_AUTHORIZE_ACCOUNT = "Please authorize the wallet account when connecting."
NOTICE_UNEXPECTED_ERROR = "Unexpected error. Please try again."
