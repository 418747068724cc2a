"""
Fuel network constants.

Contract addresses, endpoints and token metadata of the Spark deployment on
the Fuel beta-5 network.
"""

from pathlib import Path

from spark_client.config.constants import (
    DEFAULT_EXPLORER_URL,
    DEFAULT_INDEXER_URL,
    DEFAULT_NETWORK_NAME,
    DEFAULT_NETWORK_URL,
)
from spark_client.models.network import NetworkDescriptor


CONTRACT_ADDRESSES: dict[str, str] = {
    "spotMarket": "0x7134802bdefd097f1c9d8ad86ef27081ae609b84de0afc87b58bd4e04afc6a23",
    "tokenFactory": "0x6bd9643c9279204b474a778dea7f923226060cb94a4c61c5aae015cf96b5aad2",
    "vault": "0xe8beef1c4c94e8732b89c5e783c80e9fb7f80fd43ad0c594ba380e4b5556106a",
    "accountBalance": "0xa842702d600b43a3c7be0e36a0e08452b3d6fc36f0d4015fb6a06cb056cd312d",
    "clearingHouse": "0xa4801149d4faa6e8421f130708bcd228780353241e2b35697e4e08d0b3672b20",
    "perpMarket": "0xd628033650475290e0e8696266d0a0318364ff9c980f9ee5f4a4bb56ee85664a",
    "pyth": "0x3cd5005f23321c8ae0ccfa98fb07d9a5ff325c483f21d2d9540d6897007600c9",
    "proxy": "0x24c43c6cb3f0898ab46142fefa94a77414d7a6bb2619c41cd8725b161ac50c9d",
}

NETWORKS: tuple[NetworkDescriptor, ...] = (
    NetworkDescriptor(name=DEFAULT_NETWORK_NAME, url=DEFAULT_NETWORK_URL),
)

INDEXER_URL = DEFAULT_INDEXER_URL
EXPLORER_URL = DEFAULT_EXPLORER_URL

TOKENS_FILE = Path(__file__).with_name("tokens.json")

TOKEN_LOGOS: dict[str, str] = {
    "ETH": "assets/tokens/eth.svg",
    "USDC": "assets/tokens/usdc.svg",
    "BTC": "assets/tokens/btc.svg",
    "UNI": "assets/tokens/uni.svg",
}
