"""
Fuel network adapter.
"""

from .network import FuelNetwork, default_token_registry, load_token_registry
from .sdk import SparkSDK


__all__ = [
    "FuelNetwork",
    "SparkSDK",
    "default_token_registry",
    "load_token_registry",
]
