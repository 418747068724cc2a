"""
Network descriptor model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkDescriptor:
    """RPC endpoint identifying one network."""

    name: str
    url: str
