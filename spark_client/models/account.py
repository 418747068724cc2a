"""
Account snapshot model.

Durable projection of a wallet session used to restore it across restarts.
The persisted shape is ``{"privateKey": ..., "address": ...}`` with ``None``
marking an absent value.
"""

from dataclasses import dataclass
from typing import Any

from spark_client.utils.security import mask_private_key


@dataclass(frozen=True)
class AccountSnapshot:
    """Serialized account state."""

    private_key: str | None = None
    address: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to restore."""
        return not self.private_key and not self.address

    def to_dict(self) -> dict[str, str | None]:
        """Persistence form (privateKey / address keys)."""
        return {
            "privateKey": self.private_key,
            "address": self.address,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "AccountSnapshot":
        """
        Build snapshot from its persistence form.

        Empty strings are treated as absent values.
        """
        if not data:
            return cls()
        return cls(
            private_key=data.get("privateKey") or None,
            address=data.get("address") or None,
        )

    def __repr__(self) -> str:
        key = mask_private_key(self.private_key) if self.private_key else None
        return f"AccountSnapshot(private_key={key!r}, address={self.address!r})"
