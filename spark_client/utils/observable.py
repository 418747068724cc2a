"""
Change subscription mixin.

Stores and managers that own mutable state inherit from Observable and call
``_emit_change(field)`` after every mutation. Subscribers receive the owner
and the name of the field that changed.
"""

from collections.abc import Callable
from typing import Any

from loguru import logger


ChangeCallback = Callable[[Any, str], None]


class Observable:
    """Mixin providing an observer list for state changes."""

    def __init__(self) -> None:
        self._subscribers: list[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """
        Register a change callback.

        Args:
            callback: Called as ``callback(owner, field_name)``

        Returns:
            Function that removes the subscription when called
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _emit_change(self, field: str) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self, field)
            except Exception as e:
                # Isolate subscriber failures
                logger.exception(
                    f"{self.__class__.__name__} subscriber failed on '{field}' change: {e}"
                )
