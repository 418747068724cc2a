"""
Core notification service.

Fire-and-forget sink for user-facing notices. Every notice is logged, kept in
a bounded history and fanned out to subscribers (e.g. a UI toast renderer).
"""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from loguru import logger


class Severity(StrEnum):
    """Notice severity."""

    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Single user-facing notice."""

    message: str
    severity: Severity
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


NotificationHandler = Callable[[Notification], None]


class NotificationService:
    """Notification sink with subscriber fan-out."""

    def __init__(self, history_size: int = 50) -> None:
        """
        Initialize notification service.

        Args:
            history_size: Number of recent notices kept
        """
        self._handlers: list[NotificationHandler] = []
        self.history: deque[Notification] = deque(maxlen=history_size)

    def subscribe(self, handler: NotificationHandler) -> Callable[[], None]:
        """
        Register a notice handler.

        Returns:
            Function removing the handler
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def toast(self, message: str, severity: Severity | str = Severity.INFO) -> None:
        """
        Publish a notice.

        Args:
            message: Text shown to the user
            severity: info or error
        """
        notification = Notification(message=str(message), severity=Severity(severity))
        self.history.append(notification)

        if notification.severity is Severity.ERROR:
            logger.warning(f"Notice [error]: {notification.message}")
        else:
            logger.info(f"Notice [info]: {notification.message}")

        for handler in list(self._handlers):
            try:
                handler(notification)
            except Exception as e:
                logger.exception(f"Notification handler failed: {e}")
