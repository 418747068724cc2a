"""
Notification service module.

Usage:
    from spark_client.services.notification import NotificationService, Severity

    notifications = NotificationService()
    notifications.subscribe(render_toast)
    notifications.toast("Order placed", Severity.INFO)
"""

from spark_client.services.notification.core import (
    Notification,
    NotificationService,
    Severity,
)


__all__ = ["Notification", "NotificationService", "Severity"]
