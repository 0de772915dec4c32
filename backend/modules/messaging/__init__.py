"""
Messaging module.

Dispatches push notifications to a device through the external messaging
platform.

Public API:
- IPushNotificationService: Interface for push notification dispatch
"""

from .interfaces import IPushNotificationService

__all__ = [
    "IPushNotificationService",
]
