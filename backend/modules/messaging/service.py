"""
Push notification service implementation.

Sends data messages to a single device registration token through
Firebase Cloud Messaging.
"""

import asyncio
import logging
from typing import Any, Optional

import firebase_admin
from firebase_admin import messaging

from shared.config import Settings
from shared.service import BaseService

from .interfaces import IPushNotificationService

logger = logging.getLogger(__name__)


class PushNotificationService(BaseService):
    """
    Fire-and-forget push notification sender.

    The registration token is set once at construction (or from
    messaging.registration_token) and read on every send.
    """

    def __init__(
        self,
        app: firebase_admin.App,
        registration_token: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        super().__init__(settings)
        self._app = app
        self.registration_token = (
            registration_token or self._settings.messaging.registration_token
        )

    async def set_message(
        self,
        correlation_id: str,
        data: Optional[dict[str, Any]],
    ) -> None:
        """Send ``data`` to the registration token; never raises."""
        try:
            message = messaging.Message(data=data, token=self.registration_token)
            response = await asyncio.to_thread(messaging.send, message, app=self._app)
            logger.debug(f"Successfully sent message {response} (correlation_id={correlation_id})")
        except Exception:
            logger.exception(f"Failed to send message (correlation_id={correlation_id})")

        return None


# Verify the implementation satisfies the interface
def _verify_interface(app: firebase_admin.App):
    """Type check that PushNotificationService implements IPushNotificationService."""
    service: IPushNotificationService = PushNotificationService(app)
    return service
