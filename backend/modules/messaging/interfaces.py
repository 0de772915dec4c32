"""
Messaging module interface.

Other modules should depend on IPushNotificationService, not the concrete
implementation.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class IPushNotificationService(Protocol):
    """Interface for push notification dispatch."""

    async def set_message(
        self,
        correlation_id: str,
        data: Optional[dict[str, Any]],
    ) -> None:
        """
        Send a data message to the configured device.

        Fire-and-forget: transport failures are logged, never raised.

        Args:
            correlation_id: Tracing token for log correlation
            data: Opaque message payload
        """
        ...
