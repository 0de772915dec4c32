"""
User records module interface.

The auth module depends on IUserRecordStore, not a concrete implementation.
Any persistence layer that honours this contract can be injected.
"""

from typing import Any, Protocol, runtime_checkable

from shared.models import ServiceResponse


@runtime_checkable
class IUserRecordStore(Protocol):
    """
    Interface for local user record persistence.

    Both operations report their outcome through a ServiceResponse
    instead of raising.
    """

    async def fetch_by_external_id(
        self,
        correlation_id: str,
        external_id: str,
    ) -> ServiceResponse:
        """
        Look up a local user by external identity id.

        Args:
            correlation_id: Tracing token for log correlation
            external_id: Firebase uid

        Returns:
            ServiceResponse whose results is the LocalUserRecord,
            or None when no record exists
        """
        ...

    async def update(
        self,
        correlation_id: str,
        partial: dict[str, Any],
    ) -> ServiceResponse:
        """
        Create or update a local user record.

        Args:
            correlation_id: Tracing token for log correlation
            partial: Fields to write; must contain "id"

        Returns:
            ServiceResponse whose results is the stored LocalUserRecord
        """
        ...
