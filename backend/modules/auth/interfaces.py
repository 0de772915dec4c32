"""
Authentication module interface.

Other modules should depend on IIdentityAdminService, not the concrete implementation.
This enables testing with mocks and swapping the identity platform later.
"""

from typing import Any, Optional, Protocol, Union, runtime_checkable

from shared.models import ServiceResponse

from .models import ExternalIdentity, VerificationResult


@runtime_checkable
class IIdentityAdminService(Protocol):
    """
    Interface for identity administration operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def delete_user(
        self,
        correlation_id: str,
        user_id: str,
    ) -> ServiceResponse:
        """
        Delete a user from the identity platform.

        Args:
            correlation_id: Tracing token for log correlation
            user_id: External identity id

        Returns:
            Success envelope (results="user-not-found" if the user did not
            exist), or an error envelope on failure
        """
        ...

    async def get_user(
        self,
        correlation_id: str,
        user_id: str,
    ) -> Optional[ExternalIdentity]:
        """
        Get a user's identity by external id.

        Args:
            correlation_id: Tracing token for log correlation
            user_id: External identity id

        Returns:
            ExternalIdentity if found, None otherwise
        """
        ...

    async def set_claims(
        self,
        correlation_id: str,
        user_id: str,
        claims: Optional[dict[str, Any]],
        replace: bool = False,
    ) -> ServiceResponse:
        """
        Set custom claims on a user.

        Claims take effect on the next ID token issued for the user.

        Args:
            correlation_id: Tracing token for log correlation
            user_id: External identity id
            claims: Claims to write
            replace: Replace all claims instead of merging into existing ones

        Returns:
            Success or error envelope
        """
        ...

    async def verify_token(
        self,
        correlation_id: str,
        token: str,
    ) -> Union[VerificationResult, ServiceResponse, None]:
        """
        Verify an ID token and resolve the matching local user.

        Args:
            correlation_id: Tracing token for log correlation
            token: ID token issued by the identity platform

        Returns:
            VerificationResult, a failed store envelope when reconciliation
            failures are propagated, or None on verification failure

        Raises:
            TokenExpiredError: If the token has expired
        """
        ...
