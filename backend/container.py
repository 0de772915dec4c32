"""
Dependency injection setup.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The Firebase app is created once per container and handed to every
adapter explicitly; nothing relies on the SDK's global default app.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    import firebase_admin
    from modules.auth.claims import IDefaultClaimsProvider
    from modules.auth.interfaces import IIdentityAdminService
    from modules.messaging.interfaces import IPushNotificationService
    from modules.users.interfaces import IUserRecordStore


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    The user store and default claims provider can be supplied up front;
    otherwise the in-memory store and an empty default claims set are used.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        user_store: "IUserRecordStore | None" = None,
        default_claims: "IDefaultClaimsProvider | None" = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._user_store = user_store
        self._injected_user_store = user_store
        self._default_claims = default_claims
        self._firebase_app: "firebase_admin.App | None" = None
        self._identity_service: "IIdentityAdminService | None" = None
        self._messaging_service: "IPushNotificationService | None" = None

    @property
    def firebase_app(self) -> "firebase_admin.App":
        """Get the Firebase app, loading credentials on first access."""
        if self._firebase_app is None:
            from shared.firebase import create_firebase_app
            self._firebase_app = create_firebase_app(self._settings)
        return self._firebase_app

    @property
    def users(self) -> "IUserRecordStore":
        """Get the user record store."""
        if self._user_store is None:
            from modules.users.service import InMemoryUserRecordStore
            self._user_store = InMemoryUserRecordStore(self._settings)
        return self._user_store

    @property
    def identity(self) -> "IIdentityAdminService":
        """Get the identity admin service instance."""
        if self._identity_service is None:
            from modules.auth.service import IdentityAdminService
            self._identity_service = IdentityAdminService(
                app=self.firebase_app,
                user_store=self.users,
                default_claims=self._default_claims,
                settings=self._settings,
            )
        return self._identity_service

    @property
    def messaging(self) -> "IPushNotificationService":
        """Get the push notification service instance."""
        if self._messaging_service is None:
            from modules.messaging.service import PushNotificationService
            self._messaging_service = PushNotificationService(
                app=self.firebase_app,
                settings=self._settings,
            )
        return self._messaging_service

    def reset(self) -> None:
        """
        Reset all cached services and tear down the Firebase app.

        An injected user store is kept; a store the container created
        itself is dropped along with the services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        if self._firebase_app is not None:
            from shared.firebase import delete_firebase_app
            delete_firebase_app(self._firebase_app)
        self._firebase_app = None
        self._identity_service = None
        self._messaging_service = None
        self._user_store = self._injected_user_store


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    if _container is not None:
        _container.reset()
    _container = None
