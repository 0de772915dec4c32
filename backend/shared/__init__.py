"""
Shared infrastructure for Identity Bridge backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- credentials: Service-account credential sources
- firebase: Firebase Admin app factory
- exceptions: Base exception classes
- models / service: Result envelope and base service

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .credentials import (
    ICredentialSource,
    EnvironmentCredentialSource,
    ConfigCredentialSource,
    FileCredentialSource,
    load_service_account,
)
from .exceptions import (
    BridgeError,
    AuthenticationError,
    ConfigurationError,
    CredentialLoadError,
)
from .models import ServiceResponse
from .service import BaseService

__all__ = [
    "Settings",
    "get_settings",
    "ICredentialSource",
    "EnvironmentCredentialSource",
    "ConfigCredentialSource",
    "FileCredentialSource",
    "load_service_account",
    "BridgeError",
    "AuthenticationError",
    "ConfigurationError",
    "CredentialLoadError",
    "ServiceResponse",
    "BaseService",
]
