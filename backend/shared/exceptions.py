"""
Base exception classes for the Identity Bridge backend.

Each module should define its own exceptions that inherit from these bases.
"""

from typing import Optional, Any


class BridgeError(Exception):
    """
    Base exception for all Identity Bridge errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class AuthenticationError(BridgeError):
    """Authentication failed (invalid, expired or missing credentials)."""

    pass


class ConfigurationError(BridgeError):
    """The process is misconfigured and cannot start."""

    pass


class CredentialLoadError(ConfigurationError):
    """Raised when no credential source yields a usable service account."""

    def __init__(self, sources: list[str]):
        super().__init__(
            "No valid service account credential found. "
            "Set SERVICE_ACCOUNT_KEY or provide a credentials file.",
            code="CREDENTIAL_LOAD_FAILED",
            details={"sources": sources},
        )
