"""
Authentication module.

Handles identity administration against the external identity platform:
user lookup and deletion, custom claims, and ID token verification.

Public API:
- IIdentityAdminService: Interface for identity admin operations
- ExternalIdentity: Reduced external user shape
- VerificationResult: Outcome of token verification
- IDefaultClaimsProvider / StaticDefaultClaims: Default claims strategy
- TokenExpiredError: Raised when an ID token has expired
"""

from .interfaces import IIdentityAdminService
from .models import ExternalIdentity, VerificationResult
from .claims import IDefaultClaimsProvider, StaticDefaultClaims
from .exceptions import TokenExpiredError

__all__ = [
    # Interface
    "IIdentityAdminService",
    # Models
    "ExternalIdentity",
    "VerificationResult",
    # Strategies
    "IDefaultClaimsProvider",
    "StaticDefaultClaims",
    # Exceptions
    "TokenExpiredError",
]
