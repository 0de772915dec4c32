"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

from modules.users.models import LocalUserRecord


class ExternalIdentity(BaseModel):
    """
    Reduced view of a user managed by the external identity platform.

    Custom claims are intentionally not part of this shape.
    """

    id: str = Field(..., description="External identity id (Firebase uid)")
    name: Optional[str] = Field(None, description="Display name")
    picture: Optional[str] = Field(None, description="Photo URL")
    email: Optional[str] = Field(None, description="Email address")

    model_config = {"frozen": True}

    @classmethod
    def from_user_record(cls, record: Any) -> Optional["ExternalIdentity"]:
        """Map a firebase_admin.auth.UserRecord (or lookalike) to this shape."""
        if record is None:
            return None
        return cls(
            id=record.uid,
            name=record.display_name,
            picture=record.photo_url,
            email=record.email,
        )


class VerificationResult(BaseModel):
    """
    Outcome of an ID token verification.

    Built fresh for each call; success is only set once a local
    user record has been resolved.
    """

    user: Optional[LocalUserRecord] = Field(None, description="Resolved local user")
    claims: Optional[dict[str, Any]] = Field(None, description="Claims for the user")
    success: bool = Field(default=False, description="Whether a user was resolved")
