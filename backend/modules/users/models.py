"""
User records module data models.

These models define the local representation of users that have
authenticated through the external identity platform.
"""

from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LocalUserRecord(BaseModel):
    """
    Local user record keyed by the external identity id.

    Created on first successful token verification if absent.
    """

    id: str = Field(..., description="External identity id (Firebase uid)")
    claims: Optional[dict[str, Any]] = Field(None, description="Custom claims, if any")
    created_at: datetime = Field(default_factory=_utcnow, description="Record creation time")
    updated_at: datetime = Field(default_factory=_utcnow, description="Last update time")
