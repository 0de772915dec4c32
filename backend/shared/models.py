"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ServiceResponse(BaseModel):
    """
    Uniform result envelope returned by service operations.

    Every public operation that reports an outcome returns one of these
    rather than raising, so callers can branch on ``success`` alone.
    """

    success: bool = Field(default=True, description="Whether the operation succeeded")
    results: Any = Field(None, description="Operation payload, if any")
    error_code: Optional[str] = Field(None, description="Machine-readable failure code")
