"""
Base service class for adapters over external platforms.

Provides a common layer for all services: access to settings and the
standard success/error result envelope.
"""

from typing import Any, Optional

from .config import Settings, get_settings
from .models import ServiceResponse


GENERIC_ERROR = "ERROR"


class BaseService:
    """
    Base class for all services.

    Provides common functionality:
    - Settings access via self._settings
    - Result envelope helpers (_success, _error, _init_response)

    Subclasses log through their own module-level logger.

    Example:
        class IdentityAdminService(BaseService):
            async def set_claims(self, correlation_id, user_id, claims, replace=False):
                if not user_id:
                    return self._error()
                ...
                return self._init_response()
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """
        Initialize the service.

        Args:
            settings: Settings instance. Defaults to the cached process settings.
        """
        self._settings = settings or get_settings()

    def _init_response(self) -> ServiceResponse:
        """Create an empty successful envelope."""
        return ServiceResponse()

    def _success(self, results: Any = None) -> ServiceResponse:
        """Create a successful envelope carrying ``results``."""
        return ServiceResponse(success=True, results=results)

    def _error(self, code: str = GENERIC_ERROR, results: Any = None) -> ServiceResponse:
        """Create a failed envelope."""
        return ServiceResponse(success=False, results=results, error_code=code)
