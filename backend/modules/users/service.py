"""
In-memory user record store.

For testing and development. Production deployments inject their own
IUserRecordStore backed by a real database.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from shared.config import Settings
from shared.models import ServiceResponse
from shared.service import BaseService

from .interfaces import IUserRecordStore
from .models import LocalUserRecord

logger = logging.getLogger(__name__)


class InMemoryUserRecordStore(BaseService):
    """User record store keeping records in a dict keyed by external id."""

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__(settings)
        self._records: dict[str, LocalUserRecord] = {}

    async def fetch_by_external_id(
        self,
        correlation_id: str,
        external_id: str,
    ) -> ServiceResponse:
        """Look up a record; a missing record is a success with no results."""
        if not external_id:
            return self._error("USER_ID_REQUIRED")
        return self._success(self._records.get(external_id))

    async def update(
        self,
        correlation_id: str,
        partial: dict[str, Any],
    ) -> ServiceResponse:
        """Upsert a record, merging ``partial`` over any existing fields."""
        user_id = partial.get("id") if partial else None
        if not user_id:
            return self._error("USER_ID_REQUIRED")

        existing = self._records.get(user_id)
        if existing is None:
            record = LocalUserRecord(**partial)
            logger.info(f"Created local user {user_id} (correlation_id={correlation_id})")
        else:
            record = existing.model_copy(
                update={**partial, "updated_at": datetime.now(timezone.utc)}
            )

        self._records[user_id] = record
        return self._success(record)


# Verify the implementation satisfies the interface
def _verify_interface():
    """Type check that InMemoryUserRecordStore implements IUserRecordStore."""
    store: IUserRecordStore = InMemoryUserRecordStore()
    return store
