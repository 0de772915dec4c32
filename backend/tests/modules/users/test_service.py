"""Tests for the in-memory user record store."""

import pytest

from modules.users.interfaces import IUserRecordStore
from modules.users.models import LocalUserRecord
from modules.users.service import InMemoryUserRecordStore


class TestInMemoryUserRecordStore:
    def test_implements_interface(self, user_store):
        """The store should satisfy IUserRecordStore."""
        assert isinstance(user_store, IUserRecordStore)

    @pytest.mark.asyncio
    async def test_fetch_missing_is_empty_success(self, user_store, correlation_id):
        """A missing record should be a success with no results."""
        response = await user_store.fetch_by_external_id(correlation_id, "ghost")
        assert response.success is True
        assert response.results is None

    @pytest.mark.asyncio
    async def test_fetch_empty_id(self, user_store, correlation_id):
        """An empty id should be rejected."""
        response = await user_store.fetch_by_external_id(correlation_id, "")
        assert response.success is False
        assert response.error_code == "USER_ID_REQUIRED"

    @pytest.mark.asyncio
    async def test_update_creates_record(self, user_store, correlation_id):
        """Updating an unknown id should create the record."""
        response = await user_store.update(correlation_id, {"id": "user-1"})

        assert response.success is True
        assert isinstance(response.results, LocalUserRecord)
        assert response.results.id == "user-1"
        assert response.results.claims is None

        fetched = await user_store.fetch_by_external_id(correlation_id, "user-1")
        assert fetched.results == response.results

    @pytest.mark.asyncio
    async def test_update_merges_partial(self, user_store, correlation_id):
        """Updating an existing record should keep fields not in the partial."""
        created = await user_store.update(
            correlation_id, {"id": "user-1", "claims": {"plan": "pro"}}
        )
        updated = await user_store.update(correlation_id, {"id": "user-1"})

        assert updated.results.claims == {"plan": "pro"}
        assert updated.results.created_at == created.results.created_at
        assert updated.results.updated_at >= created.results.updated_at

    @pytest.mark.asyncio
    async def test_update_replaces_claims(self, user_store, correlation_id):
        """Claims given in the partial should overwrite the stored ones."""
        await user_store.update(correlation_id, {"id": "user-1", "claims": {"plan": "free"}})
        updated = await user_store.update(
            correlation_id, {"id": "user-1", "claims": {"plan": "pro"}}
        )
        assert updated.results.claims == {"plan": "pro"}

    @pytest.mark.asyncio
    async def test_update_requires_id(self, user_store, correlation_id):
        """A partial without an id should be rejected."""
        response = await user_store.update(correlation_id, {"claims": {"a": 1}})
        assert response.success is False
        assert response.error_code == "USER_ID_REQUIRED"

    @pytest.mark.asyncio
    async def test_stores_are_isolated(self, settings, correlation_id):
        """Separate stores should not share records."""
        first = InMemoryUserRecordStore(settings)
        second = InMemoryUserRecordStore(settings)
        await first.update(correlation_id, {"id": "user-1"})

        response = await second.fetch_by_external_id(correlation_id, "user-1")
        assert response.results is None
