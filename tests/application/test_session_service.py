"""
Test suite for SessionService.

Runs the service against in-memory SQLite with a real SessionCache to
check timestamps, cache-through reads and invalidation on every write.
Store failures are simulated with patched CRUD calls.

System role: Verification of session use cases
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.application.exceptions import DatabaseError, NotFoundError
from chatstore.application.services.session_service import SessionService
from chatstore.boundary.cache import SessionCache
from chatstore.boundary.db.CRUD.session_crud import session_crud


@pytest.fixture
def service(test_async_db: AsyncSession, session_cache: SessionCache) -> SessionService:
    """Provide SessionService bound to the test database and cache."""
    return SessionService(db=test_async_db, cache=session_cache)


class TestCreateSession:
    """Test suite for SessionService.create_session()."""

    @pytest.mark.asyncio
    async def test_create_session_should_start_unfavorited_with_equal_timestamps(
        self, service: SessionService
    ) -> None:
        # Act
        session = await service.create_session("u1", "My chat")

        # Assert
        assert session.user_id == "u1"
        assert session.title == "My chat"
        assert session.favorite is False
        assert session.created_at == session.updated_at
        assert session.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_create_session_should_allow_missing_title(self, service: SessionService) -> None:
        session = await service.create_session("u1")

        assert session.title is None

    @pytest.mark.asyncio
    async def test_create_session_should_generate_distinct_ids(self, service: SessionService) -> None:
        first = await service.create_session("u1")
        second = await service.create_session("u1")

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_create_session_should_invalidate_user_listings(
        self, service: SessionService, session_cache: SessionCache
    ) -> None:
        # Arrange
        assert await service.get_sessions_for_user("u1") == []

        # Act
        created = await service.create_session("u1")

        # Assert
        assert session_cache.get_user_sessions("u1", None) is None
        assert [s.id for s in await service.get_sessions_for_user("u1")] == [created.id]

    @pytest.mark.asyncio
    async def test_create_session_should_raise_database_error_on_store_failure(
        self, service: SessionService
    ) -> None:
        with patch.object(
            session_crud, "create", new_callable=AsyncMock,
            side_effect=OperationalError("INSERT", {}, Exception("down")),
        ):
            with pytest.raises(DatabaseError):
                await service.create_session("u1")


class TestGetById:
    """Test suite for SessionService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_session(self, service: SessionService) -> None:
        created = await service.create_session("u1", "t")

        fetched = await service.get_by_id(created.id)

        assert fetched == created

    @pytest.mark.asyncio
    async def test_get_by_id_should_populate_cache(
        self, service: SessionService, session_cache: SessionCache
    ) -> None:
        created = await service.create_session("u1")

        await service.get_by_id(created.id)

        assert session_cache.get_session(created.id) is not None

    @pytest.mark.asyncio
    async def test_get_by_id_should_serve_cache_hit_without_store(
        self, service: SessionService
    ) -> None:
        # Arrange
        created = await service.create_session("u1")
        await service.get_by_id(created.id)

        # Act
        with patch.object(session_crud, "get_by_id", new_callable=AsyncMock) as mock_get:
            fetched = await service.get_by_id(created.id)

        # Assert
        assert fetched.id == created.id
        mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_by_id_should_raise_not_found_for_unknown_id(
        self, service: SessionService
    ) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_id("missing")

        assert exc_info.value.message == "Session not found: missing"
        assert exc_info.value.resource_id == "missing"


class TestGetSessionsForUser:
    """Test suite for SessionService.get_sessions_for_user()."""

    @pytest.mark.asyncio
    async def test_listing_should_order_by_most_recent_update(self, service: SessionService) -> None:
        # Arrange
        first = await service.create_session("u1", "first")
        second = await service.create_session("u1", "second")
        await service.rename_session(first.id, "first renamed")

        # Act
        sessions = await service.get_sessions_for_user("u1")

        # Assert
        assert [s.id for s in sessions] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_listing_should_filter_on_favorite(self, service: SessionService) -> None:
        # Arrange
        fav = await service.create_session("u1", "fav")
        plain = await service.create_session("u1", "plain")
        await service.mark_favorite(fav.id, True)

        # Act & Assert
        assert [s.id for s in await service.get_sessions_for_user("u1", True)] == [fav.id]
        assert [s.id for s in await service.get_sessions_for_user("u1", False)] == [plain.id]
        assert len(await service.get_sessions_for_user("u1")) == 2

    @pytest.mark.asyncio
    async def test_filtered_and_unfiltered_listings_should_be_cached_independently(
        self, service: SessionService, session_cache: SessionCache
    ) -> None:
        # Arrange
        fav = await service.create_session("u1", "fav")
        await service.mark_favorite(fav.id, True)

        # Act
        await service.get_sessions_for_user("u1", True)
        await service.get_sessions_for_user("u1", None)

        # Assert
        assert session_cache.get_user_sessions("u1", True) is not None
        assert session_cache.get_user_sessions("u1", None) is not None
        assert session_cache.get_user_sessions("u1", False) is None

    @pytest.mark.asyncio
    async def test_any_write_should_invalidate_every_cached_listing(
        self, service: SessionService, session_cache: SessionCache
    ) -> None:
        # Arrange
        session = await service.create_session("u1", "t")
        await service.get_sessions_for_user("u1", True)
        await service.get_sessions_for_user("u1", None)

        # Act
        await service.rename_session(session.id, "renamed")

        # Assert
        assert session_cache.get_user_sessions("u1", True) is None
        assert session_cache.get_user_sessions("u1", None) is None

    @pytest.mark.asyncio
    async def test_cached_listing_should_not_be_mutable_by_callers(
        self, service: SessionService
    ) -> None:
        # Arrange
        await service.create_session("u1")
        listing = await service.get_sessions_for_user("u1")

        # Act
        listing.clear()

        # Assert
        assert len(await service.get_sessions_for_user("u1")) == 1


class TestRenameSession:
    """Test suite for SessionService.rename_session()."""

    @pytest.mark.asyncio
    async def test_rename_should_advance_updated_at(self, service: SessionService) -> None:
        # Arrange
        created = await service.create_session("u1", "old")

        # Act
        renamed = await service.rename_session(created.id, "new")

        # Assert
        assert renamed.title == "new"
        assert renamed.updated_at > created.updated_at
        assert renamed.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_rename_should_be_visible_through_warm_cache(self, service: SessionService) -> None:
        # Arrange
        created = await service.create_session("u1", "old")
        await service.get_by_id(created.id)

        # Act
        await service.rename_session(created.id, "new")
        fetched = await service.get_by_id(created.id)

        # Assert
        assert fetched.title == "new"
        assert fetched.updated_at > created.updated_at

    @pytest.mark.asyncio
    async def test_rename_should_raise_not_found_for_unknown_id(self, service: SessionService) -> None:
        with pytest.raises(NotFoundError):
            await service.rename_session("missing", "t")

    @pytest.mark.asyncio
    async def test_rename_should_raise_database_error_on_store_failure(
        self, service: SessionService
    ) -> None:
        created = await service.create_session("u1", "old")

        with patch.object(
            session_crud, "save", new_callable=AsyncMock,
            side_effect=OperationalError("UPDATE", {}, Exception("down")),
        ):
            with pytest.raises(DatabaseError):
                await service.rename_session(created.id, "new")


class TestMarkFavorite:
    """Test suite for SessionService.mark_favorite()."""

    @pytest.mark.asyncio
    async def test_mark_favorite_should_set_and_clear_flag(self, service: SessionService) -> None:
        created = await service.create_session("u1")

        favorited = await service.mark_favorite(created.id, True)
        cleared = await service.mark_favorite(created.id, False)

        assert favorited.favorite is True
        assert cleared.favorite is False
        assert cleared.updated_at > favorited.updated_at > created.updated_at

    @pytest.mark.asyncio
    async def test_mark_favorite_should_refresh_cached_session(
        self, service: SessionService, session_cache: SessionCache
    ) -> None:
        created = await service.create_session("u1")
        await service.get_by_id(created.id)

        await service.mark_favorite(created.id, True)

        assert session_cache.get_session(created.id).favorite is True

    @pytest.mark.asyncio
    async def test_mark_favorite_should_raise_not_found_for_unknown_id(
        self, service: SessionService
    ) -> None:
        with pytest.raises(NotFoundError):
            await service.mark_favorite("missing", True)


class TestDeleteSession:
    """Test suite for SessionService.delete_session()."""

    @pytest.mark.asyncio
    async def test_delete_should_evict_cached_session(self, service: SessionService) -> None:
        # Arrange
        created = await service.create_session("u1")
        await service.get_by_id(created.id)

        # Act
        await service.delete_session(created.id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_by_id(created.id)

    @pytest.mark.asyncio
    async def test_delete_should_invalidate_listings(self, service: SessionService) -> None:
        created = await service.create_session("u1")
        assert len(await service.get_sessions_for_user("u1")) == 1

        await service.delete_session(created.id)

        assert await service.get_sessions_for_user("u1") == []

    @pytest.mark.asyncio
    async def test_delete_should_raise_not_found_for_unknown_id(self, service: SessionService) -> None:
        with pytest.raises(NotFoundError):
            await service.delete_session("missing")

    @pytest.mark.asyncio
    async def test_delete_should_wrap_store_failure_in_database_error(
        self, service: SessionService, session_cache: SessionCache
    ) -> None:
        # Arrange
        created = await service.create_session("u1")
        await service.get_by_id(created.id)

        # Act
        with patch.object(
            session_crud, "delete", new_callable=AsyncMock,
            side_effect=OperationalError("DELETE", {}, Exception("down")),
        ):
            with pytest.raises(DatabaseError) as exc_info:
                await service.delete_session(created.id)

        # Assert
        assert exc_info.value.message == "Failed to delete session due to database error"
        assert session_cache.get_session(created.id) is not None
