"""
Tests for DatabaseSessionManager transaction handling.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError

from app.shared.core.exceptions import DatabaseError, MovieInRentalError, TransactionError
from app.shared.infrastructure.database.session import DatabaseSessionManager


@pytest.fixture
def session() -> MagicMock:
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def config(session) -> MagicMock:
    config = MagicMock()
    config.create_async_session_factory.return_value = MagicMock(return_value=session)
    config.close_async_engine = AsyncMock()
    return config


@pytest_asyncio.fixture
async def manager(config) -> DatabaseSessionManager:
    manager = DatabaseSessionManager(config)
    await manager.initialize()
    return manager


@pytest.mark.asyncio
async def test_commit_on_success(manager, session):
    async with manager.get_session() as db:
        assert db is session

    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()
    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_domain_error_rolls_back_and_propagates(manager, session):
    with pytest.raises(MovieInRentalError):
        async with manager.get_session():
            raise MovieInRentalError(movie_id=10)

    session.commit.assert_not_awaited()
    session.rollback.assert_awaited_once()
    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_sql_error_becomes_database_error(manager, session):
    with pytest.raises(DatabaseError):
        async with manager.get_session():
            raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_unexpected_error_becomes_transaction_error(manager, session):
    with pytest.raises(TransactionError):
        async with manager.get_session():
            raise RuntimeError("boom")

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_uninitialized_manager_refuses_sessions(config):
    manager = DatabaseSessionManager(config)

    with pytest.raises(DatabaseError):
        async with manager.get_session():
            pass


@pytest.mark.asyncio
async def test_close_disposes_engine(manager, config):
    await manager.close()

    config.close_async_engine.assert_awaited_once()
    assert manager.is_initialized() is False


@pytest.mark.asyncio
async def test_initialize_failure_is_wrapped(config):
    config.create_async_session_factory.side_effect = ValueError("bad url")

    with pytest.raises(DatabaseError):
        await DatabaseSessionManager(config).initialize()
