"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- A fresh in-memory SQLite read model per test (sqlite+aiosqlite)
- Unit of work factory and projection handler bound to that database
- Event builders for the Registration events the projection consumes

Architecture:
- Unit tests (test/**/unit/): mock the unit of work, no database
- Integration tests: real SQLAlchemy engine, one database per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///:memory:'
    os.environ.setdefault('DEBUG', 'false')
    os.environ.setdefault('SERVICE_NAME', 'conference-order-projection-test')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from uuid import UUID, uuid4  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.platform.database.db_setting import Base, create_db_and_tables  # noqa: E402
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from src.service.conference.app.command.order_projection_handler import (  # noqa: E402
    OrderProjectionHandler,
)


# =============================================================================
# Database fixtures
# =============================================================================


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    test_engine = create_async_engine(
        'sqlite+aiosqlite:///:memory:',
        echo=False,
        poolclass=StaticPool,
    )
    await create_db_and_tables(test_engine)
    yield test_engine
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def uow_factory(
    session_maker: async_sessionmaker[AsyncSession],
) -> Callable[[], SqlAlchemyUnitOfWork]:
    return lambda: SqlAlchemyUnitOfWork(session_maker=session_maker)


@pytest.fixture
def handler(uow_factory: Callable[[], SqlAlchemyUnitOfWork]) -> OrderProjectionHandler:
    return OrderProjectionHandler(uow_factory=uow_factory)


# =============================================================================
# Identifiers
# =============================================================================


@pytest.fixture
def order_id() -> UUID:
    return uuid4()


@pytest.fixture
def conference_id() -> UUID:
    return uuid4()


@pytest.fixture
def assignments_id() -> UUID:
    return uuid4()
