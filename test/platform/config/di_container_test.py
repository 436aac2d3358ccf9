"""
Tests for the dependency injection container wiring
"""

from uuid import uuid4

import pytest
from dependency_injector import providers
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.conference.app.command.order_projection_handler import OrderProjectionHandler
from src.service.conference.domain.domain_event.registration_events import OrderPlaced


@pytest.fixture
def container(session_maker: async_sessionmaker[AsyncSession]) -> Container:
    test_container = Container()
    test_container.database.override(providers.Object(Database(session_maker=session_maker)))
    return test_container


@pytest.mark.integration
class TestContainer:
    @pytest.mark.asyncio
    async def test_config_service_is_settings(self, container: Container) -> None:
        assert isinstance(container.config_service(), Settings)

    @pytest.mark.asyncio
    async def test_unit_of_work_is_new_per_call(self, container: Container) -> None:
        first = container.unit_of_work()
        second = container.unit_of_work()

        assert isinstance(first, SqlAlchemyUnitOfWork)
        assert first is not second

    @pytest.mark.asyncio
    async def test_handler_is_singleton(self, container: Container) -> None:
        handler = container.order_projection_handler()

        assert isinstance(handler, OrderProjectionHandler)
        assert container.order_projection_handler() is handler

    @pytest.mark.asyncio
    async def test_handler_projects_through_container_database(
        self, container: Container, session_maker: async_sessionmaker[AsyncSession]
    ) -> None:
        order_id = uuid4()

        await container.order_projection_handler().handle(
            OrderPlaced(source_id=order_id, conference_id=uuid4(), access_code='DI')
        )

        async with SqlAlchemyUnitOfWork(session_maker=session_maker) as uow:
            order = await uow.orders.get_by_id(order_id=order_id)
        assert order is not None
        assert order.access_code == 'DI'
