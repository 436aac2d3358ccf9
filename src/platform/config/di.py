"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.conference.app.command.order_projection_handler import OrderProjectionHandler


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware session maker unless overridden)
    database = providers.Singleton(Database)

    # New unit of work, and therefore new session, on every call
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_maker=database.provided.session_maker
    )

    # Projection handler gets the factory itself, never a shared UoW instance
    order_projection_handler = providers.Singleton(
        OrderProjectionHandler, uow_factory=unit_of_work.provider
    )


container = Container()
