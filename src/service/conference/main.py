"""
Conference order projection bootstrap

The event transport lives outside this service: it builds the handler
with ``get_order_projection_handler()`` and awaits ``handle(event)`` once
per delivered Registration event.
"""

import asyncio

from src.platform.config.di import container
from src.platform.database.db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger
from src.service.conference.app.command.order_projection_handler import OrderProjectionHandler


def get_order_projection_handler() -> OrderProjectionHandler:
    return container.order_projection_handler()


async def init_read_model() -> None:
    """Create the read model tables, for local runs without migrations"""
    try:
        await create_db_and_tables()
    finally:
        await dispose_engine()


if __name__ == '__main__':
    Logger.base.info('🚀 [BOOTSTRAP] Initialising conference order read model')
    asyncio.run(init_read_model())
