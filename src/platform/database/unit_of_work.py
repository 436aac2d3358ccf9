"""
Unit of Work Pattern - one database session per projected event

Architecture:
- UoW owns the session lifecycle: opened on enter, released on exit
- UoW is the only place that commits
- Repositories receive the UoW's session
- Anything not committed when the scope exits is rolled back
"""

from __future__ import annotations

import abc
from types import TracebackType
from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


if TYPE_CHECKING:
    from src.service.conference.app.interface.i_order_projection_repo import (
        IOrderProjectionRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the order projection

    Usage:
        async with uow:
            order = await uow.orders.find_one(lookup=...)
            await uow.orders.save(order=order)
            await uow.commit()
    """

    orders: IOrderProjectionRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh AsyncSession is opened on every ``async with`` and closed on
    every exit path, so instances must not be shared between events.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.conference.driven_adapter.repo.order_projection_repo_impl import (
            OrderProjectionRepoImpl,
        )

        self.session = self._session_maker()
        self.orders = OrderProjectionRepoImpl(session=self.session)
        await super().__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside of its async with block')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
