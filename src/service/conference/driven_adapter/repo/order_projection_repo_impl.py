"""
Order Projection Repository Implementation

SQLAlchemy async repository bound to the unit of work's session.
Entities are mapped from ORM rows on read; ``save`` pushes the entity's
state back onto the same rows so the session flushes only the diff.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, selectinload

from src.platform.logging.loguru_io import Logger
from src.service.conference.app.interface.i_order_projection_repo import IOrderProjectionRepo
from src.service.conference.domain.entity.order_entity import Attendee, Order, OrderSeat
from src.service.conference.domain.enum.order_status import OrderStatus
from src.service.conference.domain.value_object.order_lookup import (
    OrderLookup,
    OrderLookupField,
)
from src.service.conference.driven_adapter.model.order_model import OrderModel
from src.service.conference.driven_adapter.model.order_seat_model import OrderSeatModel


_LOOKUP_COLUMNS: dict[OrderLookupField, InstrumentedAttribute] = {
    OrderLookupField.ORDER_ID: OrderModel.id,
    OrderLookupField.ASSIGNMENTS_ID: OrderModel.assignments_id,
}


class OrderProjectionRepoImpl(IOrderProjectionRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_seat_entity(db_seat: OrderSeatModel) -> OrderSeat:
        return OrderSeat(
            id=db_seat.id,
            position=db_seat.position,
            seat_type=db_seat.seat_type,
            attendee=Attendee(
                first_name=db_seat.attendee_first_name,
                last_name=db_seat.attendee_last_name,
                email=db_seat.attendee_email,
            ),
        )

    @staticmethod
    def _to_entity(db_order: OrderModel) -> Order:
        return Order(
            id=db_order.id,
            conference_id=db_order.conference_id,
            access_code=db_order.access_code,
            registrant_email=db_order.registrant_email,
            registrant_name=db_order.registrant_name,
            total_amount=db_order.total_amount,
            status=OrderStatus(db_order.status),
            assignments_id=db_order.assignments_id,
            seats=[OrderProjectionRepoImpl._to_seat_entity(seat) for seat in db_order.seats],
        )

    @staticmethod
    def _apply_seat(db_seat: OrderSeatModel, seat: OrderSeat) -> None:
        db_seat.id = seat.id
        db_seat.seat_type = seat.seat_type
        db_seat.attendee_first_name = seat.attendee.first_name
        db_seat.attendee_last_name = seat.attendee.last_name
        db_seat.attendee_email = seat.attendee.email

    async def _load(self, column: InstrumentedAttribute, value: UUID) -> Optional[OrderModel]:
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.seats))
            .where(column == value)
            .limit(1)
        )
        return result.scalars().first()

    @Logger.io
    async def add(self, *, order: Order) -> None:
        self.session.add(
            OrderModel(
                id=order.id,
                conference_id=order.conference_id,
                access_code=order.access_code,
                registrant_email=order.registrant_email,
                registrant_name=order.registrant_name,
                total_amount=order.total_amount,
                status=order.status.value,
                assignments_id=order.assignments_id,
                seats=[],
            )
        )

    @Logger.io
    async def get_by_id(self, *, order_id: UUID) -> Optional[Order]:
        return await self.find_one(lookup=OrderLookup.by_order_id(order_id))

    @Logger.io
    async def find_one(self, *, lookup: OrderLookup) -> Optional[Order]:
        # A missing key must not turn into "IS NULL" and match unlinked orders
        if lookup.value is None:
            return None

        db_order = await self._load(_LOOKUP_COLUMNS[lookup.field], lookup.value)
        if not db_order:
            return None

        return OrderProjectionRepoImpl._to_entity(db_order)

    @Logger.io
    async def save(self, *, order: Order) -> None:
        # No round trip when the order was loaded through this session
        db_order = await self.session.get(
            OrderModel, order.id, options=[selectinload(OrderModel.seats)]
        )
        if not db_order:
            raise ValueError(f'Order with id {order.id} not found')

        db_order.registrant_email = order.registrant_email
        db_order.registrant_name = order.registrant_name
        db_order.total_amount = order.total_amount
        db_order.status = order.status.value
        db_order.assignments_id = order.assignments_id

        existing = {db_seat.position: db_seat for db_seat in db_order.seats}
        wanted = {seat.position: seat for seat in order.seats}

        for position, db_seat in existing.items():
            if position not in wanted:
                db_order.seats.remove(db_seat)

        for position, seat in wanted.items():
            if (db_seat := existing.get(position)) is None:
                db_seat = OrderSeatModel(order_id=order.id, position=position)
                db_order.seats.append(db_seat)
            OrderProjectionRepoImpl._apply_seat(db_seat, seat)

        await self.session.flush()
