"""
Order Projection Handler

Folds Registration events into the Conference Management order read model.

Every event runs in its own unit of work: open, locate, mutate, commit,
release. An event whose target order is not (yet) in the read model is
skipped, which is what makes stale and duplicate deliveries harmless.
Storage errors are left to propagate so the transport can redeliver.
"""

from typing import Callable

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.conference.domain.domain_event.registration_events import (
    OrderPaymentConfirmed,
    OrderPlaced,
    OrderRegistrantAssigned,
    OrderTotalsCalculated,
    RegistrationEvent,
    SeatAssigned,
    SeatAssignmentsCreated,
    SeatAssignmentUpdated,
    SeatUnassigned,
)
from src.service.conference.domain.entity.order_entity import Order
from src.service.conference.domain.value_object.order_lookup import OrderLookup


class OrderProjectionHandler:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]):
        self.uow_factory = uow_factory

    async def handle(self, event: RegistrationEvent) -> None:
        match event:
            case OrderPlaced():
                await self.handle_order_placed(event)
            case OrderRegistrantAssigned():
                await self.handle_order_registrant_assigned(event)
            case OrderTotalsCalculated():
                await self.handle_order_totals_calculated(event)
            case OrderPaymentConfirmed():
                await self.handle_order_payment_confirmed(event)
            case SeatAssignmentsCreated():
                await self.handle_seat_assignments_created(event)
            case SeatAssigned():
                await self.handle_seat_assigned(event)
            case SeatAssignmentUpdated():
                await self.handle_seat_assignment_updated(event)
            case SeatUnassigned():
                await self.handle_seat_unassigned(event)
            case _:
                raise TypeError(f'Unsupported registration event: {type(event).__name__}')

    @Logger.io
    async def handle_order_placed(self, event: OrderPlaced) -> None:
        async with self.uow_factory() as uow:
            if await uow.orders.get_by_id(order_id=event.source_id) is not None:
                Logger.base.warning(
                    f'⏭️ [PROJECTION] Order {event.source_id} already projected, skipping OrderPlaced'
                )
                return

            await uow.orders.add(
                order=Order.place(
                    conference_id=event.conference_id,
                    order_id=event.source_id,
                    access_code=event.access_code,
                )
            )
            await uow.commit()

        Logger.base.info(f'📥 [PROJECTION] Order {event.source_id} placed')

    @Logger.io
    async def handle_order_registrant_assigned(self, event: OrderRegistrantAssigned) -> None:
        await self._process_order(
            OrderLookup.by_order_id(event.source_id),
            lambda order: order.assign_registrant(
                first_name=event.first_name, last_name=event.last_name, email=event.email
            ),
            event_name='OrderRegistrantAssigned',
        )

    @Logger.io
    async def handle_order_totals_calculated(self, event: OrderTotalsCalculated) -> None:
        await self._process_order(
            OrderLookup.by_order_id(event.source_id),
            lambda order: order.update_totals(total=event.total),
            event_name='OrderTotalsCalculated',
        )

    @Logger.io
    async def handle_order_payment_confirmed(self, event: OrderPaymentConfirmed) -> None:
        await self._process_order(
            OrderLookup.by_order_id(event.source_id),
            lambda order: order.confirm_payment(),
            event_name='OrderPaymentConfirmed',
        )

    @Logger.io
    async def handle_seat_assignments_created(self, event: SeatAssignmentsCreated) -> None:
        await self._process_order(
            OrderLookup.by_order_id(event.order_id),
            lambda order: order.link_seat_assignments(assignments_id=event.source_id),
            event_name='SeatAssignmentsCreated',
        )

    @Logger.io
    async def handle_seat_assigned(self, event: SeatAssigned) -> None:
        await self._process_order(
            OrderLookup.by_assignments_id(event.source_id),
            lambda order: order.assign_seat(
                seat_id=event.source_id,
                position=event.position,
                seat_type=event.seat_type,
                first_name=event.attendee.first_name,
                last_name=event.attendee.last_name,
                email=event.attendee.email,
            ),
            event_name='SeatAssigned',
        )

    @Logger.io
    async def handle_seat_assignment_updated(self, event: SeatAssignmentUpdated) -> None:
        await self._process_order(
            OrderLookup.by_assignments_id(event.source_id),
            lambda order: order.update_seat_assignment(
                position=event.position,
                first_name=event.attendee.first_name,
                last_name=event.attendee.last_name,
            ),
            event_name='SeatAssignmentUpdated',
        )

    @Logger.io
    async def handle_seat_unassigned(self, event: SeatUnassigned) -> None:
        await self._process_order(
            OrderLookup.by_assignments_id(event.source_id),
            lambda order: order.unassign_seat(position=event.position),
            event_name='SeatUnassigned',
        )

    async def _process_order(
        self,
        lookup: OrderLookup,
        mutate: Callable[[Order], object],
        *,
        event_name: str,
    ) -> None:
        async with self.uow_factory() as uow:
            order = await uow.orders.find_one(lookup=lookup)
            if order is None:
                Logger.base.warning(
                    f'⚠️ [PROJECTION] No order for {lookup}, skipping {event_name}'
                )
                return

            mutate(order)
            await uow.orders.save(order=order)
            await uow.commit()

        Logger.base.info(f'✅ [PROJECTION] Applied {event_name} to order {order.id}')
