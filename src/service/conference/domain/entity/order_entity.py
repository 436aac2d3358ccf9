from decimal import Decimal
from typing import List, Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.conference.domain.enum.order_status import OrderStatus


@attrs.define
class Attendee:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


@attrs.define
class OrderSeat:
    id: UUID  # seat assignments aggregate id
    position: int = attrs.field(validator=attrs.validators.instance_of(int))
    seat_type: str
    attendee: Attendee = attrs.field(validator=attrs.validators.instance_of(Attendee))


@attrs.define
class Order:
    """
    Denormalized order as seen by Conference Management.

    Built only from Registration events: ``place`` creates it, every other
    method applies one event kind in place.
    """

    id: UUID
    conference_id: UUID
    access_code: str
    registrant_email: Optional[str] = None
    registrant_name: Optional[str] = None
    total_amount: Decimal = attrs.field(default=Decimal('0'), converter=Decimal)
    status: OrderStatus = attrs.field(
        default=OrderStatus.CREATED, validator=attrs.validators.instance_of(OrderStatus)
    )
    assignments_id: Optional[UUID] = None
    seats: List[OrderSeat] = attrs.field(factory=list)

    @classmethod
    @Logger.io
    def place(cls, *, conference_id: UUID, order_id: UUID, access_code: str) -> 'Order':
        return cls(id=order_id, conference_id=conference_id, access_code=access_code)

    def assign_registrant(self, *, first_name: str, last_name: str, email: str) -> None:
        self.registrant_email = email
        self.registrant_name = f'{last_name}, {first_name}'

    def update_totals(self, *, total: Decimal) -> None:
        self.total_amount = Decimal(total)

    def confirm_payment(self) -> None:
        self.status = OrderStatus.PAID

    def link_seat_assignments(self, *, assignments_id: UUID) -> None:
        self.assignments_id = assignments_id

    def find_seat(self, position: int) -> Optional[OrderSeat]:
        return next((seat for seat in self.seats if seat.position == position), None)

    @Logger.io
    def assign_seat(
        self,
        *,
        seat_id: UUID,
        position: int,
        seat_type: str,
        first_name: str,
        last_name: str,
        email: Optional[str],
    ) -> OrderSeat:
        seat = self.find_seat(position)
        if seat is not None:
            # Position and seat type are fixed once the seat exists
            seat.attendee.first_name = first_name
            seat.attendee.last_name = last_name
            seat.attendee.email = email
            return seat

        return self._append_seat(
            OrderSeat(
                id=seat_id,
                position=position,
                seat_type=seat_type,
                attendee=Attendee(first_name=first_name, last_name=last_name, email=email),
            )
        )

    def update_seat_assignment(self, *, position: int, first_name: str, last_name: str) -> bool:
        seat = self.find_seat(position)
        if seat is None:
            return False
        # Email is not part of this update
        seat.attendee.first_name = first_name
        seat.attendee.last_name = last_name
        return True

    def unassign_seat(self, *, position: int) -> bool:
        seat = self.find_seat(position)
        if seat is None:
            return False
        self.seats.remove(seat)
        return True

    def _append_seat(self, seat: OrderSeat) -> OrderSeat:
        if self.find_seat(seat.position) is not None:
            raise DomainError(f'Order {self.id} already has a seat at position {seat.position}')
        self.seats.append(seat)
        return seat
