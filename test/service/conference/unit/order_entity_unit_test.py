"""
Unit tests for the Order read model entity

Test Focus:
1. Field mutations: registrant name format, totals overwrite, payment status
2. Seat upsert keyed by position
3. Narrower SeatAssignmentUpdated contract (email untouched)
4. Position uniqueness guard
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.conference.domain.entity.order_entity import Attendee, Order, OrderSeat
from src.service.conference.domain.enum.order_status import OrderStatus


@pytest.mark.unit
class TestOrderEntity:
    @pytest.fixture
    def order(self) -> Order:
        return Order.place(conference_id=uuid4(), order_id=uuid4(), access_code='XYZ123')

    def test_place_creates_order_in_created_state(self) -> None:
        conference_id, order_id = uuid4(), uuid4()

        order = Order.place(conference_id=conference_id, order_id=order_id, access_code='ABC')

        assert order.id == order_id
        assert order.conference_id == conference_id
        assert order.access_code == 'ABC'
        assert order.status == OrderStatus.CREATED
        assert order.total_amount == Decimal('0')
        assert order.assignments_id is None
        assert order.seats == []

    def test_registrant_name_is_last_comma_first(self, order: Order) -> None:
        order.assign_registrant(first_name='Jane', last_name='Doe', email='jane@example.com')

        assert order.registrant_name == 'Doe, Jane'
        assert order.registrant_email == 'jane@example.com'

    def test_totals_are_overwritten_not_accumulated(self, order: Order) -> None:
        order.update_totals(total=Decimal('100'))
        order.update_totals(total=Decimal('150'))

        assert order.total_amount == Decimal('150')

    def test_confirm_payment_marks_order_paid(self, order: Order) -> None:
        order.confirm_payment()

        assert order.status == OrderStatus.PAID

    def test_assign_seat_appends_then_updates_same_position(self, order: Order) -> None:
        seat_id = uuid4()
        order.assign_seat(
            seat_id=seat_id,
            position=1,
            seat_type='General',
            first_name='Jane',
            last_name='Doe',
            email='jane@example.com',
        )
        order.assign_seat(
            seat_id=uuid4(),
            position=1,
            seat_type='VIP',
            first_name='John',
            last_name='Smith',
            email='john@example.com',
        )

        assert len(order.seats) == 1
        seat = order.seats[0]
        # Position and seat type are kept from the first assignment
        assert seat.id == seat_id
        assert seat.seat_type == 'General'
        assert seat.attendee == Attendee(
            first_name='John', last_name='Smith', email='john@example.com'
        )

    def test_update_seat_assignment_keeps_email(self, order: Order) -> None:
        order.assign_seat(
            seat_id=uuid4(),
            position=2,
            seat_type='General',
            first_name='Jane',
            last_name='Doe',
            email='jane@example.com',
        )

        touched = order.update_seat_assignment(position=2, first_name='Janet', last_name='Dough')

        assert touched is True
        assert order.seats[0].attendee == Attendee(
            first_name='Janet', last_name='Dough', email='jane@example.com'
        )

    def test_update_seat_assignment_without_seat_is_noop(self, order: Order) -> None:
        assert order.update_seat_assignment(position=5, first_name='A', last_name='B') is False
        assert order.seats == []

    def test_unassign_seat_removes_only_that_position(self, order: Order) -> None:
        for position in (1, 2):
            order.assign_seat(
                seat_id=uuid4(),
                position=position,
                seat_type='General',
                first_name='F',
                last_name='L',
                email=None,
            )

        assert order.unassign_seat(position=1) is True
        assert [seat.position for seat in order.seats] == [2]
        assert order.unassign_seat(position=1) is False

    def test_append_seat_rejects_duplicate_position(self, order: Order) -> None:
        seat = OrderSeat(id=uuid4(), position=1, seat_type='General', attendee=Attendee())
        order._append_seat(seat)

        with pytest.raises(DomainError, match='already has a seat at position 1'):
            order._append_seat(
                OrderSeat(id=uuid4(), position=1, seat_type='VIP', attendee=Attendee())
            )
