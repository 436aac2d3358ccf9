"""
Registration bounded context events consumed by the order projection.

The shapes are owned upstream; only the fields the read model needs are kept.
``source_id`` is the id of the aggregate that raised the event: the order for
``Order*`` events and the seat assignments aggregate for ``Seat*`` events.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@attrs.define(frozen=True)
class PersonalInfo:
    first_name: str
    last_name: str
    email: Optional[str] = None


@attrs.define(frozen=True)
class OrderPlaced:
    source_id: UUID
    conference_id: UUID
    access_code: str
    occurred_at: datetime = attrs.field(factory=_utc_now)


@attrs.define(frozen=True)
class OrderRegistrantAssigned:
    source_id: UUID
    first_name: str
    last_name: str
    email: str
    occurred_at: datetime = attrs.field(factory=_utc_now)


@attrs.define(frozen=True)
class OrderTotalsCalculated:
    source_id: UUID
    total: Decimal = attrs.field(converter=Decimal)
    occurred_at: datetime = attrs.field(factory=_utc_now)


@attrs.define(frozen=True)
class OrderPaymentConfirmed:
    source_id: UUID
    occurred_at: datetime = attrs.field(factory=_utc_now)


@attrs.define(frozen=True)
class SeatAssignmentsCreated:
    source_id: UUID
    order_id: UUID
    occurred_at: datetime = attrs.field(factory=_utc_now)


@attrs.define(frozen=True)
class SeatAssigned:
    source_id: UUID
    position: int
    seat_type: str
    attendee: PersonalInfo
    occurred_at: datetime = attrs.field(factory=_utc_now)


@attrs.define(frozen=True)
class SeatAssignmentUpdated:
    source_id: UUID
    position: int
    attendee: PersonalInfo
    occurred_at: datetime = attrs.field(factory=_utc_now)


@attrs.define(frozen=True)
class SeatUnassigned:
    source_id: UUID
    position: int
    occurred_at: datetime = attrs.field(factory=_utc_now)


RegistrationEvent = (
    OrderPlaced
    | OrderRegistrantAssigned
    | OrderTotalsCalculated
    | OrderPaymentConfirmed
    | SeatAssignmentsCreated
    | SeatAssigned
    | SeatAssignmentUpdated
    | SeatUnassigned
)
