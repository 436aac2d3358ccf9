"""Registration Events"""

from src.service.conference.domain.domain_event.registration_events import (
    OrderPaymentConfirmed,
    OrderPlaced,
    OrderRegistrantAssigned,
    OrderTotalsCalculated,
    PersonalInfo,
    RegistrationEvent,
    SeatAssigned,
    SeatAssignmentsCreated,
    SeatAssignmentUpdated,
    SeatUnassigned,
)

__all__ = [
    'OrderPlaced',
    'OrderRegistrantAssigned',
    'OrderTotalsCalculated',
    'OrderPaymentConfirmed',
    'SeatAssignmentsCreated',
    'SeatAssigned',
    'SeatAssignmentUpdated',
    'SeatUnassigned',
    'PersonalInfo',
    'RegistrationEvent',
]
