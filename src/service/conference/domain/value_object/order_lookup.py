from enum import StrEnum
from typing import Optional
from uuid import UUID

import attrs


class OrderLookupField(StrEnum):
    ORDER_ID = 'order_id'
    ASSIGNMENTS_ID = 'assignments_id'


@attrs.define(frozen=True)
class OrderLookup:
    """Which order an event targets: ``field`` equals ``value``"""

    field: OrderLookupField
    value: Optional[UUID]

    @classmethod
    def by_order_id(cls, order_id: Optional[UUID]) -> 'OrderLookup':
        return cls(field=OrderLookupField.ORDER_ID, value=order_id)

    @classmethod
    def by_assignments_id(cls, assignments_id: Optional[UUID]) -> 'OrderLookup':
        return cls(field=OrderLookupField.ASSIGNMENTS_ID, value=assignments_id)

    def __str__(self) -> str:
        return f'{self.field}={self.value}'
