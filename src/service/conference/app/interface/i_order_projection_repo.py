"""
Order Projection Repository Interface

Read-modify-write access to the denormalized order read model.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.conference.domain.entity.order_entity import Order
from src.service.conference.domain.value_object.order_lookup import OrderLookup


class IOrderProjectionRepo(ABC):
    @abstractmethod
    async def add(self, *, order: Order) -> None:
        """Stage a newly placed order for insertion"""
        pass

    @abstractmethod
    async def get_by_id(self, *, order_id: UUID) -> Optional[Order]:
        pass

    @abstractmethod
    async def find_one(self, *, lookup: OrderLookup) -> Optional[Order]:
        """
        Find the single order matching the lookup, seats included

        Args:
            lookup: field/value pair identifying the order

        Returns:
            Order entity with all seats loaded, or None if nothing matches
        """
        pass

    @abstractmethod
    async def save(self, *, order: Order) -> None:
        """Write back every field and seat change made to a found order"""
        pass
