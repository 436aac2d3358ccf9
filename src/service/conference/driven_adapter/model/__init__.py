"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.conference.driven_adapter.model.order_model import OrderModel
from src.service.conference.driven_adapter.model.order_seat_model import OrderSeatModel

__all__ = [
    'OrderModel',
    'OrderSeatModel',
]
