from src.service.conference.domain.entity.order_entity import Attendee, Order, OrderSeat

__all__ = ['Attendee', 'Order', 'OrderSeat']
