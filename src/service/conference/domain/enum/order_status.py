from enum import StrEnum


class OrderStatus(StrEnum):
    CREATED = 'created'
    PAID = 'paid'
