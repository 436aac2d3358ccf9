from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.db_setting import Base


if TYPE_CHECKING:
    from src.service.conference.driven_adapter.model.order_model import OrderModel


class OrderSeatModel(Base):
    __tablename__ = 'conference_order_seat'

    order_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('conference_order.id', ondelete='CASCADE'), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    id: Mapped[UUID] = mapped_column(Uuid, nullable=False)  # seat assignments aggregate id
    seat_type: Mapped[str] = mapped_column(String(100), nullable=False)

    # Attendee is owned by the seat, so its columns live on the seat row
    attendee_first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    attendee_last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    attendee_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    order: Mapped['OrderModel'] = relationship('OrderModel', back_populates='seats')
