from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from sqlalchemy import Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.db_setting import Base


if TYPE_CHECKING:
    from src.service.conference.driven_adapter.model.order_seat_model import OrderSeatModel


class OrderModel(Base):
    __tablename__ = 'conference_order'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    conference_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    access_code: Mapped[str] = mapped_column(String(20), nullable=False)
    registrant_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    registrant_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2, asdecimal=True), nullable=False, default=Decimal('0')
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='created')
    assignments_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid, nullable=True, unique=True, index=True
    )

    seats: Mapped[List['OrderSeatModel']] = relationship(
        'OrderSeatModel',
        back_populates='order',
        cascade='all, delete-orphan',
        order_by='OrderSeatModel.position',
        lazy='raise',
    )
