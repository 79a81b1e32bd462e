from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Date, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db import Base
from .guest import Guest
from .money import to_amount
from .room import Room


class Accommodation(Base):
    __tablename__ = "accommodation"

    # Guest and room are always loaded with the stay so they survive the session
    guest: Mapped[Optional[Guest]] = relationship(default=None, lazy="joined")
    room: Mapped[Optional[Room]] = relationship(default=None, lazy="joined")
    date_from: Mapped[Optional[date]] = mapped_column(Date, nullable=False, default=None)
    date_to: Mapped[Optional[date]] = mapped_column(Date, nullable=False, default=None)
    total_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=False, default=None)
    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, default=None)

    guest_id: Mapped[int] = mapped_column(ForeignKey("guest.id"), index=True, init=False, repr=False, compare=False)
    room_id: Mapped[int] = mapped_column(ForeignKey("room.id"), index=True, init=False, repr=False, compare=False)


@dataclass
class AccommodationBuilder:
    id: Optional[int] = None
    guest: Optional[Guest] = None
    room: Optional[Room] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    total_price: Any = None

    def build(self) -> Accommodation:
        return Accommodation(
            id=self.id,
            guest=self.guest,
            room=self.room,
            date_from=self.date_from,
            date_to=self.date_to,
            total_price=to_amount(self.total_price),
        )
