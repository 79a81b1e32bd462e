from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base
from .money import to_amount


class Room(Base):
    __tablename__ = "room"

    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=False, default=None)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=False, default=None)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=False, default=None)
    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, default=None)


@dataclass
class RoomBuilder:
    id: Optional[int] = None
    name: Optional[str] = None
    price: Any = None
    capacity: Optional[int] = None

    def build(self) -> Room:
        return Room(
            id=self.id,
            name=self.name.strip() if self.name else self.name,
            price=to_amount(self.price),
            capacity=self.capacity,
        )
