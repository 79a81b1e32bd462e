from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy import BigInteger, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base


class Guest(Base):
    __tablename__ = "guest"

    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=False, default=None)
    address: Mapped[Optional[str]] = mapped_column(String(300), default=None)
    birthday: Mapped[Optional[date]] = mapped_column(Date, nullable=False, default=None)
    credit_card: Mapped[Optional[int]] = mapped_column(BigInteger, default=None)
    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, default=None)


@dataclass
class GuestBuilder:
    id: Optional[int] = None
    name: Optional[str] = None
    address: Optional[str] = None
    birthday: Optional[date] = None
    credit_card: Optional[int] = None

    def build(self) -> Guest:
        return Guest(
            id=self.id,
            name=self.name.strip() if self.name else self.name,
            address=self.address.strip() if self.address else self.address,
            birthday=self.birthday,
            credit_card=self.credit_card,
        )
