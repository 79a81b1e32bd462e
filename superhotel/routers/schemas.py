from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel

# ==== Guests ====

class GuestIn(BaseModel):
    name: str
    address: Optional[str] = None
    birthday: date
    credit_card: Optional[int] = None

class GuestOut(GuestIn):
    id: int

    class Config:
        from_attributes = True

# ==== Rooms ====

class RoomIn(BaseModel):
    name: str
    price: Decimal
    capacity: int

class RoomOut(RoomIn):
    id: int

    class Config:
        from_attributes = True

class AvailabilityOut(BaseModel):
    room_id: int
    date_from: date
    date_to: date
    free: bool

# ==== Accommodations ====

class AccommodationIn(BaseModel):
    guest_id: int
    room_id: int
    date_from: date
    date_to: date
    total_price: Decimal

class AccommodationOut(BaseModel):
    id: int
    guest: GuestOut
    room: RoomOut
    date_from: date
    date_to: date
    total_price: Decimal

    class Config:
        from_attributes = True
