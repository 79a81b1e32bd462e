from fastapi import Depends
from sqlalchemy.engine import Engine

from .clock import Clock, SystemClock
from .db import get_engine
from .services import AccommodationManager, GuestManager, RoomManager


def get_clock() -> Clock:
    return SystemClock()


def get_guest_manager(engine: Engine = Depends(get_engine), clock: Clock = Depends(get_clock)) -> GuestManager:
    return GuestManager(engine, clock)


def get_room_manager(engine: Engine = Depends(get_engine)) -> RoomManager:
    return RoomManager(engine)


def get_accommodation_manager(engine: Engine = Depends(get_engine), clock: Clock = Depends(get_clock)) -> AccommodationManager:
    return AccommodationManager(engine, clock)
