import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine

from ..db import make_sessionmaker
from ..exceptions import EntityNotFoundError, InvalidEntityError, ValidationError
from ..models import Accommodation, Room, to_amount
from .transactions import session_scope

logger = logging.getLogger(__name__)


class RoomManager:
    def __init__(self, engine: Engine):
        self.engine = engine
        self.sessions = make_sessionmaker(engine)

    @staticmethod
    def _validate(room: Room | None) -> None:
        if room is None:
            raise ValidationError("room is None")
        if not room.name:
            raise ValidationError("room name is empty")
        if room.price is None:
            raise ValidationError("room price is missing")
        if to_amount(room.price) < 0:
            raise ValidationError(f"room price {room.price} is negative")
        if room.capacity is None or room.capacity <= 0:
            raise ValidationError(f"room capacity must be positive, got {room.capacity}")

    def create_room(self, room: Room) -> None:
        self._validate(room)
        if room.id is not None:
            raise InvalidEntityError(f"room already has id {room.id}")
        room.price = to_amount(room.price)
        with session_scope(self.sessions, "creating room") as db:
            db.add(room)
            db.flush()
        logger.info("Created room %s (%s)", room.id, room.name)

    def update_room(self, room: Room) -> None:
        if room is not None and room.id is None:
            raise InvalidEntityError("room id is None")
        self._validate(room)
        with session_scope(self.sessions, f"updating room {room.id}") as db:
            stored = db.get(Room, room.id)
            if not stored:
                raise EntityNotFoundError(f"room {room.id} was not found")
            stored.name = room.name
            stored.price = to_amount(room.price)
            stored.capacity = room.capacity
        logger.info("Updated room %s", room.id)

    def delete_room(self, room: Room) -> None:
        if room is None:
            raise ValidationError("room is None")
        if room.id is None:
            raise InvalidEntityError("room id is None")
        with session_scope(self.sessions, f"deleting room {room.id}") as db:
            stay_id = db.scalar(select(Accommodation.id).where(Accommodation.room_id == room.id).limit(1))
            if stay_id is not None:
                raise ValidationError(f"room {room.id} still has accommodations")
            stored = db.get(Room, room.id)
            if not stored:
                raise EntityNotFoundError(f"room {room.id} was not found")
            db.delete(stored)
        logger.info("Deleted room %s", room.id)

    def find_room_by_id(self, room_id: int | None) -> Room | None:
        if room_id is None:
            return None
        with session_scope(self.sessions, f"finding room {room_id}") as db:
            return db.get(Room, room_id)

    def find_all_rooms(self) -> list[Room]:
        with session_scope(self.sessions, "listing rooms") as db:
            return list(db.scalars(select(Room).order_by(Room.id)))
