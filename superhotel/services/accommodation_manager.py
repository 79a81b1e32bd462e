import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ..clock import Clock, SystemClock
from ..db import make_sessionmaker
from ..exceptions import EntityNotFoundError, InvalidEntityError, ValidationError
from ..models import Accommodation, Guest, Room, to_amount
from .transactions import session_scope

logger = logging.getLogger(__name__)


class AccommodationManager:
    """
    Stays of guests in rooms.
    A stay is "current" when its date range, both ends included, contains
    today's date as reported by the injected clock.
    """

    def __init__(self, engine: Engine, clock: Clock | None = None):
        self.engine = engine
        self.clock = clock or SystemClock()
        self.sessions = make_sessionmaker(engine)

    @staticmethod
    def _validate(acc: Accommodation | None) -> None:
        if acc is None:
            raise ValidationError("accommodation is None")
        if acc.guest is None:
            raise ValidationError("accommodation guest is None")
        if acc.room is None:
            raise ValidationError("accommodation room is None")
        if acc.guest.id is None:
            raise ValidationError("accommodation guest has not been stored yet")
        if acc.room.id is None:
            raise ValidationError("accommodation room has not been stored yet")
        if acc.date_from is None or acc.date_to is None:
            raise ValidationError("accommodation dates are missing")
        if acc.date_from > acc.date_to:
            raise ValidationError(f"accommodation starts {acc.date_from} after it ends {acc.date_to}")
        if acc.total_price is None:
            raise ValidationError("accommodation total price is missing")
        if to_amount(acc.total_price) < 0:
            raise ValidationError(f"accommodation total price {acc.total_price} is negative")

    @staticmethod
    def _fill(db: Session, stored: Accommodation, acc: Accommodation) -> None:
        """Copy the caller's stay onto a session-bound one, resolving guest and room in this session."""
        guest = db.get(Guest, acc.guest.id)
        if not guest:
            raise ValidationError(f"guest {acc.guest.id} does not exist")
        room = db.get(Room, acc.room.id)
        if not room:
            raise ValidationError(f"room {acc.room.id} does not exist")
        stored.guest = guest
        stored.room = room
        stored.date_from = acc.date_from
        stored.date_to = acc.date_to
        stored.total_price = to_amount(acc.total_price)

    def create_accommodation(self, acc: Accommodation) -> None:
        """Store a new stay and assign its id. The caller must not set one."""
        self._validate(acc)
        if acc.id is not None:
            raise InvalidEntityError(f"accommodation already has id {acc.id}")
        with session_scope(self.sessions, "creating accommodation") as db:
            stored = Accommodation()
            self._fill(db, stored, acc)
            db.add(stored)
            db.flush()
            new_id = stored.id
        acc.id = new_id
        logger.info(
            "Created accommodation %s: guest %s in room %s from %s to %s",
            acc.id, acc.guest.id, acc.room.id, acc.date_from, acc.date_to,
        )

    def update_accommodation(self, acc: Accommodation) -> None:
        """Write every field of the stay over the stored one with the same id."""
        if acc is not None and acc.id is None:
            raise InvalidEntityError("accommodation id is None")
        self._validate(acc)
        with session_scope(self.sessions, f"updating accommodation {acc.id}") as db:
            stored = db.get(Accommodation, acc.id)
            if not stored:
                raise EntityNotFoundError(f"accommodation {acc.id} was not found")
            self._fill(db, stored, acc)
        logger.info("Updated accommodation %s", acc.id)

    def delete_accommodation(self, acc: Accommodation) -> None:
        if acc is None:
            raise ValidationError("accommodation is None")
        if acc.id is None:
            raise InvalidEntityError("accommodation id is None")
        with session_scope(self.sessions, f"deleting accommodation {acc.id}") as db:
            stored = db.get(Accommodation, acc.id)
            if not stored:
                raise EntityNotFoundError(f"accommodation {acc.id} was not found")
            db.delete(stored)
        logger.info("Deleted accommodation %s", acc.id)

    def find_accommodation_by_id(self, acc_id: int | None) -> Accommodation | None:
        if acc_id is None:
            return None
        with session_scope(self.sessions, f"finding accommodation {acc_id}") as db:
            return db.get(Accommodation, acc_id)

    def find_all_accommodations(self) -> list[Accommodation]:
        with session_scope(self.sessions, "listing accommodations") as db:
            return list(db.scalars(select(Accommodation).order_by(Accommodation.id)))

    def find_accommodations_by_guest(self, guest: Guest) -> list[Accommodation]:
        if guest is None or guest.id is None:
            return []
        with session_scope(self.sessions, f"listing accommodations of guest {guest.id}") as db:
            return list(db.scalars(
                select(Accommodation).where(Accommodation.guest_id == guest.id).order_by(Accommodation.id)
            ))

    def find_accommodations_by_room(self, room: Room) -> list[Accommodation]:
        if room is None or room.id is None:
            return []
        with session_scope(self.sessions, f"listing accommodations of room {room.id}") as db:
            return list(db.scalars(
                select(Accommodation).where(Accommodation.room_id == room.id).order_by(Accommodation.id)
            ))

    def find_room_by_guest(self, guest: Guest) -> Room | None:
        """
        Room of the guest's current stay, or None when the guest is not
        staying anywhere today. The latest stay wins if several are current.
        """
        if guest is None or guest.id is None:
            return None
        today = self.clock.today()
        query = (
            select(Room)
            .join(Accommodation, Accommodation.room_id == Room.id)
            .where(Accommodation.guest_id == guest.id, Accommodation.date_from <= today, Accommodation.date_to >= today)
            .order_by(Accommodation.id.desc())
            .limit(1)
        )
        with session_scope(self.sessions, f"finding room of guest {guest.id}") as db:
            return db.scalars(query).first()

    def find_guest_by_room(self, room: Room) -> Guest | None:
        """Guest of the room's current stay, or None when the room is empty today."""
        if room is None or room.id is None:
            return None
        today = self.clock.today()
        query = (
            select(Guest)
            .join(Accommodation, Accommodation.guest_id == Guest.id)
            .where(Accommodation.room_id == room.id, Accommodation.date_from <= today, Accommodation.date_to >= today)
            .order_by(Accommodation.id.desc())
            .limit(1)
        )
        with session_scope(self.sessions, f"finding guest of room {room.id}") as db:
            return db.scalars(query).first()

    def is_room_free(self, room: Room, date_from: date, date_to: date) -> bool:
        """
        True when no stay of the room overlaps [date_from, date_to].
        Informational: create_accommodation does not enforce it.
        """
        if room is None or room.id is None:
            raise ValidationError("room has not been stored yet")
        if date_from > date_to:
            raise ValidationError(f"range starts {date_from} after it ends {date_to}")
        query = (
            select(Accommodation.id)
            .where(Accommodation.room_id == room.id, Accommodation.date_from <= date_to, Accommodation.date_to >= date_from)
            .limit(1)
        )
        with session_scope(self.sessions, f"checking availability of room {room.id}") as db:
            conflict = db.scalar(query)
        return conflict is None
