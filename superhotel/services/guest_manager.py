import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine

from ..clock import Clock, SystemClock
from ..db import make_sessionmaker
from ..exceptions import EntityNotFoundError, InvalidEntityError, ValidationError
from ..models import Accommodation, Guest
from .transactions import session_scope

logger = logging.getLogger(__name__)


class GuestManager:
    def __init__(self, engine: Engine, clock: Clock | None = None):
        self.engine = engine
        self.clock = clock or SystemClock()
        self.sessions = make_sessionmaker(engine)

    def _validate(self, guest: Guest | None) -> None:
        if guest is None:
            raise ValidationError("guest is None")
        if not guest.name:
            raise ValidationError("guest name is empty")
        if guest.birthday is None:
            raise ValidationError("guest birthday is missing")
        if guest.birthday > self.clock.today():
            raise ValidationError(f"guest birthday {guest.birthday} is in the future")
        if guest.credit_card is not None and guest.credit_card < 0:
            raise ValidationError("credit card number is negative")

    def create_guest(self, guest: Guest) -> None:
        self._validate(guest)
        if guest.id is not None:
            raise InvalidEntityError(f"guest already has id {guest.id}")
        with session_scope(self.sessions, "creating guest") as db:
            db.add(guest)
            db.flush()
        logger.info("Created guest %s (%s)", guest.id, guest.name)

    def update_guest(self, guest: Guest) -> None:
        if guest is not None and guest.id is None:
            raise InvalidEntityError("guest id is None")
        self._validate(guest)
        with session_scope(self.sessions, f"updating guest {guest.id}") as db:
            stored = db.get(Guest, guest.id)
            if not stored:
                raise EntityNotFoundError(f"guest {guest.id} was not found")
            stored.name = guest.name
            stored.address = guest.address
            stored.birthday = guest.birthday
            stored.credit_card = guest.credit_card
        logger.info("Updated guest %s", guest.id)

    def delete_guest(self, guest: Guest) -> None:
        if guest is None:
            raise ValidationError("guest is None")
        if guest.id is None:
            raise InvalidEntityError("guest id is None")
        with session_scope(self.sessions, f"deleting guest {guest.id}") as db:
            stay_id = db.scalar(select(Accommodation.id).where(Accommodation.guest_id == guest.id).limit(1))
            if stay_id is not None:
                raise ValidationError(f"guest {guest.id} still has accommodations")
            stored = db.get(Guest, guest.id)
            if not stored:
                raise EntityNotFoundError(f"guest {guest.id} was not found")
            db.delete(stored)
        logger.info("Deleted guest %s", guest.id)

    def find_guest_by_id(self, guest_id: int | None) -> Guest | None:
        if guest_id is None:
            return None
        with session_scope(self.sessions, f"finding guest {guest_id}") as db:
            return db.get(Guest, guest_id)

    def find_all_guests(self) -> list[Guest]:
        with session_scope(self.sessions, "listing guests") as db:
            return list(db.scalars(select(Guest).order_by(Guest.id)))

    def find_guests_by_name(self, name: str) -> list[Guest]:
        with session_scope(self.sessions, f"finding guests named {name!r}") as db:
            return list(db.scalars(select(Guest).where(Guest.name == name).order_by(Guest.id)))
