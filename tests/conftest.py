from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from superhotel.clock import FixedClock
from superhotel.db import create_schema, drop_schema, make_engine
from superhotel.models import AccommodationBuilder, GuestBuilder, RoomBuilder
from superhotel.services import AccommodationManager, GuestManager, RoomManager

NOW = date(2016, 2, 29)


@pytest.fixture
def engine():
    """Fresh in-memory database with the schema created, dropped after the test."""
    eng = make_engine("sqlite://")
    create_schema(eng)
    yield eng
    drop_schema(eng)
    eng.dispose()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def guest_manager(engine, clock) -> GuestManager:
    return GuestManager(engine, clock)


@pytest.fixture
def room_manager(engine) -> RoomManager:
    return RoomManager(engine)


@pytest.fixture
def manager(engine, clock) -> AccommodationManager:
    return AccommodationManager(engine, clock)


@pytest.fixture
def hotel(guest_manager: GuestManager, room_manager: RoomManager) -> SimpleNamespace:
    """Five stored guests and three stored rooms, nobody accommodated yet."""
    h = SimpleNamespace(
        john=GuestBuilder(name="john", address="Manesova 120, Brno", birthday=date(1996, 11, 23), credit_card=1234).build(),
        jane=GuestBuilder(name="jane", address="Filkukova 42, Brno", birthday=date(2008, 2, 29), credit_card=12345).build(),
        jack=GuestBuilder(name="jack", address="Hrncirska 23, Brno", birthday=date(1997, 8, 10), credit_card=1234567).build(),
        phoebe=GuestBuilder(name="phoebe", address="5th Avenue 21, New York", birthday=date(1974, 12, 5), credit_card=12345678).build(),
        jefrey=GuestBuilder(name="jefrey", address="Green Street 12, Springfield", birthday=date(1987, 5, 30), credit_card=123456789).build(),
        economy=RoomBuilder(name="Economy", price=Decimal("200.00"), capacity=3).build(),
        luxury=RoomBuilder(name="Luxury", price=Decimal("400.00"), capacity=2).build(),
        penthouse=RoomBuilder(name="Penthouse", price=Decimal("2200.00"), capacity=4).build(),
    )
    for guest in (h.john, h.jane, h.jack, h.phoebe, h.jefrey):
        guest_manager.create_guest(guest)
    for room in (h.economy, h.luxury, h.penthouse):
        room_manager.create_room(room)
    return h


@pytest.fixture
def acc1_builder(hotel) -> AccommodationBuilder:
    return AccommodationBuilder(
        guest=hotel.john,
        room=hotel.economy,
        date_from=date(2016, 2, 28),
        date_to=date(2016, 3, 1),
        total_price=Decimal("200.00"),
    )


@pytest.fixture
def acc2_builder(hotel) -> AccommodationBuilder:
    return AccommodationBuilder(
        guest=hotel.jane,
        room=hotel.luxury,
        date_from=date(2016, 2, 27),
        date_to=date(2016, 3, 4),
        total_price=Decimal("400.00"),
    )
