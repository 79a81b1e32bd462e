from datetime import date
from decimal import Decimal

import pytest

from superhotel.clock import FixedClock, SystemClock
from superhotel.exceptions import ValidationError
from superhotel.models import AccommodationBuilder, GuestBuilder, RoomBuilder, to_amount


@pytest.mark.parametrize(
    "value, expected",
    [
        (200, Decimal("200.00")),
        (750.13, Decimal("750.13")),
        ("12.345", Decimal("12.35")),
        (Decimal("0.1"), Decimal("0.10")),
        (None, None),
    ],
)
def test_to_amount(value, expected):
    assert to_amount(value) == expected


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), "abc", Decimal("NaN")])
def test_to_amount_rejects_values_that_are_not_amounts(value):
    with pytest.raises(ValidationError):
        to_amount(value)


def test_builder_rejects_infinite_total_price():
    with pytest.raises(ValidationError):
        AccommodationBuilder(date_from=date(2016, 2, 28), date_to=date(2016, 3, 1), total_price=float("inf")).build()


def test_builder_strips_text_fields():
    guest = GuestBuilder(name="  john ", address=" Brno ", birthday=date(1996, 11, 23)).build()
    assert guest.name == "john"
    assert guest.address == "Brno"
    assert guest.id is None


def test_entities_compare_by_value():
    one = RoomBuilder(name="Luxury", price=400, capacity=2).build()
    two = RoomBuilder(name="Luxury", price=Decimal("400.00"), capacity=2).build()
    assert one == two
    two.capacity = 3
    assert one != two


def test_fixed_clock():
    assert FixedClock(date(2016, 2, 29)).today() == date(2016, 2, 29)


def test_system_clock_returns_a_date():
    assert isinstance(SystemClock().today(), date)
