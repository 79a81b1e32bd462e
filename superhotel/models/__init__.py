from .guest import Guest, GuestBuilder
from .room import Room, RoomBuilder
from .accommodation import Accommodation, AccommodationBuilder
from .money import to_amount
