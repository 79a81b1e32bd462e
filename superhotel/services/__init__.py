from .guest_manager import GuestManager
from .room_manager import RoomManager
from .accommodation_manager import AccommodationManager
