from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_accommodation_manager, get_guest_manager, get_room_manager
from ..models import Accommodation, AccommodationBuilder
from ..services import AccommodationManager, GuestManager, RoomManager
from .schemas import AccommodationIn, AccommodationOut

router = APIRouter(prefix="/api/v1/accommodations", tags=["accommodations"])


def require_accommodation(acc_id: int, stays: AccommodationManager) -> Accommodation:
    acc = stays.find_accommodation_by_id(acc_id)
    if not acc:
        raise HTTPException(status_code=404, detail="Accommodation not found")
    return acc


def build_accommodation(payload: AccommodationIn, guests: GuestManager, rooms: RoomManager, acc_id: int | None = None) -> Accommodation:
    # Unknown guest or room ids resolve to None and fail manager validation
    return AccommodationBuilder(
        id=acc_id,
        guest=guests.find_guest_by_id(payload.guest_id),
        room=rooms.find_room_by_id(payload.room_id),
        date_from=payload.date_from,
        date_to=payload.date_to,
        total_price=payload.total_price,
    ).build()


@router.get("", response_model=List[AccommodationOut])
def api_accommodations(guest_id: Optional[int] = None, room_id: Optional[int] = None, stays: AccommodationManager = Depends(get_accommodation_manager), guests: GuestManager = Depends(get_guest_manager), rooms: RoomManager = Depends(get_room_manager)):
    if guest_id is not None:
        return stays.find_accommodations_by_guest(guests.find_guest_by_id(guest_id))
    if room_id is not None:
        return stays.find_accommodations_by_room(rooms.find_room_by_id(room_id))
    return stays.find_all_accommodations()

@router.post("", response_model=AccommodationOut, status_code=201)
def api_create_accommodation(payload: AccommodationIn, stays: AccommodationManager = Depends(get_accommodation_manager), guests: GuestManager = Depends(get_guest_manager), rooms: RoomManager = Depends(get_room_manager)):
    acc = build_accommodation(payload, guests, rooms)
    stays.create_accommodation(acc)
    return acc

@router.get("/{acc_id}", response_model=AccommodationOut)
def api_accommodation(acc_id: int, stays: AccommodationManager = Depends(get_accommodation_manager)):
    return require_accommodation(acc_id, stays)

@router.put("/{acc_id}", response_model=AccommodationOut)
def api_update_accommodation(acc_id: int, payload: AccommodationIn, stays: AccommodationManager = Depends(get_accommodation_manager), guests: GuestManager = Depends(get_guest_manager), rooms: RoomManager = Depends(get_room_manager)):
    require_accommodation(acc_id, stays)
    acc = build_accommodation(payload, guests, rooms, acc_id=acc_id)
    stays.update_accommodation(acc)
    return acc

@router.delete("/{acc_id}", status_code=204)
def api_delete_accommodation(acc_id: int, stays: AccommodationManager = Depends(get_accommodation_manager)):
    stays.delete_accommodation(require_accommodation(acc_id, stays))
    return Response(status_code=204)
